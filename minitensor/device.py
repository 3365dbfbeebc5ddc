"""
Defines the Device tag carried by every MiniTensor Tensor.

The tag is metadata only: tensors tagged ``GPU`` are stored and computed
exactly like ``CPU`` ones.
"""

import enum
from typing import Union


class Device(enum.Enum):
    CPU = "CPU"
    GPU = "GPU"  # placeholder, no GPU execution path

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, value: Union["Device", str]) -> "Device":
        """Return the Device for ``value``, a Device or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise ValueError(f"Unknown device {value!r}, expected one of {[d.value for d in cls]}")


__all__ = [
    "Device",
]
