"""
Exceptions raised by MiniTensor.

Every error derives from :class:`TensorError` and from the matching builtin
exception, so callers can catch either ``TensorError`` or, say, ``IndexError``.
All of them are raised before the failing operation mutates anything.
"""

from typing import Sequence, Tuple


class TensorError(Exception):
    """Base class for all MiniTensor errors."""


class InvalidShapeError(TensorError, ValueError):
    """A shape is not a sequence of non-negative integers, or data is ragged."""

    def __init__(self, shape, reason: str = "dimensions must be non-negative integers"):
        self.shape = shape
        self.reason = reason
        super().__init__(f"Invalid shape {shape!r}: {reason}.")


class InvalidIndexArityError(TensorError, IndexError):
    """Index vector length differs from the tensor rank."""

    def __init__(self, indices: Sequence[int], shape: Tuple[int, ...]):
        self.indices = tuple(indices)
        self.shape = shape
        super().__init__(
            f"Invalid number of indices: got {len(self.indices)} for a tensor of rank {len(shape)}."
        )


class IndexOutOfRangeError(TensorError, IndexError):
    def __init__(self, indices: Sequence[int], shape: Tuple[int, ...], dim: int):
        self.indices = tuple(indices)
        self.shape = shape
        self.dim = dim
        super().__init__(
            f"Index {self.indices[dim]} is out of bounds for dimension {dim} with size {shape[dim]}."
        )


class ShapeBroadcastError(TensorError, ValueError):
    """Two shapes cannot be broadcast together."""

    def __init__(self, shape_a: Tuple[int, ...], shape_b: Tuple[int, ...]):
        self.shape_a = shape_a
        self.shape_b = shape_b
        super().__init__(f"Shapes {list(shape_a)} and {list(shape_b)} cannot be broadcasted.")


class DivisionByZeroError(TensorError, ZeroDivisionError):
    def __init__(self):
        super().__init__("Division by zero.")


class ReshapeSizeMismatchError(TensorError, ValueError):
    """Requested shape holds a different number of elements."""

    def __init__(self, new_shape: Tuple[int, ...], size: int):
        self.new_shape = new_shape
        self.size = size
        super().__init__(
            f"New shape {list(new_shape)} must match the total size {size}."
        )


class DotShapeMismatchError(TensorError, ValueError):
    """Dot product requested on operands that are not 1-D tensors of one length."""

    def __init__(self, shape_a: Tuple[int, ...], shape_b: Tuple[int, ...]):
        self.shape_a = shape_a
        self.shape_b = shape_b
        super().__init__(
            f"Dot product requires 1D tensors of the same size, got {list(shape_a)} and {list(shape_b)}."
        )


__all__ = [
    "TensorError",
    "InvalidShapeError",
    "InvalidIndexArityError",
    "IndexOutOfRangeError",
    "ShapeBroadcastError",
    "DivisionByZeroError",
    "ReshapeSizeMismatchError",
    "DotShapeMismatchError",
]
