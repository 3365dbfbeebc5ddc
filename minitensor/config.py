"""
Print options for ``repr(tensor)``.

Only the summarised ``repr`` honours these options; ``Tensor.to_debug_string``
always lists every element.
"""

import contextlib
import dataclasses
from dataclasses import dataclass


@dataclass
class PrintOptions:
    """Options forwarded to ``numpy.array2string`` when rendering a tensor."""

    threshold: int = 1000  # total elements above which the repr is summarised
    edgeitems: int = 3
    precision: int = 4


_options = PrintOptions()


def get_printoptions() -> PrintOptions:
    """Return a copy of the current print options."""
    return dataclasses.replace(_options)


def set_printoptions(**kwargs) -> None:
    """
    Update the current print options.

    Args:
        threshold (int, optional): Element count above which ``repr`` summarises.
        edgeitems (int, optional): Items kept at each edge of a summarised dimension.
        precision (int, optional): Digits printed for floating point elements.

    Raises:
        TypeError: If an unknown option is given.
    """
    global _options
    fields = {f.name for f in dataclasses.fields(PrintOptions)}
    unknown = set(kwargs) - fields
    if unknown:
        raise TypeError(f"Unknown print option(s): {', '.join(sorted(unknown))}")
    _options = dataclasses.replace(_options, **kwargs)


@contextlib.contextmanager
def printoptions(**kwargs):
    """Temporarily set print options inside a ``with`` block."""
    previous = get_printoptions()
    set_printoptions(**kwargs)
    try:
        yield get_printoptions()
    finally:
        set_printoptions(**dataclasses.asdict(previous))


__all__ = [
    "PrintOptions",
    "get_printoptions",
    "set_printoptions",
    "printoptions",
]
