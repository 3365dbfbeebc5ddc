"""
MiniTensor - a small generic tensor library in pure Python.

This package provides a Tensor object with row-major storage, NumPy-style
broadcasting for addition and subtraction, scalar multiplication and
division, a 1-D dot product and in-place reshape.
"""

import sys

# --- Check Dependencies ---
# numpy backs tensor creation, conversion and repr; fail early with a hint.
try:
    import numpy
except ImportError as e:
    print("Error: NumPy is required for MiniTensor but could not be imported.", file=sys.stderr)
    print("Please install NumPy: pip install numpy", file=sys.stderr)
    raise e from None


# --- Re-export Core Components ---

from .device import Device
from .errors import (
    DivisionByZeroError,
    DotShapeMismatchError,
    IndexOutOfRangeError,
    InvalidIndexArityError,
    InvalidShapeError,
    ReshapeSizeMismatchError,
    ShapeBroadcastError,
    TensorError,
)
from .tensor import SupportsArithmetic, Tensor, full, ones, rand, randn, tensor, zeros
from .config import PrintOptions, get_printoptions, printoptions, set_printoptions
from . import utils

# --- Version Information ---
try:
    from importlib.metadata import PackageNotFoundError, version as _dist_version
    __version__ = _dist_version("minitensor")
except PackageNotFoundError:
    # Not installed; should match version in setup.py
    __version__ = "0.1.0"

# --- Clean up namespace ---
del sys
del numpy

__all__ = [
    # Core
    "Tensor",
    "Device",
    "SupportsArithmetic",
    "__version__",
    # Creation Ops
    "tensor",
    "full",
    "zeros",
    "ones",
    "rand",
    "randn",
    # Errors
    "TensorError",
    "InvalidShapeError",
    "InvalidIndexArityError",
    "IndexOutOfRangeError",
    "ShapeBroadcastError",
    "DivisionByZeroError",
    "ReshapeSizeMismatchError",
    "DotShapeMismatchError",
    # Print options
    "PrintOptions",
    "get_printoptions",
    "set_printoptions",
    "printoptions",
    # Submodules
    "utils",
]
