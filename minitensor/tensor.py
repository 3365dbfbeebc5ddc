"""
Defines the Tensor object for MiniTensor.

A Tensor owns a flat, row-major Python list of elements plus a shape tuple.
Elementwise ``+``/``-`` broadcast like NumPy, ``*``/``/`` take a scalar,
``dot`` handles 1-D operands and ``reshape`` reinterprets the buffer in place.
The module also holds the package-level creation functions (``tensor``,
``zeros``, ``ones``, ``full``, ``rand``, ``randn``).
"""

import copy
import logging
import numbers
import operator
import sys
from typing import Any, Callable, Generic, List, Optional, Protocol, Sequence, TypeVar, Union

import numpy as np

from . import config
from .device import Device
from .errors import (
    DivisionByZeroError,
    DotShapeMismatchError,
    InvalidShapeError,
    ReshapeSizeMismatchError,
)
from .utils import (
    Shape,
    broadcast_shapes,
    broadcast_source_index,
    flat_index,
    normalize_shape,
    numel,
    unravel_index,
)

logger = logging.getLogger(__name__)


class SupportsArithmetic(Protocol):
    """Element types a Tensor can hold: +, -, *, / and comparison with zero."""

    def __add__(self, other: Any) -> Any: ...
    def __sub__(self, other: Any) -> Any: ...
    def __mul__(self, other: Any) -> Any: ...
    def __truediv__(self, other: Any) -> Any: ...
    def __eq__(self, other: object) -> bool: ...


T = TypeVar("T", bound=SupportsArithmetic)

DeviceLike = Union[Device, str]


def _is_scalar(value) -> bool:
    return isinstance(value, numbers.Number)


def _as_indices(indices) -> tuple:
    return tuple(operator.index(i) for i in indices)


class Tensor(Generic[T]):
    """
    MiniTensor Tensor object.

    Stores a multi-dimensional array of numbers in a flat row-major buffer.

    Args:
        shape (Sequence[int]): Size of each dimension. ``()`` builds a rank-0
            tensor holding one element.
        fill (T, optional): Value every element starts with. Defaults to 0.
        device (Device or str, optional): Device tag. Defaults to ``Device.CPU``.
            The tag is never used to pick an execution path.
    """

    def __init__(self, shape: Sequence[int], fill: T = 0, device: DeviceLike = Device.CPU) -> None:
        self._shape: Shape = normalize_shape(shape)
        self._device = Device.parse(device)
        self._data: List[T] = [fill] * numel(self._shape)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Allocated tensor shape=%s size=%d device=%s", self._shape, len(self._data), self._device)

    @classmethod
    def _wrap(cls, shape: Shape, data: List[T], device: Device) -> "Tensor[T]":
        # takes ownership of ``data``; callers pass a fresh list
        obj = cls.__new__(cls)
        obj._shape = shape
        obj._data = data
        obj._device = device
        return obj

    # --- Accessors ---

    @property
    def shape(self) -> Shape:
        return self._shape

    @property
    def ndim(self) -> int:
        return len(self._shape)

    @property
    def device(self) -> Device:
        return self._device

    def size(self) -> int:
        """Total number of elements."""
        return len(self._data)

    # --- Element access ---

    def at(self, indices: Sequence[int]) -> T:
        """
        Read the element at ``indices``.

        Raises:
            InvalidIndexArityError: If ``len(indices)`` differs from the rank.
            IndexOutOfRangeError: If a component falls outside its dimension.
        """
        return self._data[flat_index(_as_indices(indices), self._shape)]

    def set_at(self, indices: Sequence[int], value: T) -> None:
        """Overwrite the element at ``indices`` in place. Raises like :meth:`at`."""
        self._data[flat_index(_as_indices(indices), self._shape)] = value

    def __getitem__(self, key) -> T:
        if not isinstance(key, tuple):
            key = (key,)
        return self.at(key)

    def __setitem__(self, key, value: T) -> None:
        if not isinstance(key, tuple):
            key = (key,)
        self.set_at(key, value)

    # Tensors are indexed by full coordinates only; refuse the legacy
    # __getitem__ iteration protocol.
    __iter__ = None

    # numpy scalars and arrays defer to the Tensor operators instead of
    # turning the result into an ndarray.
    __array_ufunc__ = None

    # --- Broadcasting arithmetic ---

    def _coerce(self, other) -> Optional["Tensor"]:
        if isinstance(other, Tensor):
            return other
        if _is_scalar(other):
            return Tensor._wrap((), [other], self._device)
        return None

    def _broadcast_op(self, other: "Tensor", op: Callable[[Any, Any], Any]) -> "Tensor[T]":
        result_shape = broadcast_shapes(self._shape, other._shape)
        if self._shape == other._shape:
            data = [op(a, b) for a, b in zip(self._data, other._data)]
        else:
            logger.debug(
                "Broadcasting %s and %s to %s", list(self._shape), list(other._shape), list(result_shape)
            )
            data = []
            for i in range(numel(result_shape)):
                coords = unravel_index(i, result_shape)
                a = self._data[broadcast_source_index(coords, result_shape, self._shape)]
                b = other._data[broadcast_source_index(coords, result_shape, other._shape)]
                data.append(op(a, b))
        return Tensor._wrap(result_shape, data, self._device)

    def add(self, other: Union["Tensor[T]", T]) -> "Tensor[T]":
        """
        Elementwise sum with broadcasting.

        Args:
            other (Tensor or scalar): Right operand. A scalar acts as a rank-0 tensor.

        Returns:
            Tensor: New tensor of the broadcast shape, tagged with this tensor's device.

        Raises:
            ShapeBroadcastError: If the shapes cannot be broadcast together.
        """
        rhs = self._coerce(other)
        if rhs is None:
            raise TypeError(f"Cannot add {type(other).__name__} to Tensor")
        return self._broadcast_op(rhs, operator.add)

    def subtract(self, other: Union["Tensor[T]", T]) -> "Tensor[T]":
        """Elementwise difference with broadcasting. See :meth:`add`."""
        rhs = self._coerce(other)
        if rhs is None:
            raise TypeError(f"Cannot subtract {type(other).__name__} from Tensor")
        return self._broadcast_op(rhs, operator.sub)

    def __add__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._broadcast_op(rhs, operator.add)

    def __radd__(self, other):
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs._broadcast_op(self, operator.add)

    def __sub__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._broadcast_op(rhs, operator.sub)

    def __rsub__(self, other):
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs._broadcast_op(self, operator.sub)

    # --- Scalar arithmetic ---

    def _map(self, fn: Callable[[T], Any]) -> "Tensor[T]":
        return Tensor._wrap(self._shape, [fn(x) for x in self._data], self._device)

    def scale(self, scalar: T) -> "Tensor[T]":
        """Multiply every element by ``scalar``; returns a new tensor."""
        if not _is_scalar(scalar):
            raise TypeError(f"scale expects a scalar, got {type(scalar).__name__}")
        return self._map(lambda x: x * scalar)

    def divide_scalar(self, scalar: T) -> "Tensor[T]":
        """
        Divide every element by ``scalar`` (true division); returns a new tensor.

        Raises:
            DivisionByZeroError: If ``scalar == 0``.
        """
        if not _is_scalar(scalar):
            raise TypeError(f"divide_scalar expects a scalar, got {type(scalar).__name__}")
        if scalar == 0:
            raise DivisionByZeroError()
        return self._map(lambda x: x / scalar)

    def __mul__(self, other):
        if not _is_scalar(other):
            return NotImplemented
        return self._map(lambda x: x * other)

    def __rmul__(self, other):
        if not _is_scalar(other):
            return NotImplemented
        return self._map(lambda x: other * x)

    def __truediv__(self, other):
        if not _is_scalar(other):
            return NotImplemented
        return self.divide_scalar(other)

    def __neg__(self):
        return self._map(operator.neg)

    # --- Dot product ---

    def dot(self, other: "Tensor[T]") -> T:
        """
        Inner product of two 1-D tensors of equal length.

        Products are summed in index order, starting from the zero of the
        element type (``self[0] * 0``). Empty tensors carry no element to
        take the type from, so their dot product is the int ``0``.

        Raises:
            DotShapeMismatchError: If either operand is not 1-D or the lengths differ.
        """
        if not isinstance(other, Tensor):
            raise TypeError(f"dot expects a Tensor, got {type(other).__name__}")
        if len(self._shape) != 1 or len(other._shape) != 1 or self._shape[0] != other._shape[0]:
            raise DotShapeMismatchError(self._shape, other._shape)
        result = self._data[0] * 0 if self._data else 0
        for a, b in zip(self._data, other._data):
            result += a * b
        return result

    # --- Shape manipulation ---

    def reshape(self, *shape) -> None:
        """
        Reinterpret the buffer under a new shape, in place.

        Accepts ``reshape(3, 2)`` or ``reshape((3, 2))``. The buffer is never
        reordered.

        Raises:
            ReshapeSizeMismatchError: If the new shape holds a different
                number of elements; the tensor is left unchanged.
        """
        new_shape = _shape_args(shape)
        if numel(new_shape) != len(self._data):
            raise ReshapeSizeMismatchError(new_shape, len(self._data))
        logger.debug("Reshape %s -> %s", list(self._shape), list(new_shape))
        self._shape = new_shape

    # --- Copying and conversion ---

    def clone(self) -> "Tensor[T]":
        """Independent copy with its own buffer, same shape and device."""
        return Tensor._wrap(self._shape, list(self._data), self._device)

    def __copy__(self):
        return self.clone()

    def __deepcopy__(self, memo):
        return Tensor._wrap(self._shape, copy.deepcopy(self._data, memo), self._device)

    def flat(self) -> List[T]:
        """Copy of the linear buffer in storage order."""
        return list(self._data)

    def tolist(self):
        """Nested lists following the shape; a bare element for rank 0."""
        if not self._shape:
            return self._data[0]

        def build(dim: int, start: int):
            if dim == len(self._shape) - 1:
                return self._data[start:start + self._shape[dim]]
            step = numel(self._shape[dim + 1:])
            return [build(dim + 1, start + i * step) for i in range(self._shape[dim])]

        return build(0, 0)

    def numpy(self) -> np.ndarray:
        """Copy of the tensor as a NumPy array of the same shape."""
        return np.array(self._data).reshape(self._shape)

    def __array__(self, dtype=None, copy=None):
        arr = self.numpy()
        if dtype is not None:
            arr = arr.astype(dtype)
        return arr

    # --- Text ---

    def to_debug_string(self) -> str:
        shape = ", ".join(str(d) for d in self._shape)
        values = ", ".join(str(v) for v in self._data)
        return f"Tensor (device: {self._device}, shape: [{shape}]): [{values}]"

    def print(self, file=None) -> None:
        """Write :meth:`to_debug_string` and a newline to ``file`` (stdout by default)."""
        out = file if file is not None else sys.stdout
        out.write(self.to_debug_string() + "\n")

    def __str__(self):
        return self.to_debug_string()

    def __repr__(self):
        opts = config.get_printoptions()
        body = np.array2string(
            self.numpy(),
            separator=", ",
            threshold=opts.threshold,
            edgeitems=opts.edgeitems,
            precision=opts.precision,
            prefix="tensor(",
        )
        return f"tensor({body}, device={self._device})"


# --- Creation functions ---

def _shape_args(shape: tuple) -> Shape:
    # zeros(2, 3) and zeros((2, 3)) are both accepted
    if len(shape) == 1 and not isinstance(shape[0], numbers.Integral):
        shape = shape[0]
    return normalize_shape(shape)


def tensor(data, device: Optional[DeviceLike] = None) -> Tensor:
    """
    Build a Tensor from a scalar, nested sequences or a NumPy array.

    The data is always copied. Elements come out as Python scalars.

    Args:
        data: Scalar, (nested) list/tuple, ``numpy.ndarray`` or Tensor.
        device (Device or str, optional): Device tag. Defaults to CPU, or to
            the source's device when ``data`` is a Tensor.

    Raises:
        InvalidShapeError: If the nested sequences are ragged.
        TypeError: If an element is not a number.
    """
    if isinstance(data, Tensor):
        result = data.clone()
        if device is not None:
            result._device = Device.parse(device)
        return result
    try:
        arr = np.asarray(data)
    except ValueError:
        raise InvalidShapeError(data, "ragged nested sequence") from None
    if arr.dtype.kind not in "biufcO":
        raise TypeError(f"Tensor elements must be numbers, got dtype {arr.dtype}")
    values = arr.ravel().tolist()
    if arr.dtype.kind == "O":
        for v in values:
            if isinstance(v, (list, tuple)):
                raise InvalidShapeError(data, "ragged nested sequence")
            if not _is_scalar(v):
                raise TypeError(f"Tensor elements must be numbers, got {type(v).__name__}")
    return Tensor._wrap(tuple(int(d) for d in arr.shape), values, Device.parse(device or Device.CPU))


def full(shape: Sequence[int], fill, device: DeviceLike = Device.CPU) -> Tensor:
    """Tensor of ``shape`` with every element set to ``fill``."""
    return Tensor(normalize_shape(shape), fill, device)


def zeros(*shape, device: DeviceLike = Device.CPU) -> Tensor:
    return Tensor(_shape_args(shape), 0.0, device)


def ones(*shape, device: DeviceLike = Device.CPU) -> Tensor:
    return Tensor(_shape_args(shape), 1.0, device)


def rand(*shape, device: DeviceLike = Device.CPU, seed: Optional[int] = None) -> Tensor:
    """Uniform samples from ``[0, 1)`` drawn with ``numpy.random.default_rng(seed)``."""
    dims = _shape_args(shape)
    rng = np.random.default_rng(seed)
    return Tensor._wrap(dims, rng.random(numel(dims)).tolist(), Device.parse(device))


def randn(*shape, device: DeviceLike = Device.CPU, seed: Optional[int] = None) -> Tensor:
    """Standard normal samples drawn with ``numpy.random.default_rng(seed)``."""
    dims = _shape_args(shape)
    rng = np.random.default_rng(seed)
    return Tensor._wrap(dims, rng.standard_normal(numel(dims)).tolist(), Device.parse(device))


__all__ = [
    "SupportsArithmetic",
    "Tensor",
    "tensor",
    "full",
    "zeros",
    "ones",
    "rand",
    "randn",
]
