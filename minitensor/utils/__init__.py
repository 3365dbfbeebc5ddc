"""
MiniTensor Utilities Submodule (`minitensor.utils`)

Shape arithmetic shared by the Tensor implementation: element counts,
row-major index flattening and broadcasting. All helpers work on plain
tuples of ints so they can be tested without building tensors.
"""

import operator
from typing import Iterable, List, Sequence, Tuple

from ..errors import (
    IndexOutOfRangeError,
    InvalidIndexArityError,
    InvalidShapeError,
    ShapeBroadcastError,
)

Shape = Tuple[int, ...]


def normalize_shape(shape: Iterable[int]) -> Shape:
    """
    Convert ``shape`` to a tuple of non-negative Python ints.

    Raises:
        InvalidShapeError: If ``shape`` is not iterable or holds anything but
            non-negative integers (``bool`` is rejected).
    """
    try:
        dims = list(shape)
    except TypeError:
        raise InvalidShapeError(shape, "expected a sequence of dimension sizes") from None
    result = []
    for dim in dims:
        if isinstance(dim, bool):
            raise InvalidShapeError(shape)
        try:
            dim = operator.index(dim)
        except TypeError:
            raise InvalidShapeError(shape) from None
        if dim < 0:
            raise InvalidShapeError(shape)
        result.append(dim)
    return tuple(result)


def numel(shape: Sequence[int]) -> int:
    """Number of elements held by ``shape``; the empty shape holds one."""
    size = 1
    for dim in shape:
        size *= dim
    return size


def flat_index(indices: Sequence[int], shape: Sequence[int]) -> int:
    """
    Row-major flat position of ``indices`` inside ``shape``.

    Raises:
        InvalidIndexArityError: If ``len(indices) != len(shape)``.
        IndexOutOfRangeError: If some component is negative or ``>= shape[d]``.
    """
    if len(indices) != len(shape):
        raise InvalidIndexArityError(indices, tuple(shape))
    flat = 0
    stride = 1
    for d in range(len(shape) - 1, -1, -1):
        idx = indices[d]
        if idx < 0 or idx >= shape[d]:
            raise IndexOutOfRangeError(indices, tuple(shape), d)
        flat += idx * stride
        stride *= shape[d]
    return flat


def unravel_index(flat: int, shape: Sequence[int]) -> List[int]:
    """Inverse of :func:`flat_index` for an in-range ``flat``."""
    coords = [0] * len(shape)
    for d in range(len(shape) - 1, -1, -1):
        dim = shape[d]
        coords[d] = flat % dim
        flat //= dim
    return coords


def broadcast_shapes(shape_a: Sequence[int], shape_b: Sequence[int]) -> Shape:
    """
    Shape produced by broadcasting ``shape_a`` against ``shape_b``.

    Shapes are right-aligned and the shorter one is padded with leading 1s.
    Each aligned pair must be equal or contain a 1; the result takes the
    other member of the pair.

    Raises:
        ShapeBroadcastError: If some aligned pair is incompatible.
    """
    ndim = max(len(shape_a), len(shape_b))
    result = []
    for i in range(ndim):
        dim_a = shape_a[len(shape_a) - 1 - i] if i < len(shape_a) else 1
        dim_b = shape_b[len(shape_b) - 1 - i] if i < len(shape_b) else 1
        if dim_a == dim_b or dim_b == 1:
            result.append(dim_a)
        elif dim_a == 1:
            result.append(dim_b)
        else:
            raise ShapeBroadcastError(tuple(shape_a), tuple(shape_b))
    result.reverse()
    return tuple(result)


def broadcast_source_index(coords: Sequence[int], result_shape: Sequence[int], shape: Sequence[int]) -> int:
    """
    Flat position, inside an operand of ``shape``, of the element feeding the
    output coordinate ``coords`` of ``result_shape``.

    The operand is right-aligned against the result. A coordinate collapses
    to 0 wherever the operand's own dimension is 1 and the result's is wider.
    """
    offset = len(result_shape) - len(shape)
    flat = 0
    stride = 1
    for d in range(len(shape) - 1, -1, -1):
        dim = shape[d]
        coord = coords[offset + d]
        if dim == 1 and result_shape[offset + d] > 1:
            coord = 0
        flat += coord * stride
        stride *= dim
    return flat


__all__ = [
    "Shape",
    "normalize_shape",
    "numel",
    "flat_index",
    "unravel_index",
    "broadcast_shapes",
    "broadcast_source_index",
]
