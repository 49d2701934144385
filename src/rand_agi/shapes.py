"""Rank-aware helpers for layer shapes.

Shapes are plain tuples of positive ints with rank 1 (features), 2
(sequence, features) or 3 (height, width, channels).
"""

from math import prod

Shape = tuple[int, ...]

# Stand-in width when a layer receives an empty shape.
FALLBACK_DIM = 256


def as_shape(dims) -> Shape:
    """ex) as_shape([28, 28, np.int64(1)]) -> (28, 28, 1)"""
    return tuple(int(d) for d in dims)


def flatten_size(shape: Shape) -> int:
    """ex) flatten_size((4, 4, 8)) -> 128
    ex) flatten_size(()) -> 256
    """
    if not shape:
        return FALLBACK_DIM
    return prod(shape)


def last_dimension(shape: Shape) -> int:
    """ex) last_dimension((128, 512)) -> 512"""
    if not shape:
        return FALLBACK_DIM
    return shape[-1]


def dim_or_default(shape: Shape, axis: int, default: int) -> int:
    """Dimension at ``axis``, or ``default`` when the shape has lower rank.

    ex) dim_or_default((32, 32), 2, 3) -> 3
    """
    if axis < len(shape):
        return shape[axis]
    return default
