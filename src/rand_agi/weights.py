import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .config import DEFAULT_WEIGHT_COUNT, MAX_PARAMS
from .rng import resolve_rng

__all__ = [
    "WeightBuffer",
    "generate_weights",
    "sanitize_param_count",
]

# (upper bound on the style draw, half-width of the value range)
INIT_STYLES = (
    (0.4, math.sqrt(6 / 1000)),  # Xavier/Glorot-like
    (0.7, math.sqrt(2 / 500)),  # He-like
    (0.9, 0.05),  # small random
    (1.0, 1.0),  # occasional large values
)


@dataclass(frozen=True, slots=True)
class WeightBuffer:
    # float32 values, length actual_params
    data: np.ndarray
    # sanitized requested count; may exceed what was materialized
    total_params: int
    actual_params: int
    truncated: bool

    @property
    def nbytes(self) -> int:
        return self.actual_params * 4

    def to_bytes(self) -> bytes:
        """Raw little-endian float32 payload."""
        return self.data.astype("<f4", copy=False).tobytes()


def sanitize_param_count(total_params) -> int:
    """max(1, floor(total) or 10000); None, NaN and infinities count as 0.

    ex) sanitize_param_count(1234.9) -> 1234
    ex) sanitize_param_count(0) -> 10000
    ex) sanitize_param_count(-5) -> 1
    """
    if total_params is None:
        return DEFAULT_WEIGHT_COUNT
    if isinstance(total_params, (int, np.integer)):
        count = int(total_params)
    else:
        value = float(total_params)
        if not math.isfinite(value):
            return DEFAULT_WEIGHT_COUNT
        count = math.floor(value)
    return max(1, count or DEFAULT_WEIGHT_COUNT)


def generate_weights(total_params, rng: Optional[np.random.Generator] = None) -> WeightBuffer:
    """Random weights for a model of ``total_params`` parameters.

    At most MAX_PARAMS values are materialized. Each value picks one of the
    INIT_STYLES with a second uniform draw and is centred on zero.
    """
    rng = resolve_rng(rng)
    safe_total = sanitize_param_count(total_params)
    actual = min(safe_total, MAX_PARAMS)

    values = np.asarray(rng.random(actual), dtype=np.float64)
    styles = np.asarray(rng.random(actual), dtype=np.float64)

    # Widest bound first so narrower styles overwrite it.
    scale = np.empty(actual, dtype=np.float64)
    for bound, half_width in reversed(INIT_STYLES):
        scale[styles < bound] = half_width
    data = ((values - 0.5) * 2 * scale).astype(np.float32)

    return WeightBuffer(
        data=data,
        total_params=safe_total,
        actual_params=actual,
        truncated=safe_total > MAX_PARAMS,
    )
