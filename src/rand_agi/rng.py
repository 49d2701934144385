"""Thin helpers over an injected ``numpy.random.Generator``.

Anything with numpy's ``integers(low, high=None)`` and ``random(size=None)``
semantics works, which lets tests script exact draws.
"""

from typing import Optional, Sequence, TypeVar

import numpy as np

T = TypeVar("T")


def resolve_rng(rng: Optional[np.random.Generator] = None) -> np.random.Generator:
    return np.random.default_rng() if rng is None else rng


def pick(rng, options: Sequence[T]) -> T:
    """Uniform choice that keeps the element's Python type."""
    return options[int(rng.integers(len(options)))]


def randint(rng, low: int, high: int) -> int:
    """Uniform int in the closed range [low, high]."""
    return int(rng.integers(low, high + 1))


def coin_flip(rng) -> bool:
    return bool(rng.random() > 0.5)
