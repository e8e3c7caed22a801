"""
Random sources for mutation.

Anything with a ``random()`` method returning a uniform float in [0, 1)
qualifies: ``numpy.random.Generator``, ``random.Random``, or a scripted
source in tests.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class RandomSource(Protocol):
    """Stream of uniform [0, 1) draws."""

    def random(self) -> float:
        ...


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Default random source; pass a seed for reproducible runs."""
    return np.random.default_rng(seed)
