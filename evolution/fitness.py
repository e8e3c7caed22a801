"""
Fitness policies for candidate nodes.

A fitness function maps a node's values to a scalar reward; the population
ranks candidates by it. Policies must be pure and deterministic so a node
scores the same no matter when or how often it is evaluated.
"""

from __future__ import annotations

from typing import Callable, Sequence, Union

import numpy as np
from scipy.special import expit

from core.exceptions import InvalidNodeError

ArrayLike = Union[Sequence[float], np.ndarray]
FitnessFunction = Callable[[object], float]


def sigmoid(x: float) -> float:
    """Logistic function 1 / (1 + e^-x), stable for large |x|."""
    return float(expit(x))


def _as_array(node: object) -> np.ndarray:
    values = getattr(node, "values", node)
    return np.asarray(values, dtype=np.float64)


def compare(node: object) -> float:
    """
    Reward nodes whose second value exceeds the first.

    Accepts a Node or any array-like of floats. Nodes with the lowest
    ``node[0]`` and the highest ``node[1]`` get the most reward, so the
    population drifts toward ``[0, 1]`` without ever seeing this formula.
    """
    arr = _as_array(node)
    if arr.shape[0] < 2:
        raise InvalidNodeError(
            "compare() needs at least two values",
            context={"width": int(arr.shape[0])},
        )
    return sigmoid(arr[1] - arr[0])
