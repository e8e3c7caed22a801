"""
Candidate solutions for the generational loop.

A Node is a fixed-width vector of floats. Mutation nudges exactly one value
and squashes it back through the sigmoid, so values stay inside (0, 1) once
touched.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List

import numpy as np

from core.exceptions import InvalidNodeError
from evolution.fitness import sigmoid
from evolution.rng import RandomSource


@dataclass(eq=False)
class Node:
    """One candidate point in the search space."""
    data: np.ndarray

    @classmethod
    def new(cls, width: int = 2) -> "Node":
        """All-zero node of the given width."""
        if width < 1:
            raise InvalidNodeError("Node width must be positive", context={"width": width})
        return cls(np.zeros(width, dtype=np.float64))

    @property
    def width(self) -> int:
        return int(self.data.shape[0])

    @property
    def values(self) -> List[float]:
        """Copy of the values as plain floats."""
        return self.data.tolist()

    def __len__(self) -> int:
        return self.width

    def __getitem__(self, index: int) -> float:
        return float(self.data[index])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return bool(np.array_equal(self.data, other.data))

    def clone(self) -> "Node":
        """Independent copy; mutating it never touches this node."""
        return Node(self.data.copy())

    def mutate(self, rng: RandomSource, mutation_range: float = 1.0) -> int:
        """
        Randomly modify one value in place.

        Draws ``amount`` first, then the index. The index is clamped to the
        last slot because ``draw * width`` can round up to ``width``.

        Returns:
            The index that was modified
        """
        amount = rng.random()
        index = min(int(math.floor(rng.random() * self.width)), self.width - 1)
        self.data[index] = sigmoid(self.data[index] + (amount - 0.5) * mutation_range)
        return index

    def __repr__(self) -> str:
        return f"Node({self.values})"
