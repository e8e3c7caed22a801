"""
Shared test doubles.
"""

from typing import Iterable


class SequenceRandom:
    """Random source that replays scripted draws, cycling when exhausted."""

    def __init__(self, draws: Iterable[float]):
        self.draws = list(draws)
        self.calls = 0

    def random(self) -> float:
        value = self.draws[self.calls % len(self.draws)]
        self.calls += 1
        return value
