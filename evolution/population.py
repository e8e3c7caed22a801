"""
Population of Nodes driven through mutate, score, select and reset.

Every generation each node is mutated once, the single best scorer is
cloned, and the whole population is replaced by copies of that winner.
There is no crossover and no elitism beyond the winner itself: this is
population-wide hill climbing against one fitness function.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np

from config.settings_schema import EvolutionConfig
from core.exceptions import InvalidNodeError
from evolution.fitness import FitnessFunction, compare
from evolution.node import Node
from evolution.rng import RandomSource, make_rng

logger = logging.getLogger(__name__)


@dataclass
class GenerationStats:
    """Fitness of one mutated generation, taken before selection."""
    generation: int
    best_fitness: float
    avg_fitness: float
    worst_fitness: float
    std_fitness: float
    winner_fitness: float
    winner_values: List[float] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'generation': self.generation,
            'best_fitness': self.best_fitness,
            'avg_fitness': self.avg_fitness,
            'worst_fitness': self.worst_fitness,
            'std_fitness': self.std_fitness,
            'winner_fitness': self.winner_fitness,
            'winner_values': self.winner_values,
        }


class Population:
    """
    A fixed-size generation of Nodes.

    The population owns its nodes exclusively. Winners are handed out as
    clones and resets fill the collection with independent copies, so no
    two slots ever share an array.
    """

    def __init__(
        self,
        config: Optional[EvolutionConfig] = None,
        fitness_function: FitnessFunction = compare,
        rng: Optional[RandomSource] = None,
    ):
        """
        Args:
            config: Run parameters (population size, mutation range, width)
            fitness_function: Pure scoring policy used to rank nodes
            rng: Source of uniform [0, 1) draws; seeded from config if omitted
        """
        self.config = config or EvolutionConfig()
        self.fitness_function = fitness_function
        self.rng = rng if rng is not None else make_rng(self.config.seed)

        self.nodes: List[Node] = [
            Node.new(self.config.node_width) for _ in range(self.config.population_size)
        ]
        self.generation = 0
        self.history: List[GenerationStats] = []

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def size(self) -> int:
        return self.config.population_size

    @property
    def representative(self) -> Node:
        """The node reported in progress output."""
        return self.nodes[0]

    def scores(self) -> List[float]:
        """Fitness of every node, in collection order."""
        return [self.fitness_function(node) for node in self.nodes]

    def get_stats(self) -> Dict[str, float]:
        """Get population statistics."""
        fitnesses = self.scores()
        return {
            'best': max(fitnesses),
            'avg': float(np.mean(fitnesses)),
            'worst': min(fitnesses),
            'std': float(np.std(fitnesses)),
        }

    def mutate_all(self) -> None:
        """Randomly mutate every node once."""
        for node in self.nodes:
            node.mutate(self.rng, self.config.mutation_range)

    def get_winner(self) -> Node:
        """
        Return a copy of the best-scoring node.

        The running best starts at a fresh zero node and only a strictly
        greater score replaces it, so the first of several equal scorers
        wins and nothing is selected unless it beats the zero baseline.
        """
        winner = Node.new(self.config.node_width)
        winner_score = self.fitness_function(winner)
        for node in self.nodes:
            score = self.fitness_function(node)
            if score > winner_score:
                winner = node
                winner_score = score
        return winner.clone()

    def reset_to(self, template: Node) -> None:
        """Replace the whole collection with independent copies of template."""
        if template.width != self.config.node_width:
            raise InvalidNodeError(
                "Template width does not match population",
                context={'template_width': template.width, 'node_width': self.config.node_width},
            )
        self.nodes = [template.clone() for _ in range(self.config.population_size)]

    def advance_generation(self) -> Node:
        """
        Go to the next generation: mutate all, pick the winner, reset.

        Returns:
            The winner the population was reset to
        """
        self.mutate_all()
        stats = self.get_stats()
        winner = self.get_winner()
        self.reset_to(winner)

        self.generation += 1
        self.history.append(GenerationStats(
            generation=self.generation,
            best_fitness=stats['best'],
            avg_fitness=stats['avg'],
            worst_fitness=stats['worst'],
            std_fitness=stats['std'],
            winner_fitness=self.fitness_function(winner),
            winner_values=winner.values,
        ))
        logger.debug(
            f"Gen {self.generation}: best={stats['best']:.4f}, "
            f"avg={stats['avg']:.4f}, winner={winner.values}"
        )
        return winner

    def get_convergence_history(self) -> Dict[str, List[float]]:
        """Get the fitness history over generations."""
        return {
            'best': [s.best_fitness for s in self.history],
            'avg': [s.avg_fitness for s in self.history],
            'winner': [s.winner_fitness for s in self.history],
        }
