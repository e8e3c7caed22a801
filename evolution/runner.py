"""
Driver loop for a fixed number of generations.

Progress for generation ``i`` is reported before it is advanced, so the
first line always shows the all-zero starting node and line ``i`` shows
the state produced by step ``i - 1``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from config.settings_schema import EvolutionConfig
from core.structured_log import jlog
from evolution.fitness import FitnessFunction, compare
from evolution.node import Node
from evolution.population import GenerationStats, Population
from evolution.rng import RandomSource

logger = logging.getLogger(__name__)


@dataclass
class EvolutionResult:
    """Outcome of a finished run."""
    population: Population
    best_node: Node
    best_fitness: float
    history: List[GenerationStats] = field(default_factory=list)

    @property
    def generations(self) -> int:
        return len(self.history)


def format_progress(generation: int, node: Node, fitness: float) -> str:
    """One progress line, e.g. ``1: 0.5 | Arr: [0.0, 0.0]``."""
    return f"{generation}: {fitness} | Arr: {node.values}"


def run_evolution(
    config: Optional[EvolutionConfig] = None,
    fitness_function: FitnessFunction = compare,
    rng: Optional[RandomSource] = None,
    emit: Optional[Callable[[str], None]] = print,
    structured_log: bool = False,
) -> EvolutionResult:
    """
    Run the simulation for ``config.generations`` steps.

    Args:
        config: Run parameters; reference values if omitted
        fitness_function: Scoring policy shared by reporting and selection
        rng: Random source handed to the population
        emit: Sink for progress lines; None disables them
        structured_log: Also write start/complete events as JSON lines

    Returns:
        EvolutionResult with the final population and per-generation stats
    """
    config = config or EvolutionConfig()
    population = Population(config, fitness_function=fitness_function, rng=rng)

    logger.info(
        f"Starting evolution for {config.generations} generations, "
        f"population_size={config.population_size}, mutation_range={config.mutation_range}"
    )
    if structured_log:
        jlog("evolution_start", **config.model_dump())

    for generation in range(1, config.generations + 1):
        node = population.representative
        if emit is not None:
            emit(format_progress(generation, node, fitness_function(node)))
        population.advance_generation()

    best_node = population.representative.clone()
    best_fitness = fitness_function(best_node)

    logger.info(f"Evolution complete. Fitness: {best_fitness:.4f}, values={best_node.values}")
    if structured_log:
        jlog(
            "evolution_complete",
            generations=population.generation,
            best_fitness=best_fitness,
            best_values=best_node.values,
        )

    return EvolutionResult(
        population=population,
        best_node=best_node,
        best_fitness=best_fitness,
        history=list(population.history),
    )
