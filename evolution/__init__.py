"""
Evolution by mutation and winner selection.

A population of fixed-width nodes is mutated, scored against a pure fitness
function, and reset to copies of the single best node, generation after
generation.
"""

from __future__ import annotations

from config.settings_schema import EvolutionConfig
from .fitness import FitnessFunction, compare, sigmoid
from .node import Node
from .population import GenerationStats, Population
from .rng import RandomSource, make_rng
from .runner import EvolutionResult, format_progress, run_evolution

__all__ = [
    # Configuration
    'EvolutionConfig',
    # Fitness
    'FitnessFunction',
    'compare',
    'sigmoid',
    # Nodes and populations
    'Node',
    'Population',
    'GenerationStats',
    # Randomness
    'RandomSource',
    'make_rng',
    # Driver
    'EvolutionResult',
    'format_progress',
    'run_evolution',
]
