#!/usr/bin/env python3
"""
Left/right evolution demo.

Evolves a population of two-value nodes toward the highest reward of
compare() and prints one progress line per generation.

Usage:
    python -m evolution
    python -m evolution --generations 20 --seed 7
    python -m evolution --config my.yaml --quiet
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from config.settings_loader import load_settings
from config.settings_schema import load_evolution_config, load_validated_settings
from core import structured_log
from core.exceptions import ConfigurationError
from evolution.runner import run_evolution

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Evolve nodes by mutation and winner selection'
    )
    parser.add_argument(
        '--generations',
        type=int,
        help='How many generations the simulation lasts (default: from config, 100)'
    )
    parser.add_argument(
        '--population-size',
        type=int,
        help='Nodes per generation (default: from config, 10)'
    )
    parser.add_argument(
        '--mutation-range',
        type=float,
        help='Severity of mutations (default: from config, 1.0)'
    )
    parser.add_argument(
        '--node-width',
        type=int,
        help='Values per node (default: from config, 2)'
    )
    parser.add_argument(
        '--seed',
        type=int,
        help='Seed for reproducible runs'
    )
    parser.add_argument(
        '--config',
        type=str,
        help='Path to a YAML config (default: $LEFTRIGHT_CONFIG_PATH or config/base.yaml)'
    )
    parser.add_argument(
        '--dotenv',
        nargs='?',
        const='.env',
        help='Load environment variables from a .env file (default: .env)'
    )
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Console log level (default: from config, WARNING)'
    )
    parser.add_argument(
        '--structured-log',
        action='store_true',
        help='Write start/complete events to the JSONL events file'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress per-generation lines and print only the final result'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.dotenv:
        load_dotenv(args.dotenv)
        load_settings(force_reload=True)

    try:
        settings = load_validated_settings(args.config)
        config = load_evolution_config(
            overrides={
                'generations': args.generations,
                'population_size': args.population_size,
                'mutation_range': args.mutation_range,
                'node_width': args.node_width,
                'seed': args.seed,
            },
            path=args.config,
        )
    except ConfigurationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=args.log_level or settings.logging.level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    logger.debug(f"Resolved config: {config.model_dump()}")

    use_structured = args.structured_log or settings.logging.structured
    if use_structured:
        structured_log.configure(settings.logging.log_dir)

    result = run_evolution(
        config,
        emit=None if args.quiet else print,
        structured_log=use_structured,
    )

    if args.quiet:
        print(f"{result.generations} generations: {result.best_fitness} | Arr: {result.best_node.values}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
