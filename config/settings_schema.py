"""
Typed Settings Schema (Pydantic)
================================

Provides typed, validated configuration for the evolution demo. The
free-standing constants of a simulation run (population size, mutation
severity, generation count, node width) live in one immutable model that is
handed to the Population and the driver loop.

Usage:
    from config.settings_schema import load_evolution_config

    # Defaults from base.yaml
    config = load_evolution_config()

    # Defaults plus CLI overrides
    config = load_evolution_config(overrides={"generations": 5})
    config.population_size  # -> 10
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from config.settings_loader import load_settings, read_yaml
from core.exceptions import SettingsValidationError

logger = logging.getLogger(__name__)


# ============================================================================
# Schema Definitions
# ============================================================================

class EvolutionConfig(BaseModel):
    """Immutable parameters of one simulation run."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    population_size: int = Field(
        default=10, ge=1,
        description="The amount of nodes in a generation"
    )
    mutation_range: float = Field(
        default=1.0, ge=0,
        description="Severity of mutations"
    )
    generations: int = Field(
        default=100, ge=0,
        description="How many generations the simulation lasts"
    )
    node_width: int = Field(
        default=2, ge=2,
        description="Values per node; compare() reads indices 0 and 1"
    )
    seed: Optional[int] = Field(
        default=None,
        description="Seed for the default random source"
    )


class LoggingConfig(BaseModel):
    """Console and structured logging configuration."""
    model_config = ConfigDict(frozen=True)

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    structured: bool = False
    log_dir: str = "logs"


class Settings(BaseModel):
    """Complete settings schema."""
    model_config = ConfigDict(extra="allow")

    evolution: EvolutionConfig = Field(default_factory=EvolutionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# ============================================================================
# Validation Functions
# ============================================================================

def _validate(raw: Dict[str, Any]) -> Settings:
    try:
        return Settings.model_validate(raw)
    except ValidationError as e:
        logger.error(f"Settings validation failed: {e}")
        raise SettingsValidationError(
            "Settings validation failed",
            context={"errors": "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )},
            cause=e,
        ) from e


def load_validated_settings(path: str | Path | None = None) -> Settings:
    """
    Load and validate settings from base.yaml (or an explicit file).

    Raises:
        MissingConfigError: If an explicit path does not exist
        ConfigParseError: If the file is not a YAML mapping
        SettingsValidationError: If settings are invalid
    """
    raw = read_yaml(path) if path is not None else load_settings()
    return _validate(raw)


def load_evolution_config(
    overrides: Optional[Dict[str, Any]] = None,
    path: str | Path | None = None,
) -> EvolutionConfig:
    """
    Build an EvolutionConfig from YAML defaults plus explicit overrides.

    Overrides whose value is None are ignored so CLI flags that were not
    given fall through to the file.
    """
    raw = read_yaml(path) if path is not None else load_settings()
    evolution = raw.get("evolution") or {}
    if isinstance(evolution, dict):
        evolution = dict(evolution)
        for key, value in (overrides or {}).items():
            if value is not None:
                evolution[key] = value
    merged = {**raw, "evolution": evolution}
    return _validate(merged).evolution
