"""
Core Infrastructure
====================

Foundational components shared by the evolution package.

Components:
- exceptions: Unified exception hierarchy
- structured_log: JSON event logging
"""

from .exceptions import (
    EvolutionSystemError,
    ConfigurationError,
    SettingsValidationError,
    MissingConfigError,
    ConfigParseError,
    EvolutionError,
    InvalidNodeError,
    get_error_code,
)
from .structured_log import jlog, read_recent_logs

__all__ = [
    # Exceptions
    'EvolutionSystemError',
    'ConfigurationError',
    'SettingsValidationError',
    'MissingConfigError',
    'ConfigParseError',
    'EvolutionError',
    'InvalidNodeError',
    'get_error_code',
    # Structured Logging
    'jlog',
    'read_recent_logs',
]
