"""
Unified Exception Hierarchy for the evolution demo.

All exceptions inherit from EvolutionSystemError, enabling consistent error
handling in the CLI and in library callers.

Usage:
    from core.exceptions import EvolutionSystemError, ConfigurationError

    try:
        config = load_evolution_config()
    except ConfigurationError as e:
        # Bad YAML or out-of-range values; nothing has run yet
        report(e.error_code, e.context)
    except EvolutionSystemError as e:
        # Catch-all for system errors
        log_error(e)
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional


# =============================================================================
# BASE EXCEPTION
# =============================================================================

class EvolutionSystemError(Exception):
    """
    Base exception for all errors raised by this package.

    Attributes:
        error_code: Unique identifier for this error type
        is_recoverable: Whether the caller can fix the input and retry
        context: Additional context about the error
        timestamp: When the error occurred
    """
    error_code: str = "SYSTEM_ERROR"
    is_recoverable: bool = True

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        self.message = message
        self.context = context or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc)
        super().__init__(message)

    def __str__(self) -> str:
        base = f"[{self.error_code}] {self.message}"
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base = f"{base} ({ctx_str})"
        return base

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "is_recoverable": self.is_recoverable,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
            "cause": str(self.cause) if self.cause else None,
        }


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================

class ConfigurationError(EvolutionSystemError):
    """
    Base class for configuration-related errors.
    """
    error_code = "CONFIG_ERROR"


class SettingsValidationError(ConfigurationError):
    """
    Raised when settings fail schema validation.

    Uses Pydantic validation under the hood.
    """
    error_code = "SETTINGS_INVALID"


class MissingConfigError(ConfigurationError):
    """
    Raised when an explicitly requested config file does not exist.
    """
    error_code = "CONFIG_MISSING"


class ConfigParseError(ConfigurationError):
    """
    Raised when a config file is not valid YAML or is not a mapping.
    """
    error_code = "CONFIG_PARSE_ERROR"


# =============================================================================
# EVOLUTION ERRORS
# =============================================================================

class EvolutionError(EvolutionSystemError):
    """
    Base class for errors in the generational loop.
    """
    error_code = "EVOLUTION_ERROR"


class InvalidNodeError(EvolutionError):
    """
    Raised when a node has the wrong shape for the operation.

    Examples:
    - Creating a node with width < 1
    - Resetting a population to a template of a different width
    - Scoring a node too narrow for the fitness function
    """
    error_code = "INVALID_NODE"
    is_recoverable = False


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def get_error_code(error: Exception) -> str:
    """
    Get the error code for an exception.

    Returns:
        Error code string, or "UNKNOWN" for foreign exceptions
    """
    if isinstance(error, EvolutionSystemError):
        return error.error_code
    return "UNKNOWN"
