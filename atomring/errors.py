"""
AtomRing Error Hierarchy

Unified exception hierarchy for consistent error handling across the engine.
All custom exceptions inherit from AtomRingError for easy catching and
filtering. Each concrete error also mixes in the builtin exception a plain
Python caller would expect (ValueError, IndexError, RuntimeError), so
``except IndexError`` keeps working for code that does not know about this
module.

Usage:
    from atomring.errors import FieldIndexError, InvalidStateError

    try:
        field.remove(index)
    except InvalidStateError as e:
        logger.warning(f"Cannot remove: {e.message}")
"""

from typing import Any

__all__ = [
    # Base error
    "AtomRingError",
    # Catalog errors
    "CatalogError",
    # Configuration errors
    "ConfigurationError",
    # Field errors
    "FieldIndexError",
    "InvalidArgumentError",
    "InvalidStateError",
]


class AtomRingError(Exception):
    """Base exception for all AtomRing errors.

    Attributes:
        code: Machine-readable error code for categorization
        message: Human-readable error description
        context: Additional context for debugging
    """
    code: str = "ATOMRING_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# Field Errors
# =============================================================================


class InvalidArgumentError(AtomRingError, ValueError):
    """Missing or malformed argument.

    Raised for a None atom on insert, a None listener, or a field built
    from an empty or None-containing sequence.
    """
    code: str = "INVALID_ARGUMENT"


class FieldIndexError(AtomRingError, IndexError):
    """Index outside the range an operation accepts.

    Attributes:
        index: The offending index
        bounds: Human-readable accepted range, e.g. "[0, 4]"
    """
    code: str = "INDEX_OUT_OF_RANGE"

    def __init__(
        self,
        message: str,
        index: Any = None,
        bounds: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        self.index = index
        self.bounds = bounds
        self.context["index"] = index
        if bounds:
            self.context["bounds"] = bounds


class InvalidStateError(AtomRingError, RuntimeError):
    """Operation not allowed in the field's current state.

    Raised when removing the last atom, which would leave the ring empty.
    """
    code: str = "INVALID_STATE"


# =============================================================================
# Catalog Errors
# =============================================================================


class CatalogError(AtomRingError, IndexError):
    """Periodic table lookup or load failure.

    Raised for atomic numbers past the last known entry and for malformed
    catalog sources.
    """
    code: str = "CATALOG_ERROR"

    def __init__(
        self,
        message: str,
        atomic_number: int | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        if atomic_number is not None:
            self.context["atomic_number"] = atomic_number


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(AtomRingError):
    """Invalid environment configuration."""
    code: str = "CONFIGURATION_ERROR"

    def __init__(
        self,
        message: str,
        variable: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        if variable:
            self.context["variable"] = variable
