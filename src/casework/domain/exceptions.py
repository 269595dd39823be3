"""Domain errors raised while sizing and constructing a cabinet.

All errors are detected before any component is generated. Nothing is
clamped or silently corrected, so a caller either gets a complete component
graph or one of these exceptions.
"""

from __future__ import annotations


class CaseworkError(Exception):
    """Base class for cabinet domain errors.

    Attributes:
        message: Human-readable description of the failure.
        error_type: Short machine-readable category used by the CLI and API.
    """

    error_type = "casework_error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidDimensionError(CaseworkError):
    """A width or height is outside the supported ladder or inconsistent."""

    error_type = "invalid_dimension"


class UnsupportedArchetypeError(CaseworkError):
    """The requested archetype is not one of base, wall or tall."""

    error_type = "unsupported_archetype"


class DegenerateConfigurationError(CaseworkError):
    """The configuration leaves no room for a feature.

    Raised for a negative shelf count, a carcass thickness that consumes the
    whole interior, a shelf-pin window shorter than zero, or a door leaf too
    short to take both hinge cups.
    """

    error_type = "degenerate_configuration"
