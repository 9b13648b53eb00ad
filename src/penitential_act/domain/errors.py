"""Domain errors — custom exceptions for the Penitential Act generator.

These exceptions are raised by domain services and the application layer
and caught by the presentation layer. They carry no infrastructure
dependencies.
"""


class PenitentialActError(Exception):
    """Base exception for all Penitential Act generator errors."""


class MissingArgumentsError(PenitentialActError):
    """Raised when fewer than the required positional inputs are supplied."""


class InvalidYearError(PenitentialActError):
    """Raised when the liturgical year is not A, B, or C."""


class MissingSeasonError(PenitentialActError):
    """Raised when a Sunday celebration is given without a season."""


class RenderFailureError(PenitentialActError):
    """Raised when document rendering or writing fails."""


class ConfigurationError(PenitentialActError):
    """Raised when configuration is invalid or missing."""
