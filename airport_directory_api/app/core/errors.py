"""
Error types raised by the airport directory.

Each request-level error carries the fixed, human readable message that
is returned to HTTP clients.  They derive from ``ValueError`` so that
callers may catch them the same way as the other services in this
project signal bad input.
"""


class AirportDirectoryError(ValueError):
    """Base class for directory errors."""

    message = "airport directory error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class ValidationError(AirportDirectoryError):
    """A required field (``icao``, ``name`` or ``city``) is missing or empty."""

    message = "airport must have icao, name and city"


class DuplicateKeyError(AirportDirectoryError):
    """The ``icao`` is already used by another record."""

    message = "airport must have unique icao"


class NotFoundError(AirportDirectoryError):
    message = "invalid icao"


class InvalidRangeError(AirportDirectoryError):
    """Requested page falls outside the directory."""

    message = "invalid search params"


class SeedDataError(AirportDirectoryError):
    message = "invalid airport seed data"
