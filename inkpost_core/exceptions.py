"""Custom exceptions for Inkpost Core.

Every exception carries a human-readable ``message`` and an optional
``details`` dict. The Flask error handlers in ``main.py`` turn them into
JSON responses; the status code and body shape for each type are fixed
by the public API contract.
"""


class InkpostError(Exception):
    """Base exception for all Inkpost errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(InkpostError):
    """Request data failed to parse or validate."""


class MissingRequiredField(ValidationError):
    """A required blog field was absent or empty."""


class DuplicateEmail(InkpostError):
    """Registration attempted with an email that already has an account."""


class InvalidCredentials(InkpostError):
    """Login failed.

    Raised both for an unknown email and for a wrong password, so callers
    cannot tell the two apart.
    """


class StorageError(InkpostError):
    """Unexpected failure in the persistence layer."""


class StartupConfigError(InkpostError):
    """Required configuration is missing or malformed."""
