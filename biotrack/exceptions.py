"""
Domain error kinds.

Services raise these; only the HTTP layer maps them to status codes.
"""

from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    VALIDATION_FAILED = "validation_failed"
    PROCESSING_FAILED = "processing_failed"


class BioTrackError(Exception):
    """Base class for errors raised by the service layer."""

    kind: ErrorKind = ErrorKind.PROCESSING_FAILED

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(BioTrackError):
    """Entity absent."""

    kind = ErrorKind.NOT_FOUND


class ValidationFailedError(BioTrackError):
    """Input violates a required-field or positive-value rule."""

    kind = ErrorKind.VALIDATION_FAILED


class ProcessingFailedError(BioTrackError):
    """A lower-level failure wrapped during a write."""

    kind = ErrorKind.PROCESSING_FAILED
