"""Failure taxonomy for the transcription pipeline.

Stages raise these; only the Transcriber turns them into a ``Failed`` result.
"""
from enum import Enum

from src.constants import (
    MSG_ERR_FETCH_FAILED,
    MSG_ERR_GENERATION,
    MSG_ERR_INVALID_INPUT,
    MSG_ERR_NOT_FOUND,
    MSG_ERR_UNREACHABLE,
    MSG_ERR_UPLOAD,
)


class ErrorKind(Enum):
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    REMOTE_UNREACHABLE = "remote_unreachable"
    REMOTE_FETCH_FAILED = "remote_fetch_failed"
    UPLOAD_FAILED = "upload_failed"
    GENERATION_FAILED = "generation_failed"
    EMPTY_RESULT = "empty_result"
    UNEXPECTED = "unexpected"


class TranscriptionError(Exception):
    """Base class for pipeline stage failures."""

    kind: ErrorKind = ErrorKind.UNEXPECTED

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class InvalidInputError(TranscriptionError):
    """Raised for a blank source identifier or a buffer with no readable bytes."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, detail: str, cause: Exception | None = None):
        self.detail = detail
        super().__init__(MSG_ERR_INVALID_INPUT % detail, cause)


class NotFoundError(TranscriptionError):
    """Raised when a local path does not exist or cannot be read."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, path: str, cause: Exception | None = None):
        self.path = path
        super().__init__(MSG_ERR_NOT_FOUND % path, cause)


class RemoteUnreachableError(TranscriptionError):
    """Raised when the existence check on a URL fails; ``status`` is ``"unknown"`` without a response."""

    kind = ErrorKind.REMOTE_UNREACHABLE

    def __init__(self, url: str, status: int | str = "unknown", cause: Exception | None = None):
        self.url = url
        self.status = status
        super().__init__(MSG_ERR_UNREACHABLE % (status, url), cause)


class RemoteFetchFailedError(TranscriptionError):
    """Raised when a reachable URL could not be downloaded."""

    kind = ErrorKind.REMOTE_FETCH_FAILED

    def __init__(self, reason: str, cause: Exception | None = None):
        self.reason = reason
        super().__init__(MSG_ERR_FETCH_FAILED % reason, cause)


class UploadFailedError(TranscriptionError):
    kind = ErrorKind.UPLOAD_FAILED

    def __init__(self, detail: str, cause: Exception | None = None):
        super().__init__(MSG_ERR_UPLOAD % detail, cause)


class GenerationFailedError(TranscriptionError):
    kind = ErrorKind.GENERATION_FAILED

    def __init__(self, detail: str, cause: Exception | None = None):
        super().__init__(MSG_ERR_GENERATION % detail, cause)
