"""Typed errors raised by the answer and verse pipelines.

Every error carries a display ``message`` that can be shown to the user as-is,
an ``error_type`` key into :class:`FallbackResponses` and the HTTP status the
API layer reports for it.
"""
from typing import List, Optional

from core.services.errors.fallback_responses import FallbackResponses


class BibleQAError(Exception):
    """Base class for all pipeline errors."""

    error_type = "completion_failed"
    status_code = 502

    def __init__(self, message: Optional[str] = None):
        self.message = message or FallbackResponses.get_response(self.error_type)
        super().__init__(self.message)


class ModelRefusedError(BibleQAError):
    """The model answered with prose instead of a JSON object.

    The model's own text is kept verbatim so the user sees its explanation.
    """

    error_type = "model_refused"
    status_code = 422

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MalformedResponseError(BibleQAError):
    error_type = "malformed_response"
    status_code = 502


class InvalidSchemaError(BibleQAError):
    """Parsed response does not have the answer shape and cannot be repaired."""

    error_type = "invalid_schema"
    status_code = 422

    def __init__(self, issues: List[str], message: Optional[str] = None):
        self.issues = list(issues)
        super().__init__(message)


class IncompleteAnswerError(BibleQAError):
    error_type = "incomplete_answer"
    status_code = 422


class NoResponseError(BibleQAError):
    error_type = "no_response"
    status_code = 502


class CompletionFailedError(BibleQAError):
    error_type = "completion_failed"
    status_code = 502


class EmptyQuestionError(BibleQAError):
    error_type = "empty_question"
    status_code = 400


class InvalidReferenceFormatError(BibleQAError):
    error_type = "invalid_reference_format"
    status_code = 400


class VerseFetchFailedError(BibleQAError):
    """Verse lookup returned a non-2xx status or the transport failed."""

    error_type = "verse_fetch_failed"
    status_code = 502

    def __init__(self, status: Optional[int] = None):
        self.status = status
        message = FallbackResponses.get_response(self.error_type)
        if status is not None:
            message = f"{message} (Status: {status})"
        super().__init__(message)


class VerseNotFoundError(BibleQAError):
    error_type = "verse_not_found"
    status_code = 404


class VerseLookupError(BibleQAError):
    error_type = "verse_lookup_failed"
    status_code = 502
