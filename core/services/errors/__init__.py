"""Error taxonomy, display messages and error handling."""
from core.services.errors.error_handler import ErrorHandler
from core.services.errors.fallback_responses import FallbackResponses
from core.services.errors.exceptions import (
    BibleQAError,
    CompletionFailedError,
    EmptyQuestionError,
    IncompleteAnswerError,
    InvalidReferenceFormatError,
    InvalidSchemaError,
    MalformedResponseError,
    ModelRefusedError,
    NoResponseError,
    VerseFetchFailedError,
    VerseLookupError,
    VerseNotFoundError,
)

__all__ = [
    "ErrorHandler",
    "FallbackResponses",
    "BibleQAError",
    "CompletionFailedError",
    "EmptyQuestionError",
    "IncompleteAnswerError",
    "InvalidReferenceFormatError",
    "InvalidSchemaError",
    "MalformedResponseError",
    "ModelRefusedError",
    "NoResponseError",
    "VerseFetchFailedError",
    "VerseLookupError",
    "VerseNotFoundError",
]
