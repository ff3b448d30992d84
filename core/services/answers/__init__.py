"""Answer pipeline services."""
from core.services.answers.answer_service import AnswerService
from core.services.answers.completion_requester import CompletionRequester
from core.services.answers.response_extractor import ResponseExtractor
from core.services.answers.schema_validator import SchemaValidator

__all__ = [
    "AnswerService",
    "CompletionRequester",
    "ResponseExtractor",
    "SchemaValidator",
]
