"""Answer service: question → completion → extraction → validation → resolution."""
from typing import Optional

from core.models.answer import Answer
from core.services.answers.completion_requester import CompletionRequester
from core.services.answers.response_extractor import ResponseExtractor
from core.services.answers.schema_validator import SchemaValidator
from core.services.citations.citation_resolver import CitationResolver
from core.services.errors.error_handler import ErrorHandler
from core.services.errors.exceptions import EmptyQuestionError, IncompleteAnswerError
from core.utils.logger import logger


class AnswerService:
    """
    Answer questions with allow-listed citations.

    Every failure leaves ``get_answer`` as a single typed error with a display
    message; a model refusal keeps the model's own wording.
    """

    def __init__(
        self,
        completion_requester: Optional[CompletionRequester] = None,
        extractor: Optional[ResponseExtractor] = None,
        validator: Optional[SchemaValidator] = None,
        resolver: Optional[CitationResolver] = None
    ):
        self.completion_requester = completion_requester or CompletionRequester()
        self.extractor = extractor or ResponseExtractor()
        self.validator = validator or SchemaValidator()
        self.resolver = resolver or CitationResolver()
        logger.info("Answer service initialized")

    def get_answer(self, question: str) -> Answer:
        """
        Answer a question.

        Args:
            question: User question

        Returns:
            Answer whose references all point into the curated tables

        Raises:
            BibleQAError: Any pipeline failure, with a display message
        """
        try:
            if not question or not question.strip():
                raise EmptyQuestionError()

            raw_response = self.completion_requester.submit(question.strip())
            payload = self.extractor.parse(raw_response)
            candidate = self.validator.validate(payload)

            references = self.resolver.resolve_all(candidate.references)
            if not candidate.text.strip() or not references:
                raise IncompleteAnswerError()

            logger.info(f"Answered question with {len(references)} reference(s)")
            return Answer(text=candidate.text, references=references)
        except Exception as e:
            error = ErrorHandler.handle_answer_error(e, question or "")
            if error is e:
                raise
            raise error from e
