"""Error handling utilities."""
from core.services.errors.exceptions import (
    BibleQAError,
    CompletionFailedError,
    ModelRefusedError,
    VerseLookupError,
)
from core.utils.logger import logger


class ErrorHandler:
    """Centralized conversion of pipeline failures into typed, displayable errors."""

    @staticmethod
    def handle_answer_error(error: Exception, question: str) -> BibleQAError:
        """
        Convert any failure of the answer pipeline into a single typed error.

        Args:
            error: Exception raised anywhere in the pipeline
            question: Question being answered (logged, truncated)

        Returns:
            Error to raise to the caller
        """
        if isinstance(error, ModelRefusedError):
            logger.warning(f"Model declined to answer question: {question[:100]}")
            return error
        if isinstance(error, BibleQAError):
            logger.error(f"Error getting answer ({error.error_type}): {error.message}")
            return error

        logger.error(f"Unexpected error getting answer: {str(error)}", exc_info=True)
        return CompletionFailedError()

    @staticmethod
    def handle_verse_error(error: Exception, reference: str) -> BibleQAError:
        """
        Convert any failure of the verse pipeline into a single typed error.

        Args:
            error: Exception raised anywhere in the pipeline
            reference: Verse reference as supplied by the caller

        Returns:
            Error to raise to the caller
        """
        if isinstance(error, BibleQAError):
            logger.error(f"Error fetching verse '{reference[:100]}' ({error.error_type}): {error.message}")
            return error

        logger.error(f"Unexpected error fetching verse '{reference[:100]}': {str(error)}", exc_info=True)
        return VerseLookupError()
