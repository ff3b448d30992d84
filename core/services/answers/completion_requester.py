"""Chat-completion collaborator: question in, raw model text out."""
from typing import Any, Optional

from langchain_core.language_models import BaseChatModel
from langchain_openai import ChatOpenAI

from core.services.errors.exceptions import CompletionFailedError, NoResponseError
from core.services.prompts.prompt_builder import PromptBuilder
from core.utils.logger import logger
from app.config import settings


class CompletionRequester:
    """Send one question to the chat model with the fixed system instruction."""

    def __init__(
        self,
        llm: Optional[BaseChatModel] = None,
        prompt_builder: Optional[PromptBuilder] = None
    ):
        self._llm = llm
        self.prompt_builder = prompt_builder or PromptBuilder()

    @property
    def llm(self) -> BaseChatModel:
        """Chat model, built from settings on first use."""
        if self._llm is None:
            # A missing key is not checked here; the client reports it as an auth failure
            kwargs = {"api_key": settings.OPENAI_API_KEY} if settings.OPENAI_API_KEY else {}
            self._llm = ChatOpenAI(
                model=settings.OPENAI_MODEL,
                temperature=settings.OPENAI_TEMPERATURE,
                **kwargs,  # type: ignore
            )
            logger.info(f"Chat model initialized: {settings.OPENAI_MODEL}")
        return self._llm

    def submit(self, question: str) -> str:
        """
        Ask the model a question.

        Args:
            question: User question, sent as the only user message

        Returns:
            Raw response text, which may or may not be JSON

        Raises:
            NoResponseError: The model returned empty content
            CompletionFailedError: The client or endpoint failed
        """
        messages = self.prompt_builder.build_messages(question)
        try:
            response = self.llm.invoke(messages)
        except Exception as e:
            logger.error(f"Completion request failed: {str(e)}")
            raise CompletionFailedError() from e

        content = self._extract_content(response)
        if not content.strip():
            raise NoResponseError()
        return content

    def _extract_content(self, response: Any) -> str:
        """Extract content from LLM response."""
        if hasattr(response, "content"):
            content = response.content
            return str(content) if content else ""
        return str(response) if response else ""
