"""Shared test doubles for the chat model and the verse API transport."""
import json
from typing import Any, List, Optional

import pytest
import requests
from langchain_core.messages import AIMessage

from core.services.answers.answer_service import AnswerService
from core.services.answers.completion_requester import CompletionRequester
from core.services.verses.verse_fetcher import VerseFetcher


class FakeChatModel:
    """Chat model stand-in returning a canned completion."""

    def __init__(self, content: str = "", error: Optional[Exception] = None):
        self.content = content
        self.error = error
        self.calls: List[Any] = []

    def invoke(self, messages):
        self.calls.append(messages)
        if self.error:
            raise self.error
        return AIMessage(content=self.content)


class FakeResponse:
    """Minimal ``requests.Response`` stand-in."""

    def __init__(self, status_code: int = 200, payload: Any = None, body: Optional[str] = None):
        self.status_code = status_code
        self._payload = payload
        self._body = body

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self):
        if self._body is not None:
            return json.loads(self._body)
        return self._payload


class FakeSession:
    """Records GET calls and replays one response or error."""

    def __init__(self, response: Optional[FakeResponse] = None, error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.calls: List[dict] = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.error:
            raise self.error
        return self.response


def make_completion(payload: dict) -> str:
    return json.dumps(payload)


@pytest.fixture
def valid_payload() -> dict:
    return {
        "text": "God loves you so much!",
        "references": [
            {"type": "verse", "title": "John 3:16", "link": "https://www.biblegateway.com/passage/?search=John+3:16"},
            {"type": "book", "title": "Grace Walk", "link": "https://example.com/grace-walk"},
            {"type": "article", "title": "What is grace?", "link": "https://www.gotquestions.org/grace.html"},
        ],
    }


@pytest.fixture
def answer_service_for():
    """Build an AnswerService whose chat model returns the given text."""
    def _build(content: str = "", error: Optional[Exception] = None) -> AnswerService:
        llm = FakeChatModel(content=content, error=error)
        return AnswerService(completion_requester=CompletionRequester(llm=llm))
    return _build


@pytest.fixture
def fetcher_for():
    """Build a VerseFetcher over a fake session."""
    def _build(response: Optional[FakeResponse] = None, error: Optional[Exception] = None) -> VerseFetcher:
        return VerseFetcher(
            session=FakeSession(response=response, error=error),
            base_url="https://bible-api.com",
            translation="kjv",
            timeout=5.0,
        )
    return _build


@pytest.fixture
def connection_error() -> Exception:
    return requests.ConnectionError("connection refused")
