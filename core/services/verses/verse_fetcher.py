"""Verse lookup collaborator for bible-api.com (public domain KJV)."""
from typing import Optional
from urllib.parse import quote

import requests

from core.services.errors.exceptions import VerseFetchFailedError, VerseNotFoundError
from core.utils.logger import logger
from app.config import settings


class VerseFetcher:
    """Fetch raw verse text for a canonical reference."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        base_url: Optional[str] = None,
        translation: Optional[str] = None,
        timeout: Optional[float] = None
    ):
        self.session = session or requests.Session()
        self.base_url = (base_url or settings.BIBLE_API_BASE_URL).rstrip("/")
        self.translation = translation or settings.BIBLE_API_TRANSLATION
        self.timeout = timeout if timeout is not None else settings.BIBLE_API_TIMEOUT

    def build_url(self, reference: str) -> str:
        """Build the lookup URL for a canonical reference."""
        return f"{self.base_url}/{quote(reference, safe='')}"

    def fetch(self, reference: str) -> str:
        """
        Fetch the raw text of a verse or verse range.

        Args:
            reference: Canonical "Book Chapter:Verse[-Verse]" reference

        Returns:
            Verse text exactly as the API returned it

        Raises:
            VerseFetchFailedError: Transport failure or non-2xx status
            VerseNotFoundError: Response has no usable "text" field
        """
        url = self.build_url(reference)
        logger.debug(f"Fetching verse {reference!r} from {url}")
        try:
            response = self.session.get(
                url,
                params={"translation": self.translation},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Verse request failed for {reference!r}: {str(e)}")
            raise VerseFetchFailedError() from e

        if not response.ok:
            raise VerseFetchFailedError(response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Verse response for {reference!r} is not JSON")
            raise VerseNotFoundError() from e

        text = data.get("text") if isinstance(data, dict) else None
        if not isinstance(text, str) or not text.strip():
            raise VerseNotFoundError()
        return text
