"""Verse service: reference → normalize → fetch → clean."""
from typing import Optional

from core.models.verse import VerseContent
from core.services.errors.error_handler import ErrorHandler
from core.services.verses.reference_normalizer import ReferenceNormalizer
from core.services.verses.verse_fetcher import VerseFetcher
from core.utils.text_utils import clean_verse_text
from core.utils.logger import logger


class VerseService:
    """Look up display-ready verse text for a citation or typed reference."""

    def __init__(self, fetcher: Optional[VerseFetcher] = None):
        self.fetcher = fetcher or VerseFetcher()

    def get_verse_content(self, reference: str) -> str:
        """
        Get cleaned verse text.

        Args:
            reference: Loosely formatted reference, e.g. a verse citation's title

        Returns:
            Single-paragraph verse text

        Raises:
            BibleQAError: Invalid reference or failed lookup, with a display message
        """
        return self.lookup(reference).content

    def lookup(self, reference: str) -> VerseContent:
        """Same as :meth:`get_verse_content`, also returning the canonical reference."""
        try:
            canonical = ReferenceNormalizer.normalize(reference)
            raw_text = self.fetcher.fetch(canonical)
            content = clean_verse_text(raw_text)
            logger.info(f"Fetched verse {canonical!r}")
            return VerseContent(title=reference, reference=canonical, content=content)
        except Exception as e:
            error = ErrorHandler.handle_verse_error(e, str(reference))
            if error is e:
                raise
            raise error from e
