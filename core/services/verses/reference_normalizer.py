"""
Verse reference normalizer.

Turns loosely formatted input ("john 3 16", "Romans 8:28-29 NIV",
"I love John 3:16 so much") into the canonical ``Book Chapter:Verse[-Verse]``
form the verse API expects.
"""
import re
from typing import Optional

from core.services.errors.exceptions import InvalidReferenceFormatError


class ReferenceNormalizer:
    """
    Rule-based extraction of verse references.

    Supports:
    - Embedded: "I love john 3:16 so much" -> "john 3:16"
    - Ranges: "Romans 8:28-29" -> "Romans 8:28-29"
    - Loose separators: "john 3 16", "Psalm 23.1", "Psalm 23: 1" -> "... 23:1"
    - Translation tags: "John 3:16 KJV" -> "John 3:16"
    - Numbered books: "1 John 4:8" -> "1 John 4:8"
    """

    # One name word, or one of the multi-word book names, optionally numbered
    BOOK = r"(?:[1-3]\s*)?(?:Song\s+of\s+(?:Solomon|Songs)|[A-Za-z]+)"

    REFERENCE_PATTERN = re.compile(
        rf"\b({BOOK})\s+(\d+):(\d+)(?:-(\d+))?\b",
        re.IGNORECASE,
    )

    TRANSLATION_TAGS = re.compile(r"\b(?:kjv|niv|nasb|nlt|esv)\b", re.IGNORECASE)
    WHITESPACE_RUN = re.compile(r"\s+")
    LOOSE_SEPARATOR = re.compile(r"(\d+)[:.]\s*(\d+)")
    SPACE_SEPARATOR = re.compile(r"(\d+)\s+(\d+)")

    @classmethod
    def normalize(cls, reference: str) -> str:
        """
        Normalize a verse reference.

        Args:
            reference: Any user- or model-supplied text

        Returns:
            Canonical "Book Chapter:Verse[-Verse]" string

        Raises:
            InvalidReferenceFormatError: No chapter:verse pattern can be recognized
        """
        if not isinstance(reference, str):
            raise InvalidReferenceFormatError()

        normalized = cls._extract(reference)
        if normalized:
            return normalized

        normalized = cls._extract(cls._clean(reference))
        if normalized:
            return normalized

        raise InvalidReferenceFormatError()

    @classmethod
    def _extract(cls, text: str) -> Optional[str]:
        """Rebuild a reference from the first chapter:verse match, if any."""
        match = cls.REFERENCE_PATTERN.search(text)
        if not match:
            return None

        book, chapter, start_verse, end_verse = match.groups()
        book = cls.WHITESPACE_RUN.sub(" ", book.strip())
        normalized = f"{book} {chapter}:{start_verse}"
        if end_verse:
            normalized += f"-{end_verse}"
        return normalized

    @classmethod
    def _clean(cls, text: str) -> str:
        """Drop translation tags and standardize chapter/verse separators."""
        cleaned = cls.TRANSLATION_TAGS.sub("", text)
        cleaned = cls.WHITESPACE_RUN.sub(" ", cleaned)
        cleaned = cls.LOOSE_SEPARATOR.sub(r"\1:\2", cleaned)
        cleaned = cls.SPACE_SEPARATOR.sub(r"\1:\2", cleaned)
        return cleaned.strip()


def extract_reference(reference: str) -> str:
    """Normalize a verse reference (see :meth:`ReferenceNormalizer.normalize`)."""
    return ReferenceNormalizer.normalize(reference)
