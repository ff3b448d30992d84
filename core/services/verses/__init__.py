"""Verse lookup services."""
from core.services.verses.reference_normalizer import ReferenceNormalizer, extract_reference
from core.services.verses.verse_fetcher import VerseFetcher
from core.services.verses.verse_service import VerseService

__all__ = [
    "ReferenceNormalizer",
    "VerseFetcher",
    "VerseService",
    "extract_reference",
]
