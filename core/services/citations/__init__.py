"""Citation allow-lists and resolution."""
from core.services.citations.citation_resolver import CitationResolver
from core.services.citations.verified_resources import (
    VERIFIED_BOOKS,
    VERIFIED_COMMENTARIES,
    VERIFIED_DEVOTIONALS,
    VERIFIED_SERMON_TEACHERS,
    VERIFIED_SOURCES,
    is_allow_listed,
)

__all__ = [
    "CitationResolver",
    "VERIFIED_BOOKS",
    "VERIFIED_COMMENTARIES",
    "VERIFIED_DEVOTIONALS",
    "VERIFIED_SERMON_TEACHERS",
    "VERIFIED_SOURCES",
    "is_allow_listed",
]
