"""Core services package, organized by pipeline.

Main Services:
- AnswerService: question answering with allow-listed citations
- VerseService: verse lookup for verse citations

Usage:
    from core.services import AnswerService, VerseService

    # For question answering
    answer = AnswerService().get_answer("Why did Jesus die for us?")

    # For verse lookup
    text = VerseService().get_verse_content("john 3 16")
"""
# Answer pipeline
from core.services.answers import AnswerService, ResponseExtractor, SchemaValidator

# Citation resolution
from core.services.citations import CitationResolver

# Verse pipeline
from core.services.verses import VerseService, extract_reference

__all__ = [
    # Main Services (Public API)
    "AnswerService",
    "VerseService",
    # Pipeline stages
    "ResponseExtractor",
    "SchemaValidator",
    "CitationResolver",
    "extract_reference",
]
