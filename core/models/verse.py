"""Verse lookup models."""
from pydantic import BaseModel


class VerseContent(BaseModel):
    """Display-ready verse text for the verse overlay."""
    title: str  # Reference as the user or the model wrote it
    reference: str  # Canonical "Book Chapter:Verse[-Verse]" form
    content: str
