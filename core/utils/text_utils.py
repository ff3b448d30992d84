"""Text processing utilities."""
import re

_WHITESPACE_RUN = re.compile(r"\s+")


def clean_verse_text(text: str) -> str:
    """
    Turn raw verse text into a single display paragraph.

    Whitespace runs, newlines included, collapse to one space and the result
    is trimmed. Applying it twice gives the same result as applying it once.

    Example:
        >>> clean_verse_text("  Line1\\nLine2   end  ")
        'Line1 Line2 end'
    """
    return _WHITESPACE_RUN.sub(" ", text).strip()
