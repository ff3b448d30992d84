"""Citation resolver: rewrites model citations onto the curated allow-list."""
import re
from typing import Callable, Dict, Iterable, List, Mapping, Optional

from core.models.answer import Reference, ReferenceKind
from core.services.citations.verified_resources import (
    DEFAULT_ARTICLE_SOURCE,
    DEFAULT_BOOK_TITLE,
    DEFAULT_COMMENTARY,
    DEFAULT_DEVOTIONAL,
    DEFAULT_SERMON_SEARCH_URL,
    FALLBACK_URL,
    VERIFIED_BOOKS,
    VERIFIED_COMMENTARIES,
    VERIFIED_DEVOTIONALS,
    VERIFIED_SERMON_TEACHERS,
    VERIFIED_SOURCES,
    has_prefix,
)
from core.services.utils.url_utils import append_query, encode_query_value, is_valid_url
from core.utils.logger import logger

_SERMON_WORDS = re.compile(r"sermon|teaching|message", re.IGNORECASE)
_WHITESPACE_RUN = re.compile(r"\s+")


def _annotate(note: str, description: Optional[str]) -> str:
    """Prefix a synthesized note to an existing description."""
    return f"{note} {description}" if description else note


class CitationResolver:
    """
    Resolve citations so every link points into the curated tables.

    Title matching is a heuristic: case-insensitive substring in either
    direction, first table entry wins. Short or generic titles can match an
    unintended entry.
    """

    def __init__(self):
        self._handlers: Dict[ReferenceKind, Callable[[Reference], Reference]] = {
            ReferenceKind.BOOK: self._resolve_book,
            ReferenceKind.ARTICLE: self._resolve_article,
            ReferenceKind.SERMON: self._resolve_sermon,
            ReferenceKind.DEVOTIONAL: self._resolve_devotional,
            ReferenceKind.COMMENTARY: self._resolve_commentary,
        }

    def resolve_all(self, references: Iterable[Reference]) -> List[Reference]:
        """
        Resolve references one at a time, keeping input order.

        A reference that fails to resolve, or still has an invalid link
        afterwards, is logged and dropped; the rest are returned.
        """
        resolved = []
        for index, reference in enumerate(references):
            try:
                result = self.resolve(reference)
            except Exception as e:
                logger.warning(f"Dropping reference {index} ({reference.title!r}): {str(e)}")
                continue

            if not is_valid_url(result.link):
                logger.warning(f"Dropping reference {index} ({reference.title!r}): invalid link {result.link!r}")
                continue

            resolved.append(result)
        return resolved

    def resolve(self, reference: Reference) -> Reference:
        """Resolve a single reference by kind, then enforce a valid link."""
        handler = self._handlers.get(reference.kind)
        resolved = handler(reference) if handler else reference

        if not is_valid_url(resolved.link):
            logger.info(f"Replacing invalid link {resolved.link!r} for {resolved.title!r}")
            resolved = resolved.model_copy(update={
                "link": FALLBACK_URL,
                "description": _annotate("Original source unavailable.", resolved.description),
            })
        return resolved

    @staticmethod
    def find_match(title: str, names: Iterable[str]) -> Optional[str]:
        """Return the first name that contains the title or is contained in it."""
        needle = title.strip().lower()
        if not needle:
            return None
        for name in names:
            key = name.lower()
            if key in needle or needle in key:
                return name
        return None

    def _resolve_book(self, reference: Reference) -> Reference:
        book_title = self.find_match(reference.title, VERIFIED_BOOKS)
        if book_title:
            return reference.model_copy(update={
                "title": book_title,
                "link": VERIFIED_BOOKS[book_title],
            })

        return reference.model_copy(update={
            "title": DEFAULT_BOOK_TITLE,
            "link": VERIFIED_BOOKS[DEFAULT_BOOK_TITLE],
            "description": _annotate(
                f'Alternative reference for: "{reference.title}".', reference.description
            ),
        })

    def _resolve_article(self, reference: Reference) -> Reference:
        if any(has_prefix(reference.link, source) for source in VERIFIED_SOURCES):
            return reference

        source = self._match_article_source(reference.title) or DEFAULT_ARTICLE_SOURCE
        return reference.model_copy(update={
            "link": f"{source}/search?q={encode_query_value(reference.title)}",
            "description": _annotate(
                f'Alternative source for: "{reference.title}".', reference.description
            ),
        })

    def _match_article_source(self, title: str) -> Optional[str]:
        # Trailing path segment of a source is its host, e.g. "www.gotquestions.org";
        # the bare site label ("gotquestions") also counts when the title names it.
        needle = title.strip().lower()
        if not needle:
            return None
        for source in VERIFIED_SOURCES:
            segment = source.rstrip("/").split("/")[-1].lower()
            label = segment[4:] if segment.startswith("www.") else segment
            label = label.rsplit(".", 1)[0]
            if segment in needle or needle in segment or label in needle:
                return source
        return None

    def _resolve_sermon(self, reference: Reference) -> Reference:
        query = _WHITESPACE_RUN.sub(" ", _SERMON_WORDS.sub("", reference.title)).strip()
        teacher = self.find_match(reference.title, VERIFIED_SERMON_TEACHERS)

        if teacher:
            return reference.model_copy(update={
                "link": append_query(VERIFIED_SERMON_TEACHERS[teacher], "q", query),
                "description": _annotate(f"Sermon by {teacher}.", reference.description),
            })

        return reference.model_copy(update={
            "link": append_query(DEFAULT_SERMON_SEARCH_URL, "q", query),
            "description": _annotate(
                f'Alternative sermon resource for: "{reference.title}".', reference.description
            ),
        })

    def _resolve_devotional(self, reference: Reference) -> Reference:
        return self._resolve_from_table(
            reference,
            VERIFIED_DEVOTIONALS,
            DEFAULT_DEVOTIONAL,
            matched_note="From {name}.",
            fallback_note='Alternative devotional for: "{title}".',
        )

    def _resolve_commentary(self, reference: Reference) -> Reference:
        return self._resolve_from_table(
            reference,
            VERIFIED_COMMENTARIES,
            DEFAULT_COMMENTARY,
            matched_note="Commentary by {name}.",
            fallback_note='Alternative commentary source for: "{title}".',
        )

    def _resolve_from_table(
        self,
        reference: Reference,
        table: Mapping[str, str],
        default_name: str,
        matched_note: str,
        fallback_note: str
    ) -> Reference:
        """Point a reference at a fixed table URL, attributing the match."""
        name = self.find_match(reference.title, table)
        if name:
            note = matched_note.format(name=name)
        else:
            name = default_name
            note = fallback_note.format(title=reference.title)

        return reference.model_copy(update={
            "link": table[name],
            "description": _annotate(note, reference.description),
        })
