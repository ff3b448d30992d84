"""Tests for citation resolution against the curated tables."""
from urllib.parse import parse_qs, urlparse

import pytest
from core.models.answer import Reference, ReferenceKind
from core.services.citations.citation_resolver import CitationResolver
from core.services.citations.verified_resources import (
    FALLBACK_URL,
    VERIFIED_BOOKS,
    VERIFIED_COMMENTARIES,
    VERIFIED_DEVOTIONALS,
    VERIFIED_SERMON_TEACHERS,
    is_allow_listed,
)


def make_reference(kind: str, title: str, link: str = "https://example.com/x", description=None) -> Reference:
    return Reference(kind=ReferenceKind(kind), title=title, link=link, description=description)


@pytest.fixture
def resolver():
    return CitationResolver()


class TestBookResolution:
    """Test cases for book citations."""

    def test_exact_title(self, resolver):
        """Test a verified title gets its verified link."""
        ref = resolver.resolve(make_reference("book", "Grace Walk"))
        assert ref.title == "Grace Walk"
        assert ref.link == VERIFIED_BOOKS["Grace Walk"]
        assert ref.description is None

    def test_padded_title_case_insensitive(self, resolver):
        """Test a title containing a verified title matches it."""
        ref = resolver.resolve(make_reference("book", "the naked gospel by Andrew Farley"))
        assert ref.title == "The Naked Gospel"
        assert ref.link == VERIFIED_BOOKS["The Naked Gospel"]

    def test_partial_title(self, resolver):
        """Test a title contained in a verified title matches it."""
        ref = resolver.resolve(make_reference("book", "Right Believing"))
        assert ref.title == "The Power of Right Believing"

    def test_unknown_title_falls_back(self, resolver):
        """Test an unknown book resolves to the default book, keeping the original title in the note."""
        ref = resolver.resolve(make_reference("book", "Unknown Kids Bible Title", description="Fun stories"))
        assert ref.title == "Grace: The Power to Change"
        assert ref.link == VERIFIED_BOOKS["Grace: The Power to Change"]
        assert "Unknown Kids Bible Title" in ref.description
        assert ref.description.startswith('Alternative reference for: "Unknown Kids Bible Title".')
        assert ref.description.endswith("Fun stories")

    def test_short_title_false_positive(self, resolver):
        """Test a short common word matches the first title containing it (accepted heuristic)."""
        ref = resolver.resolve(make_reference("book", "grace"))
        assert ref.title == "Grace: The Power to Change"
        assert "Alternative" not in (ref.description or "")


class TestArticleResolution:
    """Test cases for article citations."""

    def test_allow_listed_link_unchanged(self, resolver):
        """Test an article already on a verified source is kept as-is."""
        original = make_reference("article", "Q", link="https://www.gotquestions.org/x")
        assert resolver.resolve(original) == original

    def test_allow_listed_link_is_case_insensitive(self, resolver):
        """Test the prefix check ignores case."""
        original = make_reference("article", "Grace", link="HTTPS://WWW.LIGONIER.ORG/learn")
        assert resolver.resolve(original).link == "HTTPS://WWW.LIGONIER.ORG/learn"

    def test_lookalike_host_is_not_allow_listed(self, resolver):
        """Test a host that merely starts with a verified host is rewritten."""
        ref = resolver.resolve(make_reference("article", "Grace", link="https://www.gty.org.example.com/a"))
        assert ref.link.startswith("https://www.gotquestions.org/search?q=")

    def test_site_named_in_title(self, resolver):
        """Test a title naming a verified site is sent to that site's search."""
        ref = resolver.resolve(make_reference("article", "Ligonier: What is grace?", link="https://fake.org/a"))
        parsed = urlparse(ref.link)
        assert ref.link.startswith("https://www.ligonier.org/search?q=")
        assert parse_qs(parsed.query)["q"] == ["Ligonier: What is grace?"]
        assert ref.description.startswith('Alternative source for: "Ligonier: What is grace?".')

    def test_unknown_site_falls_back_to_default_source(self, resolver):
        """Test an unmatched article searches the default source."""
        ref = resolver.resolve(make_reference("article", "Why Jesus loves kids", link="https://fake.org/a"))
        assert ref.link == "https://www.gotquestions.org/search?q=Why%20Jesus%20loves%20kids"

    def test_single_letter_title_false_positive(self, resolver):
        """Test a one-letter title is contained in a source host (accepted heuristic)."""
        ref = resolver.resolve(make_reference("article", "b", link="https://fake.org/a"))
        assert ref.link == "https://www.biblestudytools.com/search?q=b"


class TestSermonResolution:
    """Test cases for sermon citations."""

    def test_teacher_match_builds_search(self, resolver):
        """Test a known teacher gets a search URL on their sermon library."""
        ref = resolver.resolve(make_reference("sermon", "John Piper Sermon on Grace"))
        assert ref.link == "https://www.desiringgod.org/messages?q=John%20Piper%20on%20Grace"
        assert ref.description == "Sermon by John Piper."

    def test_strips_sermon_words(self, resolver):
        """Test "sermon", "teaching" and "message" are removed from the query."""
        ref = resolver.resolve(make_reference("sermon", "Charles Spurgeon teaching MESSAGE"))
        assert ref.link == "https://www.spurgeon.org/resource-library/sermons?q=Charles%20Spurgeon"

    def test_unknown_teacher_uses_default_search(self, resolver):
        """Test an unknown teacher falls back to the default sermon search."""
        ref = resolver.resolve(make_reference("sermon", "Grace for kids sermon", description="Great"))
        assert ref.link == "https://www.gty.org/library/sermons-library/scripture/all?q=Grace%20for%20kids"
        assert ref.description == 'Alternative sermon resource for: "Grace for kids sermon". Great'

    def test_uses_ampersand_when_base_has_query(self, resolver, monkeypatch):
        """Test an existing query string is extended with '&'."""
        import core.services.citations.citation_resolver as module
        monkeypatch.setattr(module, "VERIFIED_SERMON_TEACHERS", {"Kids Pastor": "https://www.gty.org/s?lang=en"})
        ref = resolver.resolve(make_reference("sermon", "Kids Pastor"))
        assert ref.link == "https://www.gty.org/s?lang=en&q=Kids%20Pastor"


class TestTableResolution:
    """Test cases for devotional and commentary citations."""

    def test_devotional_match(self, resolver):
        """Test a known devotional gets its fixed URL and attribution."""
        ref = resolver.resolve(make_reference("devotional", "Spurgeon Daily - Morning"))
        assert ref.link == VERIFIED_DEVOTIONALS["Spurgeon Daily"]
        assert ref.description == "From Spurgeon Daily."

    def test_devotional_fallback(self, resolver):
        """Test an unknown devotional falls back to Grace Gems."""
        ref = resolver.resolve(make_reference("devotional", "Our Daily Bread"))
        assert ref.link == VERIFIED_DEVOTIONALS["Grace Gems"]
        assert ref.description == 'Alternative devotional for: "Our Daily Bread".'

    def test_commentary_match(self, resolver):
        """Test a known commentator gets the commentary URL."""
        ref = resolver.resolve(make_reference("commentary", "Albert Barnes on Romans", description="Notes"))
        assert ref.link == VERIFIED_COMMENTARIES["Albert Barnes"]
        assert ref.description == "Commentary by Albert Barnes. Notes"

    def test_commentary_fallback(self, resolver):
        """Test an unknown commentary falls back to Matthew Henry."""
        ref = resolver.resolve(make_reference("commentary", "Unknown Commentary"))
        assert ref.link == VERIFIED_COMMENTARIES["Matthew Henry"]

    def test_first_entry_wins_for_shared_names(self, resolver):
        """Test a name shared by two entries resolves to the first one listed."""
        ref = resolver.resolve(make_reference("commentary", "John"))
        assert ref.link == VERIFIED_COMMENTARIES["John MacArthur"]


class TestPostConditions:
    """Test cases for link enforcement and batch resolution."""

    def test_verse_is_untouched(self, resolver):
        """Test verses are left for the verse lookup."""
        original = make_reference("verse", "John 3:16", link="https://www.biblegateway.com/passage/?search=John+3:16")
        assert resolver.resolve(original) == original

    def test_invalid_verse_link_gets_fallback(self, resolver):
        """Test an invalid link is replaced and annotated."""
        ref = resolver.resolve(make_reference("verse", "John 3:16", link="John 3:16", description="Love"))
        assert ref.link == FALLBACK_URL
        assert ref.description == "Original source unavailable. Love"

    def test_resolve_all_preserves_order(self, resolver):
        """Test batch resolution keeps the model's order."""
        refs = [
            make_reference("sermon", "John Piper"),
            make_reference("verse", "Romans 8:28"),
            make_reference("book", "Grace Walk"),
        ]
        resolved = resolver.resolve_all(refs)
        assert [ref.kind for ref in resolved] == [ReferenceKind.SERMON, ReferenceKind.VERSE, ReferenceKind.BOOK]

    def test_resolve_all_drops_failing_reference(self, resolver, monkeypatch):
        """Test a reference whose resolution raises is dropped, not fatal."""
        original = resolver._handlers[ReferenceKind.BOOK]

        def flaky(reference):
            if reference.title == "boom":
                raise ValueError("boom")
            return original(reference)

        monkeypatch.setitem(resolver._handlers, ReferenceKind.BOOK, flaky)
        resolved = resolver.resolve_all([make_reference("book", "boom"), make_reference("book", "Grace Walk")])
        assert [ref.title for ref in resolved] == ["Grace Walk"]

    @pytest.mark.parametrize("kind, title, link", [
        ("book", "Anything at all", "https://evil.example/book"),
        ("article", "Random blog", "https://evil.example/post"),
        ("article", "Bad link", "javascript:alert(1)"),
        ("sermon", "Sermon on the mount", "https://evil.example/sermon"),
        ("sermon", "R.C. Sproul message", "https://evil.example/sermon"),
        ("devotional", "Nightly", "https://evil.example/dev"),
        ("commentary", "John Gill", "https://evil.example/c"),
        ("commentary", "Anything", "not a url"),
    ])
    def test_allow_list_closure(self, resolver, kind, title, link):
        """Test every resolved non-verse link lands on the allow-list."""
        ref = resolver.resolve(make_reference(kind, title, link=link))
        assert is_allow_listed(ref.link)

    def test_tables_are_read_only(self):
        """Test the curated tables cannot be mutated."""
        with pytest.raises(TypeError):
            VERIFIED_BOOKS["New Book"] = "https://evil.example"  # type: ignore[index]
        with pytest.raises(TypeError):
            VERIFIED_SERMON_TEACHERS["x"] = "https://evil.example"  # type: ignore[index]
