"""Curated resource tables citations are resolved against.

Built once at import and exposed read-only; nothing writes to them at runtime.
"""
from types import MappingProxyType
from typing import Mapping, Tuple

# Book titles we know exist, with their store pages
VERIFIED_BOOKS: Mapping[str, str] = MappingProxyType({
    "Grace: The Power to Change": "https://www.amazon.com/Grace-Power-Change-James-Richards/dp/1603749896",
    "The Rest of the Gospel": "https://www.amazon.com/Rest-Gospel-Really-When-Believe/dp/0964546507",
    "The Power of Right Believing": "https://www.amazon.com/Power-Right-Believing-Freedom-Believe/dp/1455553166",
    "The Naked Gospel": "https://www.amazon.com/Naked-Gospel-Truth-Never-Church/dp/0310293065",
    "God Without Religion": "https://www.amazon.com/God-without-Religion-Andrew-Farley/dp/0801014638",
    "Grace Walk": "https://www.amazon.com/Grace-Walk-Steve-McVey/dp/0736916393",
    "The Normal Christian Life": "https://www.amazon.com/Normal-Christian-Life-Watchman-Nee/dp/0842347100",
    "Classic Christianity": "https://www.amazon.com/Classic-Christianity-Lifes-Short-Missing/dp/0736926739",
})

# Article sites, matched as URL prefixes
VERIFIED_SOURCES: Tuple[str, ...] = (
    "https://www.gotquestions.org",
    "https://www.biblestudytools.com",
    "https://www.blueletterbible.org",
    "https://www.studylight.org",
    "https://www.preceptaustin.org",
    "https://www.biblehub.com",
    "https://www.ligonier.org",
    "https://www.desiringgod.org",
    "https://www.monergism.com",
    "https://www.thegospelcoalition.org",
    "https://www.gty.org",
)

VERIFIED_SERMON_TEACHERS: Mapping[str, str] = MappingProxyType({
    "Charles Spurgeon": "https://www.spurgeon.org/resource-library/sermons",
    "Martyn Lloyd-Jones": "https://www.mljtrust.org/sermons",
    "John MacArthur": "https://www.gty.org/library/sermons-library",
    "John Piper": "https://www.desiringgod.org/messages",
    "R.C. Sproul": "https://www.ligonier.org/learn/sermons",
})

VERIFIED_DEVOTIONALS: Mapping[str, str] = MappingProxyType({
    "Grace Gems": "https://www.gracegems.org",
    "Spurgeon Daily": "https://www.spurgeon.org/resource-library/daily-readings",
    "Blue Letter Bible Devotionals": "https://www.blueletterbible.org/devotionals",
})

VERIFIED_COMMENTARIES: Mapping[str, str] = MappingProxyType({
    "Matthew Henry": "https://www.biblestudytools.com/commentaries/matthew-henry-complete",
    "John MacArthur": "https://www.biblestudytools.com/commentaries/macarthur-new-testament-commentary",
    "John Gill": "https://www.biblestudytools.com/commentaries/gills-exposition-of-the-bible",
    "Albert Barnes": "https://www.biblestudytools.com/commentaries/barnes-notes-on-the-new-testament",
    "Charles Spurgeon": "https://www.spurgeon.org/resource-library/commentaries",
})

# Fixed fallbacks used when nothing in a table matches
DEFAULT_BOOK_TITLE = "Grace: The Power to Change"
DEFAULT_ARTICLE_SOURCE = "https://www.gotquestions.org"
DEFAULT_SERMON_SEARCH_URL = "https://www.gty.org/library/sermons-library/scripture/all"
DEFAULT_DEVOTIONAL = "Grace Gems"
DEFAULT_COMMENTARY = "Matthew Henry"
FALLBACK_URL = "https://www.gotquestions.org"

# Teachers named in the system prompt as grace-focused sources
PROMPT_TEACHERS: Tuple[Tuple[str, str], ...] = (
    ("John MacArthur", "https://www.gty.org"),
    ("John Piper", "https://www.desiringgod.org"),
    ("R.C. Sproul", "https://www.ligonier.org"),
    ("Charles Spurgeon", "https://www.spurgeon.org"),
    ("Got Questions", "https://www.gotquestions.org"),
    ("Bible Study Tools", "https://www.biblestudytools.com"),
    ("Blue Letter Bible", "https://www.blueletterbible.org"),
    ("The Gospel Coalition", "https://www.thegospelcoalition.org"),
)


def allow_listed_prefixes() -> Tuple[str, ...]:
    """Every prefix a resolved, non-verse link is allowed to start with."""
    return (
        VERIFIED_SOURCES
        + tuple(VERIFIED_BOOKS.values())
        + tuple(VERIFIED_SERMON_TEACHERS.values())
        + tuple(VERIFIED_DEVOTIONALS.values())
        + tuple(VERIFIED_COMMENTARIES.values())
        + (DEFAULT_SERMON_SEARCH_URL, FALLBACK_URL)
    )


def has_prefix(link: str, prefix: str) -> bool:
    """
    Case-insensitive prefix check that stops at a URL boundary.

    ``https://www.gty.org/x`` starts with ``https://www.gty.org``;
    ``https://www.gty.org.example.com`` does not.
    """
    lowered = link.lower()
    prefix = prefix.lower().rstrip("/")
    if not lowered.startswith(prefix):
        return False
    rest = lowered[len(prefix):]
    return not rest or rest[0] in "/?#"


def is_allow_listed(link: str) -> bool:
    """Check a link against every curated prefix."""
    return any(has_prefix(link, prefix) for prefix in allow_listed_prefixes())
