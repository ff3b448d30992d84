"""Shared URL helpers for citation validation and rewriting."""
from typing import Any
from urllib.parse import quote, urlparse


def is_valid_url(value: Any) -> bool:
    """
    Check that a value is an absolute http(s) URL.

    Args:
        value: Candidate link, usually straight from the model's JSON

    Returns:
        True if the value parses as a URL with an http(s) scheme and a host
    """
    if not isinstance(value, str):
        return False

    candidate = value.strip()
    if not candidate or candidate != value or any(ch.isspace() for ch in candidate):
        return False

    try:
        parsed = urlparse(candidate)
    except ValueError:
        return False

    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def encode_query_value(value: str) -> str:
    """Percent-encode a query value the way browsers' encodeURIComponent does."""
    return quote(value, safe="-_.!~*'()")


def append_query(base_url: str, name: str, value: str) -> str:
    """Append ``name=value`` to a URL, using ``&`` if it already has a query."""
    separator = "&" if "?" in base_url else "?"
    return f"{base_url}{separator}{name}={encode_query_value(value)}"
