"""String normalization shared by scene matching, profiles, search and tags.

Every weighted-map key and every substring comparison goes through
normalize(), so profile lookups and search matches agree on one form.
"""

from __future__ import annotations

import re

_TAG_SEPARATORS = re.compile(r"[_-]+")
_WHITESPACE = re.compile(r"\s+")


def normalize(s: str | None) -> str:
    """Trim and lowercase. Punctuation is kept so "stand-up" stays searchable."""
    if not s:
        return ""
    return s.strip().lower()


def normalize_tag_key(s: str | None) -> str:
    """Normalize a tag label: underscores/hyphens become spaces, whitespace collapses.

    "House_Show", "house-show" and "house  show" all become "house show".
    """
    s = _TAG_SEPARATORS.sub(" ", normalize(s))
    return _WHITESPACE.sub(" ", s).strip()


def dedupe_normalized(values: list[str]) -> list[str]:
    """Normalize values and drop empties and repeats, keeping first-seen order."""
    seen: dict[str, None] = {}
    for value in values:
        key = normalize(value)
        if key:
            seen.setdefault(key, None)
    return list(seen)
