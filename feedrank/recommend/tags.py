"""Canonical event tags.

Uploaders pick free-form tags; the feed wants a small shared vocabulary.
Tags are canonicalized through synonyms, and more are inferred from the
event kind and from keywords in its text.
"""

from __future__ import annotations

from types import MappingProxyType

from feedrank.models import EventDraft, EventItem, EventKind
from feedrank.normalize import dedupe_normalized, normalize, normalize_tag_key

SUGGESTED_EVENT_TAGS: tuple[str, ...] = (
    "punk",
    "goth",
    "rock",
    "pop",
    "DIY",
    "house-show",
    "music",
    "film",
    "queer",
    "mutual aid",
    "fundraiser",
    "food",
    "vegan food",
)

TAG_KEYWORDS = MappingProxyType(
    {
        "punk": ("punk", "hardcore", "garage punk"),
        "goth": ("goth", "darkwave", "post-punk"),
        "rock": ("rock", "indie rock", "alt rock"),
        "pop": ("pop", "synth pop"),
        "diy": ("diy", "zine", "underground", "independent"),
        "house-show": ("house show", "house-show", "living room show"),
        "music": ("concert", "live music", "show", "lineup", "dj set", "band"),
        "film": ("film", "cinema", "screening", "movie", "documentary", "arthouse"),
        "queer": ("queer", "lgbtq", "drag", "trans", "pride"),
        "mutual aid": ("mutual aid", "community support", "care network"),
        "fundraiser": ("fundraiser", "benefit", "donation", "charity"),
        "food": ("food", "cookout", "dinner", "brunch", "snack", "eat"),
        "vegan food": ("vegan", "plant-based"),
        "comedy": ("comedy", "stand-up", "improv", "open mic"),
        "metal": ("metal", "thrash", "death metal"),
        "electronic": ("electronic", "techno", "house", "edm", "synth"),
        "jazz": ("jazz", "bebop", "fusion"),
        "community": ("community", "meetup", "workshop", "collective", "market"),
        "poetry": ("poetry", "spoken word"),
        "theater": ("theater", "theatre", "play", "performance"),
        "campus": ("campus", "college", "university", "student"),
    }
)

# Keys are normalize_tag_key() forms.
TAG_SYNONYMS = MappingProxyType(
    {
        "house show": "house-show",
        "houseshow": "house-show",
        "d.i.y.": "diy",
        "movie": "film",
        "mutual aid": "mutual aid",
        "mutualaid": "mutual aid",
        "fundraisers": "fundraiser",
        "vegan": "vegan food",
    }
)

KIND_TAGS = MappingProxyType(
    {
        EventKind.CONCERT: ("music",),
        EventKind.FILM: ("film",),
        EventKind.COMEDY: ("comedy",),
        EventKind.MEETUP: ("community",),
        EventKind.ARTS: ("diy",),
    }
)


def canonical_tag(value: str) -> str | None:
    key = normalize_tag_key(value)
    if not key:
        return None
    return TAG_SYNONYMS.get(key, key)


def infer_tags_from_text(text: str) -> list[str]:
    normalized_text = normalize(text)
    return [
        tag
        for tag, keywords in TAG_KEYWORDS.items()
        if any(normalize(keyword) in normalized_text for keyword in keywords)
    ]


def kind_tags(kind: EventKind) -> list[str]:
    return list(KIND_TAGS.get(kind, ()))


def build_canonical_tags(
    *,
    title: str,
    description: str,
    category: str,
    subcategory: str,
    kind: EventKind,
    venue: str = "",
    promoter: str = "",
    tags: list[str] | None = None,
) -> list[str]:
    """Manual tags (canonicalized), then kind tags, then tags inferred from text.

    Duplicates are dropped keeping the first occurrence.
    """
    manual = [tag for tag in (canonical_tag(t) for t in tags or []) if tag]
    inferred = infer_tags_from_text(" ".join([title, description, category, subcategory, venue, promoter]))
    return dedupe_normalized([*manual, *kind_tags(kind), *inferred])


def event_tags(event: EventItem) -> list[str]:
    return build_canonical_tags(
        title=event.title,
        description=event.description,
        category=event.category,
        subcategory=event.subcategory,
        kind=event.kind,
        venue=event.venue,
        promoter=event.promoter,
        tags=event.tags,
    )


def draft_tags(draft: EventDraft) -> list[str]:
    return build_canonical_tags(
        title=draft.title,
        description=draft.description,
        category=draft.category,
        subcategory=draft.subcategory,
        kind=draft.kind,
        venue=draft.venue,
        promoter=draft.promoter,
        tags=draft.tags,
    )
