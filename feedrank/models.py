from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class EventKind(str, Enum):
    CONCERT = "concert"
    FILM = "film"
    MEETUP = "meetup"
    COMEDY = "comedy"
    ARTS = "arts"


class EntityKind(str, Enum):
    VENUE = "venue"
    PROMOTER = "promoter"
    COLLECTIVE = "collective"
    BAND = "band"
    PERSON = "person"
    OTHER = "other"


class IntentState(str, Enum):
    GOING = "going"
    INTERESTED = "interested"
    SAVED = "saved"
    NONE = "none"


class SearchMatchType(str, Enum):
    EVENT = "event"
    VENUE = "venue"
    PROMOTER = "promoter"


# event id -> intent; a missing entry and IntentState.NONE mean the same thing
InteractionMap = dict[str, IntentState | None]

# normalized label -> accumulated affinity
WeightedMap = dict[str, float]


class FlyerTag(BaseModel):
    """A named entity tagged on an event's flyer."""

    entity_name: str
    entity_kind: EntityKind = EntityKind.OTHER
    is_public: bool = True


class EventItem(BaseModel):
    """Event record as supplied by the feed. Read-only to the engine."""

    id: str = ""
    title: str = ""
    promoter: str = ""
    venue: str = ""
    address: str = ""
    neighborhood: str = ""
    category: str = ""
    subcategory: str = ""
    kind: EventKind = EventKind.MEETUP
    tags: list[str] = Field(default_factory=list)
    description: str = ""
    flyer_tags: list[FlyerTag] = Field(default_factory=list)


class EventDraft(BaseModel):
    """Uploader-entered fields before an event is published."""

    title: str = ""
    description: str = ""
    category: str = ""
    subcategory: str = ""
    kind: EventKind = EventKind.MEETUP
    venue: str = ""
    promoter: str = ""
    tags: list[str] = Field(default_factory=list)


class SceneDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    kinds: frozenset[EventKind]
    keywords: tuple[str, ...]


class InteractionProfile(BaseModel):
    """Per-user affinity tables derived from intent history."""

    scenes: WeightedMap = Field(default_factory=dict)
    kinds: WeightedMap = Field(default_factory=dict)
    subcategories: WeightedMap = Field(default_factory=dict)
    categories: WeightedMap = Field(default_factory=dict)
    venues: WeightedMap = Field(default_factory=dict)
    promoters: WeightedMap = Field(default_factory=dict)

    def is_empty(self) -> bool:
        return not any(
            (self.scenes, self.kinds, self.subcategories, self.categories, self.venues, self.promoters)
        )


class SearchResult(BaseModel):
    score: float = 0.0
    matched_types: set[SearchMatchType] = Field(default_factory=set)


class RankedEvent(BaseModel):
    event: EventItem
    score: float
    matched_types: set[SearchMatchType] = Field(default_factory=set)


class FeedSnapshot(BaseModel):
    """A user's feed state: candidate events plus their intent history."""

    events: list[EventItem] = Field(default_factory=list)
    interactions: InteractionMap = Field(default_factory=dict)
