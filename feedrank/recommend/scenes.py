from __future__ import annotations

from types import MappingProxyType

from feedrank.models import EventItem, EventKind, SceneDefinition
from feedrank.normalize import normalize

AUTO_SCENE = "auto"

KIND_MATCH_SCORE = 0.35
KEYWORD_HIT_SCORE = 0.14
MEMBERSHIP_THRESHOLD = 0.22

# Declaration order is the tie-break order for top_scene().
SCENES: tuple[SceneDefinition, ...] = (
    SceneDefinition(
        id="punk",
        label="Punk & Hardcore",
        kinds=frozenset({EventKind.CONCERT}),
        keywords=("punk", "hardcore", "garage", "mosh", "thrash", "emo night"),
    ),
    SceneDefinition(
        id="diy",
        label="DIY & House Shows",
        kinds=frozenset({EventKind.CONCERT, EventKind.ARTS}),
        keywords=("diy", "house show", "living room", "basement", "zine", "underground", "all ages"),
    ),
    SceneDefinition(
        id="film",
        label="Film & Screenings",
        kinds=frozenset({EventKind.FILM}),
        keywords=("film", "cinema", "screening", "movie", "documentary", "arthouse"),
    ),
    SceneDefinition(
        id="comedy",
        label="Comedy",
        kinds=frozenset({EventKind.COMEDY}),
        keywords=("comedy", "stand-up", "standup", "improv", "open mic", "sketch"),
    ),
    SceneDefinition(
        id="mutual_aid",
        label="Mutual Aid",
        kinds=frozenset({EventKind.MEETUP}),
        keywords=("mutual aid", "fundraiser", "benefit", "community support", "care network", "donation"),
    ),
    SceneDefinition(
        id="campus",
        label="Campus",
        kinds=frozenset({EventKind.MEETUP, EventKind.ARTS}),
        keywords=("campus", "college", "university", "student", "dorm room"),
    ),
)

_SCENES_BY_ID = MappingProxyType({scene.id: scene for scene in SCENES})


def scene_ids() -> list[str]:
    return [scene.id for scene in SCENES]


def get_scene(scene_id: str) -> SceneDefinition | None:
    return _SCENES_BY_ID.get(scene_id)


def scene_text(event: EventItem) -> str:
    """Everything about an event that keywords are matched against, normalized."""
    parts = [
        event.title,
        event.promoter,
        event.venue,
        event.neighborhood,
        event.category,
        event.subcategory,
        event.kind.value,
        *event.tags,
        event.description,
        *(tag.entity_name for tag in event.flyer_tags),
    ]
    return normalize(" ".join(parts))


def scene_score(event: EventItem, scene_id: str, text: str | None = None) -> float:
    """How strongly an event belongs to a scene, in [0, 1].

    Kind membership is worth 0.35 and each keyword found in the event text
    another 0.14. "auto" and unknown ids score 0. Callers scoring one event
    against several scenes can pass a precomputed scene_text().
    """
    scene = get_scene(scene_id)
    if scene is None:
        return 0.0

    if text is None:
        text = scene_text(event)

    score = 0.0
    if event.kind in scene.kinds:
        score += KIND_MATCH_SCORE
    for keyword in scene.keywords:
        if normalize(keyword) in text:
            score += KEYWORD_HIT_SCORE
    return min(1.0, score)


def matches_scene(event: EventItem, scene_id: str) -> bool:
    if scene_id == AUTO_SCENE:
        return True
    return scene_score(event, scene_id) >= MEMBERSHIP_THRESHOLD
