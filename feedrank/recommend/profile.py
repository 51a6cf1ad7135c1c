from __future__ import annotations

from feedrank.log import get_logger
from feedrank.models import EventItem, IntentState, InteractionMap, InteractionProfile, WeightedMap
from feedrank.normalize import normalize
from feedrank.recommend.scenes import SCENES, scene_score, scene_text

logger = get_logger("profile")

INTENT_WEIGHTS: dict[IntentState, float] = {
    IntentState.GOING: 1.2,
    IntentState.INTERESTED: 1.0,
    IntentState.SAVED: 0.6,
    IntentState.NONE: 0.0,
}

# Category and promoter are coarser signals than kind/subcategory/venue.
CATEGORY_DAMPING = 0.9
PROMOTER_DAMPING = 0.95


def intent_weight(intent: IntentState | None) -> float:
    if intent is None:
        return 0.0
    return INTENT_WEIGHTS.get(intent, 0.0)


def add_weight(target: WeightedMap, key: str, amount: float) -> None:
    """Accumulate amount under the normalized key. Empty keys are dropped."""
    normalized = normalize(key)
    if not normalized:
        return
    target[normalized] = target.get(normalized, 0.0) + amount


def max_weight(source: WeightedMap) -> float:
    return max(source.values(), default=0.0)


def normalized_weight(source: WeightedMap, key: str, maximum: float | None = None) -> float:
    """Weight of key relative to the heaviest entry, in [0, 1].

    Empty and all-zero maps give 0. Pass maximum to reuse a max_weight()
    computed once for many lookups against the same map.
    """
    if maximum is None:
        maximum = max_weight(source)
    if maximum <= 0:
        return 0.0
    return source.get(normalize(key), 0.0) / maximum


def build_profile(events: list[EventItem], interactions: InteractionMap) -> InteractionProfile:
    """Fold a user's intents into weighted affinity tables.

    Interactions pointing at events not in `events` are ignored, as are
    entries without an intent. Scene affinity grows with how strongly each
    event matches the scene, not just whether it does.
    """
    event_by_id = {event.id: event for event in events}
    profile = InteractionProfile()
    used = 0

    for event_id, intent in interactions.items():
        if not intent:
            continue
        event = event_by_id.get(event_id)
        if event is None:
            continue

        weight = intent_weight(intent)
        if weight <= 0:
            continue

        add_weight(profile.kinds, event.kind.value, weight)
        add_weight(profile.subcategories, event.subcategory, weight)
        add_weight(profile.categories, event.category, weight * CATEGORY_DAMPING)
        add_weight(profile.venues, event.venue, weight)
        add_weight(profile.promoters, event.promoter, weight * PROMOTER_DAMPING)

        text = scene_text(event)
        for scene in SCENES:
            score = scene_score(event, scene.id, text)
            if score > 0:
                add_weight(profile.scenes, scene.id, weight * score)
        used += 1

    logger.debug("profile_built", interactions=len(interactions), used=used)
    return profile


def top_scene(profile: InteractionProfile) -> str | None:
    """The scene with the most affinity, first in catalog order on ties."""
    best: str | None = None
    best_weight = 0.0
    for scene in SCENES:
        weight = profile.scenes.get(scene.id, 0.0)
        if weight > best_weight:
            best = scene.id
            best_weight = weight
    return best
