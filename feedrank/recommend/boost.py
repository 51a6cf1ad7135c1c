from __future__ import annotations

from feedrank.models import EventItem, InteractionProfile
from feedrank.recommend.profile import max_weight, normalized_weight
from feedrank.recommend.scenes import SCENES, scene_score, scene_text

KIND_COEFFICIENT = 0.26
SUBCATEGORY_COEFFICIENT = 0.32
CATEGORY_COEFFICIENT = 0.20
VENUE_COEFFICIENT = 0.30
PROMOTER_COEFFICIENT = 0.20
SCENE_COEFFICIENT = 0.34

_PROFILE_MAPS = ("scenes", "kinds", "subcategories", "categories", "venues", "promoters")


def profile_maxima(profile: InteractionProfile) -> dict[str, float]:
    """Max weight of each profile table, for reuse across a ranking pass."""
    return {name: max_weight(getattr(profile, name)) for name in _PROFILE_MAPS}


def preference_boost(
    event: EventItem,
    profile: InteractionProfile,
    maxima: dict[str, float] | None = None,
) -> float:
    """Ranking boost for an event given a user's affinity profile.

    Sum of five field affinities (kind, subcategory, category, venue,
    promoter) plus the single best scene affinity. Taking the max over
    scenes keeps an event that fits several favored scenes from being
    counted more than once. An empty profile gives 0.
    """
    if profile.is_empty():
        return 0.0
    if maxima is None:
        maxima = profile_maxima(profile)

    boost = (
        normalized_weight(profile.kinds, event.kind.value, maxima["kinds"]) * KIND_COEFFICIENT
        + normalized_weight(profile.subcategories, event.subcategory, maxima["subcategories"])
        * SUBCATEGORY_COEFFICIENT
        + normalized_weight(profile.categories, event.category, maxima["categories"]) * CATEGORY_COEFFICIENT
        + normalized_weight(profile.venues, event.venue, maxima["venues"]) * VENUE_COEFFICIENT
        + normalized_weight(profile.promoters, event.promoter, maxima["promoters"]) * PROMOTER_COEFFICIENT
    )

    scene_boost = 0.0
    if maxima["scenes"] > 0:
        text = scene_text(event)
        for scene in SCENES:
            affinity = normalized_weight(profile.scenes, scene.id, maxima["scenes"])
            if affinity <= 0:
                continue
            scene_boost = max(scene_boost, affinity * scene_score(event, scene.id, text) * SCENE_COEFFICIENT)

    return boost + scene_boost
