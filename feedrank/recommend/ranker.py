from __future__ import annotations

from feedrank.config import settings
from feedrank.log import get_logger
from feedrank.models import EventItem, InteractionProfile, RankedEvent
from feedrank.recommend.boost import preference_boost, profile_maxima
from feedrank.recommend.scenes import AUTO_SCENE, matches_scene
from feedrank.recommend.search import search_score

logger = get_logger("ranker")


def _limit(ranked: list[RankedEvent], top_n: int | None) -> list[RankedEvent]:
    if top_n is None:
        top_n = settings.feed_top_n
    if top_n <= 0:
        return ranked
    return ranked[:top_n]


def rank_feed(
    events: list[EventItem],
    profile: InteractionProfile,
    scene_id: str = AUTO_SCENE,
    top_n: int | None = None,
) -> list[RankedEvent]:
    """Order candidate events by preference boost, best first.

    Events outside the selected scene are dropped ("auto" keeps everything).
    Equal boosts keep their input order. top_n defaults to
    settings.feed_top_n; zero or less returns every candidate.
    """
    maxima = profile_maxima(profile)
    ranked = [
        RankedEvent(event=event, score=preference_boost(event, profile, maxima))
        for event in events
        if matches_scene(event, scene_id)
    ]
    ranked.sort(key=lambda r: -r.score)

    logger.debug("feed_ranked", candidates=len(events), in_scene=len(ranked), scene=scene_id)
    return _limit(ranked, top_n)


def search_events(
    events: list[EventItem],
    query: str,
    top_n: int | None = None,
) -> list[RankedEvent]:
    """Events matching a free-text query, most relevant first.

    Events that match no field are left out.
    """
    ranked = []
    for event in events:
        result = search_score(event, query)
        if result.score > 0:
            ranked.append(RankedEvent(event=event, score=result.score, matched_types=result.matched_types))
    ranked.sort(key=lambda r: -r.score)

    logger.debug("search_ranked", candidates=len(events), matches=len(ranked))
    return _limit(ranked, top_n)
