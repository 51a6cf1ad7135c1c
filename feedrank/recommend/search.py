from __future__ import annotations

from feedrank.models import EntityKind, EventItem, SearchMatchType, SearchResult
from feedrank.normalize import normalize

PREFIX_BONUS = 0.7
EXACT_BONUS = 1.0

TITLE_WEIGHT = 4.1
CATEGORY_WEIGHT = 1.6
SUBCATEGORY_WEIGHT = 1.8
NEIGHBORHOOD_WEIGHT = 1.3
DESCRIPTION_WEIGHT = 0.8
TAG_WEIGHT = 1.1
VENUE_WEIGHT = 3.7
ADDRESS_WEIGHT = 1.2
PROMOTER_WEIGHT = 3.6

# Flyer entities count toward the facet they name; anything else is event text.
FLYER_TAG_WEIGHTS: dict[EntityKind, tuple[float, SearchMatchType]] = {
    EntityKind.VENUE: (2.2, SearchMatchType.VENUE),
    EntityKind.PROMOTER: (2.2, SearchMatchType.PROMOTER),
    EntityKind.COLLECTIVE: (2.2, SearchMatchType.PROMOTER),
}
FLYER_TAG_DEFAULT: tuple[float, SearchMatchType] = (1.4, SearchMatchType.EVENT)


def _search_fields(event: EventItem) -> list[tuple[str, float, SearchMatchType]]:
    fields = [
        (event.title, TITLE_WEIGHT, SearchMatchType.EVENT),
        (event.category, CATEGORY_WEIGHT, SearchMatchType.EVENT),
        (event.subcategory, SUBCATEGORY_WEIGHT, SearchMatchType.EVENT),
        (event.neighborhood, NEIGHBORHOOD_WEIGHT, SearchMatchType.EVENT),
        (event.description, DESCRIPTION_WEIGHT, SearchMatchType.EVENT),
    ]
    fields.extend((tag, TAG_WEIGHT, SearchMatchType.EVENT) for tag in event.tags)
    fields.append((event.venue, VENUE_WEIGHT, SearchMatchType.VENUE))
    fields.append((event.address, ADDRESS_WEIGHT, SearchMatchType.VENUE))
    fields.append((event.promoter, PROMOTER_WEIGHT, SearchMatchType.PROMOTER))
    for tag in event.flyer_tags:
        weight, match_type = FLYER_TAG_WEIGHTS.get(tag.entity_kind, FLYER_TAG_DEFAULT)
        fields.append((tag.entity_name, weight, match_type))
    return fields


def search_score(event: EventItem, query: str) -> SearchResult:
    """Score a free-text query against an event.

    Each field containing the query adds its weight, with extra credit when
    the field starts with or equals the query. Returns the total and the
    facets (event/venue/promoter) that matched.
    """
    q = normalize(query)
    if not q:
        return SearchResult()

    score = 0.0
    matched: set[SearchMatchType] = set()

    for value, weight, match_type in _search_fields(event):
        field = normalize(value)
        if q not in field:
            continue
        score += weight
        if field.startswith(q):
            score += PREFIX_BONUS
        if field == q:
            score += EXACT_BONUS
        matched.add(match_type)

    return SearchResult(score=score, matched_types=matched)
