import pytest

from feedrank.models import EntityKind, EventItem, EventKind, FlyerTag, SearchMatchType
from feedrank.recommend.search import search_score


def _make_event(**kwargs) -> EventItem:
    defaults = {"id": "evt", "kind": EventKind.CONCERT}
    defaults.update(kwargs)
    return EventItem(**defaults)


@pytest.mark.parametrize("query", ["", "   "])
def test_empty_query(query):
    event = _make_event(title="Warehouse Night", venue="Warehouse")
    result = search_score(event, query)
    assert result.score == 0.0
    assert result.matched_types == set()


def test_exact_title_match():
    event = _make_event(title="Warehouse Night")
    result = search_score(event, "warehouse night")
    assert result.score == pytest.approx(4.1 + 0.7 + 1.0)
    assert result.matched_types == {SearchMatchType.EVENT}


def test_title_and_flyer_promoter():
    event = _make_event(
        title="Riot Fest Kickoff",
        flyer_tags=[FlyerTag(entity_name="The Riot Grrrl Collective", entity_kind=EntityKind.COLLECTIVE)],
    )
    result = search_score(event, "riot")
    assert result.score == pytest.approx(4.8 + 2.2)
    assert result.matched_types == {SearchMatchType.EVENT, SearchMatchType.PROMOTER}


def test_substring_only():
    event = _make_event(description="An evening of noise")
    result = search_score(event, "noise")
    assert result.score == pytest.approx(0.8)


def test_query_is_normalized():
    event = _make_event(venue="Elsewhere")
    result = search_score(event, "  ELSEWHERE ")
    assert result.score == pytest.approx(3.7 + 0.7 + 1.0)
    assert result.matched_types == {SearchMatchType.VENUE}


def test_venue_and_address():
    event = _make_event(venue="Mission Records", address="12 Mission St")
    result = search_score(event, "mission")
    assert result.score == pytest.approx((3.7 + 0.7) + 1.2)
    assert result.matched_types == {SearchMatchType.VENUE}


def test_promoter_field():
    event = _make_event(promoter="Loud Co")
    assert search_score(event, "loud").score == pytest.approx(3.6 + 0.7)


def test_each_tag_counts():
    event = _make_event(tags=["punk", "Pop Punk", "folk"])
    result = search_score(event, "punk")
    # "punk" exact, "pop punk" contains only
    assert result.score == pytest.approx((1.1 + 0.7 + 1.0) + 1.1)
    assert result.matched_types == {SearchMatchType.EVENT}


def test_event_fields_weights():
    event = _make_event(category="Jazz", subcategory="Jazz fusion", neighborhood="Jazz District")
    result = search_score(event, "jazz")
    expected = (1.6 + 0.7 + 1.0) + (1.8 + 0.7) + (1.3 + 0.7)
    assert result.score == pytest.approx(expected)


@pytest.mark.parametrize(
    ("entity_kind", "weight", "match_type"),
    [
        (EntityKind.VENUE, 2.2, SearchMatchType.VENUE),
        (EntityKind.PROMOTER, 2.2, SearchMatchType.PROMOTER),
        (EntityKind.COLLECTIVE, 2.2, SearchMatchType.PROMOTER),
        (EntityKind.BAND, 1.4, SearchMatchType.EVENT),
        (EntityKind.PERSON, 1.4, SearchMatchType.EVENT),
        (EntityKind.OTHER, 1.4, SearchMatchType.EVENT),
    ],
)
def test_flyer_tag_dispatch(entity_kind, weight, match_type):
    event = _make_event(flyer_tags=[FlyerTag(entity_name="Big Moth", entity_kind=entity_kind)])
    result = search_score(event, "moth")
    assert result.score == pytest.approx(weight)
    assert result.matched_types == {match_type}


def test_match_types_are_a_set():
    event = _make_event(title="Noise Fest", description="noise all day", tags=["noise"])
    result = search_score(event, "noise")
    assert result.matched_types == {SearchMatchType.EVENT}


def test_no_match():
    event = _make_event(title="Warehouse Night", venue="Elsewhere", promoter="Loud Co")
    result = search_score(event, "jazz")
    assert result.score == 0.0
    assert result.matched_types == set()


def test_score_is_repeatable():
    event = _make_event(title="Riot Fest", venue="Riot Hall")
    assert search_score(event, "riot") == search_score(event, "riot")
