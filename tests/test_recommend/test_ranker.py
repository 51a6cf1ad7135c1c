from feedrank.config import settings
from feedrank.models import EventItem, EventKind, InteractionProfile, SearchMatchType
from feedrank.recommend.ranker import rank_feed, search_events


def _make_events() -> list[EventItem]:
    return [
        EventItem(id="a", title="Open jam", kind=EventKind.CONCERT, venue="Elsewhere"),
        EventItem(id="b", title="Hardcore matinee", kind=EventKind.CONCERT, venue="The Pit"),
        EventItem(id="c", title="Arthouse screening", kind=EventKind.FILM, venue="Roxie"),
        EventItem(id="d", title="Stand-up hour", kind=EventKind.COMEDY, venue="The Pit"),
    ]


def _make_profile() -> InteractionProfile:
    return InteractionProfile(kinds={"concert": 1.0}, venues={"the pit": 1.0})


def test_rank_feed_orders_by_boost():
    ranked = rank_feed(_make_events(), _make_profile(), top_n=0)
    assert [r.event.id for r in ranked] == ["b", "d", "a", "c"]
    assert ranked[-1].score == 0.0


def test_rank_feed_keeps_input_order_on_ties():
    ranked = rank_feed(_make_events(), InteractionProfile(), top_n=0)
    assert [r.event.id for r in ranked] == ["a", "b", "c", "d"]


def test_rank_feed_scene_filter():
    ranked = rank_feed(_make_events(), _make_profile(), scene_id="punk", top_n=0)
    assert [r.event.id for r in ranked] == ["b", "a"]


def test_rank_feed_unknown_scene_is_empty():
    assert rank_feed(_make_events(), _make_profile(), scene_id="polka") == []


def test_rank_feed_top_n():
    ranked = rank_feed(_make_events(), _make_profile(), top_n=2)
    assert [r.event.id for r in ranked] == ["b", "d"]


def test_rank_feed_default_limit(monkeypatch):
    monkeypatch.setattr(settings, "feed_top_n", 3)
    events = [EventItem(id=str(i), title=f"Event {i}") for i in range(10)]
    assert len(rank_feed(events, InteractionProfile())) == 3


def test_rank_feed_default_limit_disabled(monkeypatch):
    monkeypatch.setattr(settings, "feed_top_n", 0)
    events = [EventItem(id=str(i), title=f"Event {i}") for i in range(10)]
    assert len(rank_feed(events, InteractionProfile())) == 10


def test_search_events_drops_misses():
    results = search_events(_make_events(), "the pit", top_n=0)
    assert [r.event.id for r in results] == ["b", "d"]
    assert all(r.matched_types == {SearchMatchType.VENUE} for r in results)


def test_search_events_orders_by_score():
    events = _make_events() + [EventItem(id="e", title="The Pit", venue="Elsewhere")]
    results = search_events(events, "the pit", top_n=0)
    assert results[0].event.id == "e"
    assert results[0].matched_types == {SearchMatchType.EVENT}


def test_search_events_empty_query():
    assert search_events(_make_events(), "") == []
