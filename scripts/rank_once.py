#!/usr/bin/env python3
"""One-shot ranking: score a JSON snapshot of events and print the feed.

Snapshot format:
    {"events": [...], "interactions": {"<event id>": "going", ...}}

Usage: rank_once.py snapshot.json [--scene punk] [--query "riot"]
"""

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from feedrank.models import FeedSnapshot
from feedrank.recommend.profile import build_profile, top_scene
from feedrank.recommend.ranker import rank_feed, search_events
from feedrank.recommend.scenes import AUTO_SCENE


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("snapshot", type=Path)
    parser.add_argument("--scene", default=AUTO_SCENE)
    parser.add_argument("--query", default="")
    parser.add_argument("--top", type=int, default=15)
    args = parser.parse_args()

    try:
        snapshot = FeedSnapshot.model_validate_json(args.snapshot.read_text(encoding="utf-8"))
    except ValidationError as e:
        print(f"Invalid snapshot: {e}")
        sys.exit(1)
    events, interactions = snapshot.events, snapshot.interactions
    print(f"Loaded {len(events)} events, {len(interactions)} interactions.")

    if args.query:
        results = search_events(events, args.query, top_n=args.top)
        print(f"\nTop {len(results)} results for {args.query!r}:\n")
        for i, r in enumerate(results, 1):
            facets = ", ".join(sorted(t.value for t in r.matched_types))
            print(f"{i:2d}. [{r.score:.2f}] {r.event.title}  ({facets})")
        return

    profile = build_profile(events, interactions)
    print(f"Top scene: {top_scene(profile) or 'none'}")

    ranked = rank_feed(events, profile, scene_id=args.scene, top_n=args.top)
    print(f"\nTop {len(ranked)} events (scene: {args.scene}):\n")
    for i, r in enumerate(ranked, 1):
        event = r.event
        print(
            f"{i:2d}. [{r.score:.3f}] {event.title}\n"
            f"    {event.kind.value} | {event.venue or 'TBA'} | {event.promoter or 'TBA'}\n"
        )


if __name__ == "__main__":
    main()
