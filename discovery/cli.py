"""
Recommendation CLI: rank a JSON post corpus with any strategy.

Usage:
    # Trending posts from a local dump
    discovery-recommend --data posts.json --strategy trending --limit 5

    # Mixed feed for a viewer reading a post
    discovery-recommend --data posts.json --profiles profiles.json \
        --strategy mixed --post-id p1 --user-id u1 --exclude p9

Unset options fall back to DISCOVERY_* environment variables (see settings.py).
"""

import argparse
import json
import logging
import sys
from dataclasses import replace
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from .engine import RecommendationEngine
from .models.context import RecommendationContext
from .models.scoring import ScoredItem
from .services.content_repository import JsonContentRepository
from .services.interest_store import JsonInterestStore
from .settings import EngineSettings, get_settings

logger = logging.getLogger(__name__)

STRATEGIES = ["similar", "personalized", "trending", "popular", "editorial", "category", "mixed"]


def _parse_now(value: str) -> datetime:
    dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="discovery-recommend",
        description="Rank posts from a JSON corpus with one recommendation strategy.",
    )
    parser.add_argument("--data", type=Path, help="Posts JSON (default: DISCOVERY_DATA_PATH)")
    parser.add_argument("--profiles", type=Path, help="Interest profiles JSON (default: DISCOVERY_PROFILES_PATH)")
    parser.add_argument("--config", type=Path, help="RecommendationConfig JSON (default: DISCOVERY_CONFIG_PATH)")
    parser.add_argument("--strategy", choices=STRATEGIES, default="mixed")
    parser.add_argument("--post-id", help="Seed post for similar/mixed")
    parser.add_argument("--user-id", help="Viewer for personalized/mixed")
    parser.add_argument("--category-id", help="Category for the category strategy")
    parser.add_argument("--exclude", action="append", default=[], help="Post id to exclude (repeatable)")
    parser.add_argument("--limit", type=int, default=10)
    parser.add_argument("--window-days", type=float, help="Trending window in days")
    parser.add_argument("--now", type=_parse_now, help="ISO timestamp to rank against (default: current time)")
    parser.add_argument("--log-level", help="Logging level (default: DISCOVERY_LOG_LEVEL or INFO)")
    return parser


def run(args: argparse.Namespace, engine: RecommendationEngine) -> List[ScoredItem]:
    """Dispatch one strategy call on the engine."""
    if args.strategy == "similar":
        return engine.get_similar_content(args.post_id, args.limit)
    if args.strategy == "personalized":
        return engine.get_personalized_recommendations(args.user_id, args.limit)
    if args.strategy == "trending":
        return engine.get_trending_content(args.limit, args.window_days)
    if args.strategy == "popular":
        return engine.get_popular_content(args.limit)
    if args.strategy == "editorial":
        return engine.get_editorial_picks(args.limit)
    if args.strategy == "category":
        return engine.get_category_recommendations(args.category_id, args.limit, args.exclude)
    context = RecommendationContext(
        post_id=args.post_id,
        user_id=args.user_id,
        category_id=args.category_id,
        exclude_ids=frozenset(args.exclude),
        limit=args.limit,
    )
    return engine.get_mixed_recommendations(context)


def resolve_settings(args: argparse.Namespace) -> EngineSettings:
    """Command-line options take precedence over DISCOVERY_* settings."""
    settings = get_settings()
    return replace(
        settings,
        data_path=args.data or settings.data_path,
        profiles_path=args.profiles or settings.profiles_path,
        config_path=args.config or settings.config_path,
        log_level=(args.log_level or settings.log_level).upper(),
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.limit < 1:
        parser.error("--limit must be >= 1")
    if args.strategy == "similar" and not args.post_id:
        parser.error("--post-id is required for the similar strategy")
    if args.strategy == "personalized" and not args.user_id:
        parser.error("--user-id is required for the personalized strategy")
    if args.strategy == "category" and not args.category_id:
        parser.error("--category-id is required for the category strategy")

    settings = resolve_settings(args)
    if settings.data_path is None:
        parser.error("--data or DISCOVERY_DATA_PATH is required")
    ok, errors = settings.validate()
    if not ok:
        parser.error("; ".join(errors))

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )

    repository = JsonContentRepository(settings.data_path)
    interest_store = JsonInterestStore(settings.profiles_path) if settings.profiles_path else None
    now = args.now
    engine = RecommendationEngine(
        repository,
        interest_store,
        settings.recommendation_config(),
        clock=(lambda: now) if now is not None else None,
    )

    results = run(args, engine)
    logger.info("[cli] strategy=%s returned=%d", args.strategy, len(results))
    json.dump([r.to_summary() for r in results], sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
