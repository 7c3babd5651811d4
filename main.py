#!/usr/bin/env python3
"""
Talent Match command line.

Usage:
    python main.py score --talent talent.json --job job.json [--weights weights.json]
    python main.py rank --job-id <uuid> [--min-score 60] [--limit 10]
    python main.py init-db
"""

import sys
import json
import logging
import argparse

from core.config_loader import load_config, resolve_weights
from core.matching import JobPosting, TalentProfile, calculate_match_score, rank_talents_for_job

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def _read_json(path):
    with open(path, "r") as f:
        return json.load(f)


def cmd_score(args, config):
    talent = TalentProfile.from_record(_read_json(args.talent))
    job = JobPosting.from_record(_read_json(args.job))
    overrides = _read_json(args.weights) if args.weights else None
    weights = resolve_weights(overrides, base=config.matching.weights)

    result = calculate_match_score(talent, job, weights)
    print(json.dumps(result.to_dict(), indent=2))
    return 0


def cmd_rank(args, config):
    from database.uow import talent_uow

    with talent_uow() as repos:
        job_row = repos.jobs.get_by_id(args.job_id)
        if job_row is None:
            logger.error(f"Job {args.job_id} not found")
            return 1
        job = JobPosting.from_record(job_row)
        talents = [
            TalentProfile.from_record(row)
            for row in repos.talents.list_by_status(config.matching.talent_statuses)
        ]

    ranked = rank_talents_for_job(
        job,
        talents,
        weights=config.matching.weights,
        min_score=args.min_score if args.min_score is not None else config.matching.min_score,
        limit=args.limit or config.matching.limit,
    )
    print(json.dumps([r.to_dict() for r in ranked], indent=2))
    return 0


def cmd_init_db(args, config):
    from database.database import build_engine
    from database.init_db import init_db

    init_db(build_engine(config.database.url))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Talent Match")
    parser.add_argument("--config", default="config.yaml", help="Path to config.yaml")
    sub = parser.add_subparsers(dest="command", required=True)

    score = sub.add_parser("score", help="Score a talent JSON record against a job JSON record")
    score.add_argument("--talent", required=True)
    score.add_argument("--job", required=True)
    score.add_argument("--weights", help="JSON file with partial weight overrides")
    score.set_defaults(func=cmd_score)

    rank = sub.add_parser("rank", help="Rank eligible talents for a stored job")
    rank.add_argument("--job-id", required=True)
    rank.add_argument("--min-score", type=int)
    rank.add_argument("--limit", type=int)
    rank.set_defaults(func=cmd_rank)

    init = sub.add_parser("init-db", help="Create database tables")
    init.set_defaults(func=cmd_init_db)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(args.config)
    return args.func(args, config)


if __name__ == "__main__":
    sys.exit(main())
