"""Command-line ranking of resume files against a job description.

Usage:
    applicant-ranker rank --job job.txt resumes/*.txt [--model-dir DIR] [--top N]
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from applicant_ranker.config import settings
from applicant_ranker.errors import RankerError
from applicant_ranker.models.requests import ResumeDocument
from applicant_ranker.services.pipeline.engine import RankingEngine

logger = logging.getLogger(__name__)


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="replace")


def cmd_rank(args: argparse.Namespace) -> int:
    job_description = _read_text(Path(args.job))
    resumes = [
        ResumeDocument(candidate_id=Path(p).stem, text=_read_text(Path(p)))
        for p in args.resumes
    ]

    engine = RankingEngine(model_dir=args.model_dir)
    logger.info("Ranking %d resumes using %s scoring", len(resumes), engine.scoring_method)
    results = engine.rank(job_description, resumes)
    if args.top:
        results = results[: args.top]

    json.dump([r.model_dump() for r in results], sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="applicant-ranker", description="Rank applicants for a job")
    sub = parser.add_subparsers(dest="command", required=True)

    rank = sub.add_parser("rank", help="Score resume files against a job description file")
    rank.add_argument("--job", required=True, help="Path to the job description text file")
    rank.add_argument("resumes", nargs="+", help="Resume text files (file stem is the candidate id)")
    rank.add_argument("--model-dir", default=None, help="Directory holding the trained model")
    rank.add_argument("--top", type=int, default=0, help="Only print the N best candidates")
    rank.set_defaults(func=cmd_rank)
    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except (RankerError, OSError) as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
