"""Command line entry point: build the index, then query it or serve it.

Usage:
    wikisearch --corpus data --port 8080
    wikisearch --corpus data --query "video game"
"""

from __future__ import annotations

import argparse
import json
import logging

import uvicorn
from pydantic import ValidationError

from wikisearch.config import Settings
from wikisearch.errors import CorpusLoadError
from wikisearch.ingest.pipeline import build_corpus_index
from wikisearch.obs.timing import configure_logging
from wikisearch.retrieval.scorer import QueryScorer

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="wikisearch", description=__doc__.splitlines()[0])
    parser.add_argument("--corpus", help="Corpus root holding Words/ and Links/")
    parser.add_argument("--host")
    parser.add_argument("--port", type=int)
    parser.add_argument("--workers", type=int, help="Scoring threads per query")
    parser.add_argument("--log-level")
    parser.add_argument("--query", help="Run one query, print JSON results and exit")
    parser.add_argument("--limit", type=int, default=10, help="Results printed with --query")
    return parser.parse_args(argv)


def _overrides(args: argparse.Namespace) -> dict[str, dict[str, object]]:
    overrides: dict[str, dict[str, object]] = {"corpus": {}, "scoring": {}, "server": {}}
    if args.corpus is not None:
        overrides["corpus"]["root"] = args.corpus
    if args.workers is not None:
        overrides["scoring"]["max_workers"] = args.workers
    if args.host is not None:
        overrides["server"]["host"] = args.host
    if args.port is not None:
        overrides["server"]["port"] = args.port
    if args.log_level is not None:
        overrides["server"]["log_level"] = args.log_level
    return overrides


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        settings = Settings.from_env(_overrides(args))
    except ValidationError as exc:
        configure_logging()
        logger.error("Invalid configuration:\n%s", exc)
        return 2
    configure_logging(settings.server.log_level)

    try:
        corpus = build_corpus_index(settings)
    except CorpusLoadError as exc:
        logger.error("Startup aborted: %s", exc)
        return 1

    if args.query is not None:
        results = QueryScorer(corpus, settings.scoring).search(args.query, limit=args.limit)
        print(json.dumps([result.to_payload() for result in results], indent=2))
        return 0

    from wikisearch.api.main import create_app

    uvicorn.run(
        create_app(settings, corpus_index=corpus),
        host=settings.server.host,
        port=settings.server.port,
        log_level=settings.server.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
