"""Configuration models for the search engine."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_CATEGORIES = ("Games", "Programming")


class CorpusConfig(BaseModel):
    """Locates the corpus on disk and the categories to load from it."""

    root: Path = Field(default=Path("data"))
    categories: tuple[str, ...] = Field(default=DEFAULT_CATEGORIES, min_length=1)
    words_dir: str = "Words"
    links_dir: str = "Links"


class RankingConfig(BaseModel):
    """Configures the fixed-round PageRank computation."""

    iterations: int = Field(default=20, ge=1)
    damping: float = Field(default=0.85, ge=0.0, lt=1.0)
    link_prefix: str = "/wiki/"


class ScoringConfig(BaseModel):
    """Weights and worker pool size for query scoring."""

    content_weight: float = Field(default=1.0, ge=0.0)
    location_weight: float = Field(default=0.8, ge=0.0)
    authority_weight: float = Field(default=0.5, ge=0.0)
    epsilon: float = Field(default=1e-5, gt=0.0)
    max_workers: int | None = Field(default=None, ge=1)


class ServerConfig(BaseModel):
    host: str = "127.0.0.1"
    port: int = Field(default=8080, ge=1, le=65535)
    log_level: str = "INFO"


class Settings(BaseModel):
    """Top-level settings aggregate passed to the pipeline and the API."""

    corpus: CorpusConfig = Field(default_factory=CorpusConfig)
    ranking: RankingConfig = Field(default_factory=RankingConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)

    @classmethod
    def from_env(
        cls, overrides: dict[str, dict[str, object]] | None = None
    ) -> "Settings":
        """Build settings from ``WIKISEARCH_*`` environment variables.

        ``overrides`` (per-section values, e.g. from command line flags) win
        over the environment and are merged in before validation.
        """

        corpus: dict[str, object] = {}
        if root := os.getenv("WIKISEARCH_CORPUS_ROOT"):
            corpus["root"] = root
        if categories := os.getenv("WIKISEARCH_CATEGORIES"):
            corpus["categories"] = tuple(
                name.strip() for name in categories.split(",") if name.strip()
            )

        ranking: dict[str, object] = {}
        if iterations := os.getenv("WIKISEARCH_PAGERANK_ITERATIONS"):
            ranking["iterations"] = iterations
        if damping := os.getenv("WIKISEARCH_DAMPING"):
            ranking["damping"] = damping

        scoring: dict[str, object] = {}
        if workers := os.getenv("WIKISEARCH_WORKERS"):
            scoring["max_workers"] = workers

        server: dict[str, object] = {
            "host": os.getenv("WIKISEARCH_HOST", "127.0.0.1"),
            "port": os.getenv("WIKISEARCH_PORT", "8080"),
            "log_level": os.getenv("WIKISEARCH_LOG_LEVEL", "INFO"),
        }

        data = {"corpus": corpus, "ranking": ranking, "scoring": scoring, "server": server}
        for section, values in (overrides or {}).items():
            data[section].update(values)
        return cls.model_validate(data)
