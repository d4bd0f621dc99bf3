"""Keyword search with PageRank over a small Wikipedia corpus."""

from .config import CorpusConfig, RankingConfig, ScoringConfig, Settings

__version__ = "0.1.0"

__all__ = ["CorpusConfig", "RankingConfig", "ScoringConfig", "Settings", "__version__"]
