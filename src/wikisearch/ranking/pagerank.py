"""Fixed-round PageRank over the corpus link graph."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from dataclasses import replace

from wikisearch.config import RankingConfig
from wikisearch.normalize import normalize_scores
from wikisearch.obs.timing import Timer
from wikisearch.types import Document

logger = logging.getLogger(__name__)


class PageRankEngine:
    """Computes per-document authority from outbound link lists.

    Document ``j`` links to document ``i`` when one of ``j``'s out-links equals
    ``link_prefix + i.source``. The out-degree of ``j`` is the length of its
    whole link list, dangling links included. The engine always runs
    ``iterations`` rounds; there is no convergence test. Final ranks are
    divided by their maximum, so the top document scores exactly 1.0.
    """

    def __init__(self, config: RankingConfig | None = None) -> None:
        self.config = config or RankingConfig()

    def compute(self, documents: Sequence[Document]) -> list[float]:
        total = len(documents)
        if total == 0:
            return []

        with Timer() as timer:
            inbound = self._inbound_links(documents)
            out_degree = [len(document.out_links) for document in documents]
            damping = self.config.damping
            base = (1.0 - damping) / total

            ranks = [1.0 / total] * total
            for _ in range(self.config.iterations):
                # Each round reads only the previous round's vector.
                ranks = [
                    base + damping * sum(ranks[j] / out_degree[j] for j in inbound[i])
                    for i in range(total)
                ]
            # No epsilon floor: with damping near 1 every rank can be tiny.
            authority = normalize_scores(ranks, epsilon=sys.float_info.min)

        logger.info(
            "PageRank finished: %d documents, %d rounds, %.1f ms",
            total,
            self.config.iterations,
            timer.elapsed_ms,
        )
        return authority

    def rank(self, documents: Sequence[Document]) -> list[Document]:
        """Return copies of ``documents`` carrying their authority score."""
        authority = self.compute(documents)
        return [
            replace(document, authority=score)
            for document, score in zip(documents, authority, strict=True)
        ]

    def _inbound_links(self, documents: Sequence[Document]) -> list[list[int]]:
        linkers: dict[str, list[int]] = {}
        for position, document in enumerate(documents):
            # A page that repeats a link still counts once as a linker.
            for target in dict.fromkeys(document.out_links):
                linkers.setdefault(target, []).append(position)

        prefix = self.config.link_prefix
        return [linkers.get(prefix + document.source, []) for document in documents]

