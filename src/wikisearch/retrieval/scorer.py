"""Multi-signal query scoring: content frequency, word location and authority."""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor

from wikisearch.config import ScoringConfig
from wikisearch.ingest.loader import tokenize
from wikisearch.normalize import normalize_scores
from wikisearch.obs.timing import Timer
from wikisearch.types import CorpusIndex, SearchResult

logger = logging.getLogger(__name__)


def content_score(token_ids: tuple[int, ...], query_ids: frozenset[int]) -> int:
    """Count the document tokens that match any query word."""
    return sum(1 for token_id in token_ids if token_id in query_ids)


def location_score(token_ids: tuple[int, ...], query_ids: frozenset[int]) -> int:
    """Sum of ``first position + 1`` over the distinct query words.

    Returns 0 when any query word is missing from the document: positional
    credit is only given when every word is present.
    """

    if not query_ids:
        return 0
    first_seen: dict[int, int] = {}
    for position, token_id in enumerate(token_ids):
        if token_id in query_ids and token_id not in first_seen:
            first_seen[token_id] = position
            if len(first_seen) == len(query_ids):
                break
    if len(first_seen) != len(query_ids):
        return 0
    return sum(position + 1 for position in first_seen.values())


class QueryScorer:
    """Ranks corpus documents against whitespace-split keyword queries.

    Raw content and location scores are computed on a thread pool, one task
    per candidate document, each writing its own slot of two pre-sized
    arrays. Normalization only starts after the pool has joined.
    """

    def __init__(self, corpus: CorpusIndex, config: ScoringConfig | None = None) -> None:
        self.corpus = corpus
        self.config = config or ScoringConfig()

    @property
    def max_workers(self) -> int:
        return self.config.max_workers or os.cpu_count() or 1

    def query_ids(self, query: str) -> frozenset[int]:
        """Dictionary ids of the known query words; unknown words are dropped."""
        ids = (self.corpus.dictionary.get(word) for word in tokenize(query))
        return frozenset(token_id for token_id in ids if token_id is not None)

    def search(self, query: str, *, limit: int | None = None) -> list[SearchResult]:
        query_ids = self.query_ids(query)
        if not query_ids:
            logger.debug("No known words in query %r", query)
            return []

        with Timer() as timer:
            content_raw, location_raw = self._raw_scores(query_ids)
            results = self._combine(content_raw, location_raw)

        logger.debug(
            "Query %r matched %d documents in %.1f ms", query, len(results), timer.elapsed_ms
        )
        if limit is not None:
            return results[:limit]
        return results

    def _raw_scores(self, query_ids: frozenset[int]) -> tuple[list[float], list[float]]:
        documents = self.corpus.documents
        content_raw = [0.0] * len(documents)
        location_raw = [0.0] * len(documents)

        def _score_slot(doc_index: int) -> None:
            token_ids = documents[doc_index].token_ids
            content_raw[doc_index] = float(content_score(token_ids, query_ids))
            location_raw[doc_index] = float(location_score(token_ids, query_ids))

        # Documents outside every posting list score zero and are filtered anyway.
        candidates = sorted(self.corpus.inverted_index.candidates(query_ids))
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            list(executor.map(_score_slot, candidates))
        return content_raw, location_raw

    def _combine(
        self, content_raw: list[float], location_raw: list[float]
    ) -> list[SearchResult]:
        epsilon = self.config.epsilon
        content = normalize_scores(content_raw, epsilon=epsilon)
        location = normalize_scores(location_raw, smaller_is_better=True, epsilon=epsilon)

        results: list[SearchResult] = []
        for document in self.corpus.documents:
            i = document.index
            if content[i] <= 0:
                continue
            content_part = content[i] * self.config.content_weight
            location_part = location[i] * self.config.location_weight
            authority_part = document.authority * self.config.authority_weight
            results.append(
                SearchResult(
                    url=document.source,
                    category=document.category,
                    content_score=content_part,
                    location_score=location_part,
                    authority_score=authority_part,
                    total_score=content_part + location_part + authority_part,
                )
            )
        # sorted() is stable, so equal totals keep corpus order.
        return sorted(results, key=lambda item: item.total_score, reverse=True)
