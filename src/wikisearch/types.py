"""Shared domain models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from wikisearch.index.inverted_index import InvertedIndex
    from wikisearch.ingest.dictionary import TokenDictionary


@dataclass(frozen=True, slots=True)
class Document:
    """One corpus page: its token id stream, links and authority score."""

    index: int
    source: str
    category: str
    token_ids: tuple[int, ...]
    out_links: tuple[str, ...] = ()
    authority: float = 0.0


@dataclass(frozen=True, slots=True)
class LoadedCorpus:
    """Loader output before the inverted index and ranks are attached."""

    dictionary: TokenDictionary
    documents: tuple[Document, ...]


@dataclass(frozen=True, slots=True)
class CorpusIndex:
    """Immutable dictionary/documents/index triple shared by all queries."""

    dictionary: TokenDictionary
    documents: tuple[Document, ...]
    inverted_index: InvertedIndex

    def category_counts(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for document in self.documents:
            counts[document.category] = counts.get(document.category, 0) + 1
        return counts


@dataclass(slots=True)
class SearchResult:
    """A ranked query match.

    ``location_score`` and ``authority_score`` hold weighted contributions,
    so the three component scores add up to ``total_score``.
    """

    url: str
    category: str
    content_score: float
    location_score: float
    authority_score: float
    total_score: float

    def to_payload(self) -> dict[str, Any]:
        """JSON shape shared by the HTTP API and the command line."""
        return {
            "url": self.url,
            "contentScore": self.content_score,
            "locationScore": self.location_score,
            "pageRankScore": self.authority_score,
            "totalScore": self.total_score,
        }
