"""Inverted index over token id streams."""

from __future__ import annotations

from collections.abc import Iterable

from wikisearch.types import Document


class InvertedIndex:
    """Map from token id -> ascending list of document indices.

    Built in one pass over the documents. A document index is stored once per
    token no matter how often the token repeats inside that document.
    """

    def __init__(self) -> None:
        self._postings: dict[int, list[int]] = {}

    @classmethod
    def build(cls, documents: Iterable[Document]) -> "InvertedIndex":
        index = cls()
        for document in documents:
            for token_id in document.token_ids:
                index._add(token_id, document.index)
        return index

    def _add(self, token_id: int, doc_index: int) -> None:
        postings = self._postings.setdefault(token_id, [])
        # Documents arrive in index order, so a repeat can only be the last entry.
        if not postings or postings[-1] != doc_index:
            postings.append(doc_index)

    def postings(self, token_id: int) -> tuple[int, ...]:
        """Return document indices containing ``token_id`` (empty if unknown)."""
        return tuple(self._postings.get(token_id, ()))

    def candidates(self, token_ids: Iterable[int]) -> set[int]:
        """Union of the posting lists of ``token_ids``."""
        found: set[int] = set()
        for token_id in token_ids:
            found.update(self._postings.get(token_id, ()))
        return found

    def __contains__(self, token_id: object) -> bool:
        return token_id in self._postings

    def __len__(self) -> int:
        return len(self._postings)
