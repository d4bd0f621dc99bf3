"""End-to-end index build: load -> rank -> invert -> freeze."""

from __future__ import annotations

import logging

from wikisearch.config import Settings
from wikisearch.index.inverted_index import InvertedIndex
from wikisearch.ingest.loader import CorpusLoader
from wikisearch.obs.timing import Timer
from wikisearch.ranking.pagerank import PageRankEngine
from wikisearch.types import CorpusIndex, LoadedCorpus

logger = logging.getLogger(__name__)


def assemble_index(loaded: LoadedCorpus, engine: PageRankEngine | None = None) -> CorpusIndex:
    """Attach authority scores and the inverted index to a loaded corpus."""

    engine = engine or PageRankEngine()
    documents = tuple(engine.rank(loaded.documents))
    return CorpusIndex(
        dictionary=loaded.dictionary,
        documents=documents,
        inverted_index=InvertedIndex.build(documents),
    )


def build_corpus_index(settings: Settings | None = None) -> CorpusIndex:
    """Build the shared search index once at startup.

    Raises ``CorpusLoadError`` when the corpus root or a category directory
    cannot be listed.
    """

    settings = settings or Settings()
    with Timer() as timer:
        loaded = CorpusLoader(settings.corpus).load()
        corpus = assemble_index(loaded, PageRankEngine(settings.ranking))

    logger.info(
        "Index ready: %d documents, %d tokens, %d posting lists in %.1f ms",
        len(corpus.documents),
        len(corpus.dictionary),
        len(corpus.inverted_index),
        timer.elapsed_ms,
    )
    return corpus
