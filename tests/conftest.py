from collections.abc import Callable
from pathlib import Path

import pytest

from wikisearch.ingest.dictionary import TokenDictionary
from wikisearch.ingest.pipeline import assemble_index
from wikisearch.types import CorpusIndex, Document, LoadedCorpus


def build_corpus(
    pages: dict[str, list[str]],
    links: dict[str, list[str]] | None = None,
    category: str = "Games",
) -> CorpusIndex:
    """Build an in-memory corpus index from token lists, bypassing the filesystem."""
    links = links or {}
    dictionary = TokenDictionary()
    documents = []
    for index, (source, tokens) in enumerate(pages.items()):
        documents.append(
            Document(
                index=index,
                source=source,
                category=category,
                token_ids=tuple(dictionary.add(token) for token in tokens),
                out_links=tuple(links.get(source, [])),
            )
        )
    dictionary.freeze()
    return assemble_index(LoadedCorpus(dictionary=dictionary, documents=tuple(documents)))


@pytest.fixture
def write_corpus(tmp_path: Path) -> Callable[..., Path]:
    """Write ``Words/<category>/<name>`` and ``Links/<category>/<name>`` files."""

    def _write(
        words: dict[str, dict[str, str]],
        links: dict[str, dict[str, str]] | None = None,
    ) -> Path:
        root = tmp_path / "corpus"
        for category, files in words.items():
            directory = root / "Words" / category
            directory.mkdir(parents=True, exist_ok=True)
            for name, text in files.items():
                (directory / name).write_text(text, encoding="utf-8")
        for category, files in (links or {}).items():
            directory = root / "Links" / category
            directory.mkdir(parents=True, exist_ok=True)
            for name, text in files.items():
                (directory / name).write_text(text, encoding="utf-8")
        return root

    return _write


@pytest.fixture
def make_corpus() -> Callable[..., CorpusIndex]:
    return build_corpus
