"""Corpus loading: word files become token id streams, link files become out-links."""

from __future__ import annotations

import logging
from pathlib import Path

from wikisearch.config import CorpusConfig
from wikisearch.errors import CorpusLoadError
from wikisearch.ingest.dictionary import TokenDictionary
from wikisearch.types import Document, LoadedCorpus

logger = logging.getLogger(__name__)


def tokenize(text: str) -> list[str]:
    """Split on whitespace. Tokens are kept exactly as written."""
    return text.split()


def parse_links(text: str) -> tuple[str, ...]:
    return tuple(line.strip() for line in text.splitlines() if line.strip())


class CorpusLoader:
    """Reads ``Words/<category>/<name>`` and ``Links/<category>/<name>`` files.

    Every document of every category shares one ``TokenDictionary``. Documents
    are numbered in load order: categories in configured order, files sorted
    by name inside each category.
    """

    def __init__(self, config: CorpusConfig | None = None) -> None:
        self.config = config or CorpusConfig()

    @property
    def words_root(self) -> Path:
        return Path(self.config.root) / self.config.words_dir

    @property
    def links_root(self) -> Path:
        return Path(self.config.root) / self.config.links_dir

    def load(self) -> LoadedCorpus:
        root = Path(self.config.root)
        if not root.is_dir():
            raise CorpusLoadError(root, "corpus root is not a directory")

        dictionary = TokenDictionary()
        documents: list[Document] = []
        for category in self.config.categories:
            category_docs = self._load_category(category, dictionary, start=len(documents))
            documents.extend(category_docs)
            logger.info("Loaded %d documents from category %s", len(category_docs), category)

        dictionary.freeze()
        logger.info(
            "Corpus loaded: %d documents, %d distinct tokens",
            len(documents),
            len(dictionary),
        )
        return LoadedCorpus(dictionary=dictionary, documents=tuple(documents))

    def _load_category(
        self,
        category: str,
        dictionary: TokenDictionary,
        *,
        start: int,
    ) -> list[Document]:
        word_files = self._list_category(self.words_root / category)
        links_dir: Path | None = self.links_root / category
        if not links_dir.is_dir():
            logger.warning("No links directory for category %s at %s", category, links_dir)
            links_dir = None

        documents: list[Document] = []
        for path in word_files:
            try:
                text = path.read_text(encoding="utf-8", errors="replace")
            except OSError as exc:
                logger.warning("Skipping unreadable document %s: %s", path, exc)
                continue

            token_ids = tuple(dictionary.add(token) for token in tokenize(text))
            documents.append(
                Document(
                    index=start + len(documents),
                    source=path.name,
                    category=category,
                    token_ids=token_ids,
                    out_links=self._read_links(links_dir / path.name) if links_dir else (),
                )
            )
        return documents

    @staticmethod
    def _list_category(directory: Path) -> list[Path]:
        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as exc:
            raise CorpusLoadError(directory, str(exc)) from exc
        return [
            entry for entry in entries if entry.is_file() and not entry.name.startswith(".")
        ]

    @staticmethod
    def _read_links(path: Path) -> tuple[str, ...]:
        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            logger.warning("No links for %s: %s", path.name, exc)
            return ()
        return parse_links(text)
