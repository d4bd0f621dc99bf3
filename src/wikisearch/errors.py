"""Exceptions raised while building the search index."""

from __future__ import annotations

from pathlib import Path


class CorpusLoadError(RuntimeError):
    """The corpus root or a category directory could not be listed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot load corpus directory {path}: {reason}")
        self.path = path
        self.reason = reason
