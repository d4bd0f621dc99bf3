"""Latency timing and logging setup."""

from __future__ import annotations

import logging
import time

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Timer:
    """Wall-clock milliseconds spent inside a ``with`` block.

    ``elapsed_ms`` is only meaningful once the block has exited; it is set
    even when the block raises.
    """

    __slots__ = ("started_at", "elapsed_ms")

    def __init__(self) -> None:
        self.started_at: float | None = None
        self.elapsed_ms = 0.0

    def __enter__(self) -> "Timer":
        self.started_at = time.perf_counter()
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        if self.started_at is not None:
            self.elapsed_ms = (time.perf_counter() - self.started_at) * 1000.0


def configure_logging(level: str | int = "INFO") -> None:
    """Install a stream handler on the root logger unless one exists."""
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
