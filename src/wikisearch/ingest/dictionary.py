"""Corpus-wide token dictionary with dense first-seen ids."""

from __future__ import annotations

from collections.abc import Iterator


class TokenDictionary:
    """Maps raw token strings to dense integer ids.

    Ids are handed out in first-occurrence order starting at 0. Once frozen,
    unseen tokens can no longer be added; lookups stay available.
    """

    def __init__(self) -> None:
        self._ids: dict[str, int] = {}
        self._tokens: list[str] = []
        self._frozen = False

    def add(self, token: str) -> int:
        """Return the id for ``token``, allocating the next id if unseen."""
        token_id = self._ids.get(token)
        if token_id is not None:
            return token_id
        if self._frozen:
            raise RuntimeError(f"Dictionary is frozen; cannot add token: {token!r}")
        token_id = len(self._tokens)
        self._ids[token] = token_id
        self._tokens.append(token)
        return token_id

    def get(self, token: str) -> int | None:
        return self._ids.get(token)

    def token_for(self, token_id: int) -> str:
        if token_id < 0 or token_id >= len(self._tokens):
            raise KeyError(f"Unknown token id: {token_id}")
        return self._tokens[token_id]

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def tokens(self) -> Iterator[str]:
        """Iterate tokens in id order."""
        return iter(self._tokens)

    def __contains__(self, token: object) -> bool:
        return token in self._ids

    def __len__(self) -> int:
        return len(self._tokens)
