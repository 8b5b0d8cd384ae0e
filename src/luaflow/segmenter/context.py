"""Bounded token context for the segmenter.

Lookups outside ``[0, len)`` return a sentinel token instead of raising:
``^`` before the first token, ``$`` after the last. Rules can therefore
look behind or ahead freely without bounds checks of their own.
"""

from __future__ import annotations

from collections.abc import Iterator

from luaflow.tokens import Tag, Token


class TokenContext:
    """Bidirectional accessor over the segmenter's working token list.

    The list is owned by the segmenter; ``replace`` swaps in a retagged
    copy so later backward scans see the reclassified tag.
    """

    __slots__ = ("_tokens",)

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens

    def __len__(self) -> int:
        return len(self._tokens)

    def at(self, index: int) -> Token:
        """Token at absolute ``index``, or a sentinel when out of range."""
        if index < 0:
            return Token.sentinel_begin()
        if index >= len(self._tokens):
            return Token.sentinel_end()
        return self._tokens[index]

    def relative(self, index: int, offset: int) -> Token:
        """Token at ``index + offset`` (negative offsets look behind)."""
        return self.at(index + offset)

    def replace(self, index: int, token: Token) -> None:
        self._tokens[index] = token

    def behind(self, index: int) -> Iterator[Token]:
        """Walk backward from ``index - 1`` to the first token."""
        for i in range(min(index, len(self._tokens)) - 1, -1, -1):
            yield self._tokens[i]

    def first_behind(self, index: int, tags: frozenset[Tag]) -> Token:
        """First token before ``index`` whose tag is in ``tags`` (or ``^``)."""
        for token in self.behind(index):
            if token.tag in tags:
                return token
        return Token.sentinel_begin()
