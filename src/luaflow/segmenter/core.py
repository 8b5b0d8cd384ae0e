"""Logical-line segmentation.

Statement separators are optional in the source language, so line
boundaries are inferred from token tags and a little context instead of
a parse:

1. Pass 1 walks the tokens once, opening a new line before MUST_START
   tags (and context-approved MIGHT_START tags) and closing the current
   line after MUST_END tags, after a ``)`` that ends a function's
   parameter list, and between adjacent tags in STATEMENT_BREAKS.
2. Pass 2 (``Document.directives``) flattens the lines into the
   newline / indent directive stream.

Complexity:
Pass 1 is linear except for the backward scan behind each ``)``, which
runs until the nearest closer or ``function``. Deep nesting with no
closers in between can push the total toward O(n^2); this is accepted
for source-file sized inputs.

"""

from __future__ import annotations

from collections.abc import Sequence

from luaflow.document import Document, Line
from luaflow.segmenter.context import TokenContext
from luaflow.segmenter.rules import (
    DO_OWNERS,
    FUNCTION_BINDERS,
    MUST_END,
    MUST_START,
    SCAN_STOPPERS,
    STATEMENT_BREAKS,
)
from luaflow.tokens import Tag, Token
from luaflow.utils.logger import get_logger

logger = get_logger(__name__)


class LineSegmenter:
    """Splits a token list into logical lines.

    Usage:
            >>> from luaflow.lexer import tokenize
            >>> doc = LineSegmenter(tokenize("local x=1 print(x)")).build()
            >>> [line.text for line in doc]
            ['local x = 1 ', 'print ( x ) ']

    Thread Safety:
        Segmenter instances are single-use. The input sequence is copied;
        reclassified tokens are new objects, so the caller's tokens are
        never modified.

    """

    __slots__ = ("_context", "_lines", "_current")

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._context = TokenContext(list(tokens))
        self._lines: list[Line] = []
        self._current: list[Token] = []

    def build(self) -> Document:
        """Run pass 1 and return the segmented Document."""
        context = self._context
        for index in range(len(context)):
            token = context.at(index)

            if self._current and self._starts_line(index, token):
                self._close_line()

            ends = token.tag in MUST_END
            if self._ends_parameters(index, token):
                token = token.retag(Tag.CLOSE_PARAMETERS)
                context.replace(index, token)
                ends = True
                logger.debug("reclassified ')' at offset %d as close-parameters", token.offset)

            self._current.append(token)

            if ends or (token.tag, context.relative(index, 1).tag) in STATEMENT_BREAKS:
                self._close_line()

        self._close_line()
        logger.debug("segmented %d tokens into %d lines", len(context), len(self._lines))
        return Document(tuple(self._lines))

    def _close_line(self) -> None:
        if self._current:
            self._lines.append(Line(tuple(self._current)))
            self._current = []

    # =========================================================================
    # Context-dependent boundaries
    # =========================================================================

    def _starts_line(self, index: int, token: Token) -> bool:
        """MUST_START, or a MIGHT_START tag whose context allows it."""
        if token.tag in MUST_START:
            return True
        if token.tag is Tag.DO:
            # `for ... do` and `while ... do` keep their `do`
            return self._current[0].tag not in DO_OWNERS
        if token.tag is Tag.FUNCTION:
            # Anonymous function argument, or the `local function` pair
            return self._context.relative(index, -1).tag not in FUNCTION_BINDERS
        return False

    def _ends_parameters(self, index: int, token: Token) -> bool:
        """True if ``token`` is the ``)`` closing a function's parameter list.

        Scans backward for the nearest closer or ``function``; only a
        ``function`` reached first makes this a parameter list.
        """
        if token.tag is not Tag.CLOSE or token.text != ")":
            return False
        return self._context.first_behind(index, SCAN_STOPPERS).tag is Tag.FUNCTION


def build_document(tokens: Sequence[Token]) -> Document:
    """Segment ``tokens`` into logical lines."""
    return LineSegmenter(tokens).build()


def segment(tokens: Sequence[Token]) -> list[Token]:
    """Segment ``tokens`` and flatten the result into the directive stream."""
    return build_document(tokens).directives()
