"""Ordered lexer rules.

Each rule looks at the source at ``pos`` and either declines (returns
None) or claims a span, returning ``(end, tag)``. ``end`` is exclusive;
a ``None`` tag means the span is consumed without producing a token.

The Lexer tries the rules in RULE_ORDER and the first match wins. Order
is significant: several rules match prefixes of others (``--`` before
``-``, ``...`` before ``..`` before ``.``, numbers before words).
"""

from __future__ import annotations

import re
from typing import ClassVar

from luaflow.errors import UnterminatedLongBracketError
from luaflow.lexer.keywords import (
    ACCESS_CHARS,
    CLOSE_CHARS,
    LOGICAL_OPERATORS,
    OPEN_CHARS,
    OPERATORS,
    QUOTE_CHARS,
    SEPARATOR_CHARS,
    WHITESPACE_CHARS,
)
from luaflow.lexer.numbers import NUMBER_RUN, longest_numeric_prefix
from luaflow.tokens import Tag

RuleMatch = tuple[int, Tag | None]

_LONG_BRACKET_OPEN = re.compile(r"\[(=*)\[")
_WHITESPACE = re.compile(f"[{re.escape(WHITESPACE_CHARS)}]+")
_IDENTIFIER = re.compile(r"[A-Za-z0-9_]+")


class LexerRulesMixin:
    """Mixin providing the ordered rule chain.

    Required Host Attributes:
        - _source: str
        - _source_len: int

    """

    _source: str
    _source_len: int

    RULE_ORDER: ClassVar[tuple[str, ...]] = (
        "_match_quoted_string",
        "_match_long_string",
        "_match_comment",
        "_match_whitespace",
        "_match_number",
        "_match_varargs",
        "_match_concat",
        "_match_identifier",
        "_match_punctuation",
        "_match_operator",
        "_match_assign",
    )

    def _unterminated(self, offset: int) -> UnterminatedLongBracketError:
        """Build the error for an unclosed long bracket. Implemented by Lexer."""
        raise NotImplementedError

    # =========================================================================
    # Literals
    # =========================================================================

    def _match_quoted_string(self, pos: int) -> RuleMatch | None:
        """Quoted string; a backslash escapes whatever character follows it."""
        source = self._source
        quote = source[pos]
        if quote not in QUOTE_CHARS:
            return None

        i = pos + 1
        while i < self._source_len:
            char = source[i]
            if char == "\\":
                i += 2
                continue
            if char == quote:
                return i + 1, Tag.STRING
            i += 1
        # Unterminated: decline and let the chain report the quote
        return None

    def _scan_long_bracket(self, pos: int, literal_start: int) -> int | None:
        """Match ``[=*[`` at ``pos`` and return the end of its closer.

        Returns None if there is no opener at ``pos``; raises (reporting
        ``literal_start``) if the opener has no closer with the same
        number of ``=``.
        """
        opener = _LONG_BRACKET_OPEN.match(self._source, pos)
        if opener is None:
            return None

        closer = "]" + opener.group(1) + "]"
        close_at = self._source.find(closer, opener.end())
        if close_at == -1:
            raise self._unterminated(literal_start)
        return close_at + len(closer)

    def _match_long_string(self, pos: int) -> RuleMatch | None:
        end = self._scan_long_bracket(pos, pos)
        if end is None:
            return None
        return end, Tag.STRING

    def _match_comment(self, pos: int) -> RuleMatch | None:
        """Line comment up to (not including) the newline, or long comment."""
        if not self._source.startswith("--", pos):
            return None

        end = self._scan_long_bracket(pos + 2, pos)
        if end is not None:
            return end, Tag.COMMENT

        newline = self._source.find("\n", pos)
        return (newline if newline != -1 else self._source_len), Tag.COMMENT

    def _match_whitespace(self, pos: int) -> RuleMatch | None:
        """Whitespace run; two or more newlines make a blank-line marker."""
        match = _WHITESPACE.match(self._source, pos)
        if match is None:
            return None
        if match.group().count("\n") >= 2:
            return match.end(), Tag.EMPTY
        return match.end(), None

    def _match_number(self, pos: int) -> RuleMatch | None:
        run = NUMBER_RUN.match(self._source, pos)
        if run is None:
            return None
        length = longest_numeric_prefix(run.group())
        if length == 0:
            return None
        return pos + length, Tag.NUMBER

    # =========================================================================
    # Words and punctuation
    # =========================================================================

    def _match_varargs(self, pos: int) -> RuleMatch | None:
        if self._source.startswith("...", pos):
            return pos + 3, Tag.NAME
        return None

    def _match_concat(self, pos: int) -> RuleMatch | None:
        if self._source.startswith("..", pos):
            return pos + 2, Tag.OPERATOR
        return None

    def _match_identifier(self, pos: int) -> RuleMatch | None:
        match = _IDENTIFIER.match(self._source, pos)
        if match is None:
            return None

        word = match.group()
        keyword = Tag.for_keyword(word)
        if keyword is not None:
            return match.end(), keyword
        if word in LOGICAL_OPERATORS:
            return match.end(), Tag.OPERATOR
        return match.end(), Tag.WORD

    def _match_punctuation(self, pos: int) -> RuleMatch | None:
        char = self._source[pos]
        if char in ACCESS_CHARS:
            return pos + 1, Tag.ACCESS
        if char in SEPARATOR_CHARS:
            return pos + 1, Tag.SEPARATOR
        if char in OPEN_CHARS:
            return pos + 1, Tag.OPEN
        if char in CLOSE_CHARS:
            return pos + 1, Tag.CLOSE
        return None

    def _match_operator(self, pos: int) -> RuleMatch | None:
        for op in OPERATORS:
            if self._source.startswith(op, pos):
                return pos + len(op), Tag.OPERATOR
        return None

    def _match_assign(self, pos: int) -> RuleMatch | None:
        if self._source[pos] == "=":
            return pos + 1, Tag.ASSIGN
        return None
