"""First-match rule-chain lexer.

At each offset the rules from ``LexerRulesMixin.RULE_ORDER`` are tried in
order and the first one that claims a span wins (priority, not longest
match). Whitespace runs with fewer than two newlines are consumed without
producing a token; every other span becomes exactly one Token whose text
is the source substring it covers.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from luaflow.config import get_format_config
from luaflow.errors import LexError, UnrecognizedTokenError, UnterminatedLongBracketError
from luaflow.lexer.rules import LexerRulesMixin, RuleMatch
from luaflow.location import SourceLocation
from luaflow.tokens import Token
from luaflow.utils.logger import get_logger

logger = get_logger(__name__)

E = TypeVar("E", bound=LexError)


class Lexer(LexerRulesMixin):
    """Converts source text into an ordered list of classified tokens.

    Usage:
            >>> Lexer("local x=1").tokenize()
        [Token(local, 'local', @0), Token(word, 'x', @6), Token(assign, '=', @7),
         Token(number, '1', @8)]

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_pos",
        "_source_file",
        "_snippet_width",
        "_rules",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Lua source text
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._source_file = source_file
        self._snippet_width = get_format_config().snippet_width
        self._rules: tuple[Callable[[int], RuleMatch | None], ...] = tuple(
            getattr(self, name) for name in self.RULE_ORDER
        )

    def tokenize(self) -> list[Token]:
        """Tokenize the whole source.

        Returns:
            Tokens in source order.

        Raises:
            UnterminatedLongBracketError: a long string/comment is never closed.
            UnrecognizedTokenError: no rule matches at some offset.
        """
        tokens: list[Token] = []
        source = self._source
        while self._pos < self._source_len:
            pos = self._pos
            for rule in self._rules:
                match = rule(pos)
                if match is not None:
                    break
            else:
                raise self._error(UnrecognizedTokenError, pos)

            end, tag = match
            if tag is not None:
                tokens.append(Token(tag, source[pos:end], pos))
            self._pos = end

        logger.debug("tokenized %d characters into %d tokens", self._source_len, len(tokens))
        return tokens

    def _unterminated(self, offset: int) -> UnterminatedLongBracketError:
        return self._error(UnterminatedLongBracketError, offset)

    def _error(self, error_cls: type[E], offset: int) -> E:
        """Build a located lex error with a bounded snippet at ``offset``."""
        location = SourceLocation.from_offset(self._source, offset, self._source_file)
        return error_cls(
            offset,
            self._source[offset : offset + self._snippet_width],
            lineno=location.lineno,
            col_offset=location.col_offset,
            source_file=self._source_file,
        )


def tokenize(source: str, *, source_file: str | None = None) -> list[Token]:
    """Tokenize ``source`` with a fresh Lexer."""
    return Lexer(source, source_file=source_file).tokenize()
