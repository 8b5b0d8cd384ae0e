"""Token and Tag definitions for the luaflow pipeline.

The lexer produces a list of Token objects; the segmenter consumes them and
emits the same Token type, interleaved with synthetic render directives.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
Tag is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class Tag(Enum):
    """Closed set of token tags.

    Values are the literal tag strings, so ``Tag("if") is Tag.IF``.
    Organized by category:
    - Structural keywords (one tag per keyword)
    - Literals and words
    - Punctuation
    - Formatting units (comment, blank run)
    - Segmenter-only tags (reclassification, sentinels, render directives)

    """

    # Structural keywords
    IF = "if"
    THEN = "then"
    ELSEIF = "elseif"
    ELSE = "else"
    END = "end"
    FOR = "for"
    IN = "in"
    DO = "do"
    REPEAT = "repeat"
    UNTIL = "until"
    WHILE = "while"
    FUNCTION = "function"
    LOCAL = "local"
    RETURN = "return"
    BREAK = "break"

    # Literals and words
    STRING = "string"
    NUMBER = "number"
    WORD = "word"
    NAME = "name"  # ... (varargs)

    # Punctuation
    OPERATOR = "operator"
    ACCESS = "access"  # . :
    SEPARATOR = "separator"  # ; ,
    OPEN = "open"  # [ { (
    CLOSE = "close"  # ] } )
    ASSIGN = "assign"  # =

    # Formatting units
    COMMENT = "comment"
    EMPTY = "empty"  # whitespace run with two or more newlines

    # Reclassified by the segmenter: ) ending a function's parameter list
    CLOSE_PARAMETERS = "close-parameters"

    # Context sentinels (never part of a real token list)
    BEGIN = "^"
    FINISH = "$"

    # Render directives
    NEWLINE = "newline"
    INDENT_INCREASE = "indent-increase"
    INDENT_DECREASE = "indent-decrease"

    @classmethod
    def for_keyword(cls, word: str) -> Tag | None:
        """Return the keyword tag for ``word``, or None if it is not a keyword."""
        return _KEYWORD_TAGS.get(word)


_KEYWORD_TAGS: dict[str, Tag] = {
    tag.value: tag
    for tag in (
        Tag.IF,
        Tag.THEN,
        Tag.ELSEIF,
        Tag.ELSE,
        Tag.END,
        Tag.FOR,
        Tag.IN,
        Tag.DO,
        Tag.REPEAT,
        Tag.UNTIL,
        Tag.WHILE,
        Tag.FUNCTION,
        Tag.LOCAL,
        Tag.RETURN,
        Tag.BREAK,
    )
}

DIRECTIVE_TAGS = frozenset({Tag.NEWLINE, Tag.INDENT_INCREASE, Tag.INDENT_DECREASE})
SENTINEL_TAGS = frozenset({Tag.BEGIN, Tag.FINISH})


@dataclass(frozen=True, slots=True)
class Token:
    """A classified slice of source text.

    Attributes:
        tag: The token tag (from Tag enum)
        text: Exactly the source substring matched by the lexer rule.
            Empty for sentinels and render directives.
        offset: 0-based start offset in source; -1 for synthetic tokens.

    Thread Safety:
        Frozen dataclass. Reclassification goes through ``retag``, which
        returns a new Token.

    """

    tag: Tag
    text: str
    offset: int = -1

    def retag(self, tag: Tag) -> Token:
        """Return a copy of this token carrying ``tag``."""
        return replace(self, tag=tag)

    @property
    def end_offset(self) -> int:
        """Offset one past the last source character (-1 for synthetic tokens)."""
        if self.offset < 0:
            return -1
        return self.offset + len(self.text)

    @property
    def is_directive(self) -> bool:
        return self.tag in DIRECTIVE_TAGS

    @property
    def is_sentinel(self) -> bool:
        return self.tag in SENTINEL_TAGS

    @classmethod
    def sentinel_begin(cls) -> Token:
        """Virtual token standing before the first real token."""
        return _BEGIN

    @classmethod
    def sentinel_end(cls) -> Token:
        """Virtual token standing after the last real token."""
        return _FINISH

    @classmethod
    def directive(cls, tag: Tag) -> Token:
        """Render directive token (newline / indent-increase / indent-decrease)."""
        if tag not in DIRECTIVE_TAGS:
            raise ValueError(f"{tag.value!r} is not a render directive")
        return _DIRECTIVES[tag]

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        text = self.text
        if len(text) > 20:
            text = text[:17] + "..."
        return f"Token({self.tag.value}, {text!r}, @{self.offset})"


_BEGIN = Token(Tag.BEGIN, "")
_FINISH = Token(Tag.FINISH, "")
_DIRECTIVES = {tag: Token(tag, "") for tag in DIRECTIVE_TAGS}
