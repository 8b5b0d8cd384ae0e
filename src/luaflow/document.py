"""Logical lines and the segmented document.

A Line is one reflowed statement, block keyword, comment, or blank-run
unit. A Document is the ordered list of Lines produced by segmentation;
``Document.directives()`` flattens it into the directive stream the
renderer consumes.

Thread Safety:
Line and Document are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from luaflow.tokens import Tag, Token

# First-token tags that indent the following lines
INCREASE = frozenset(
    {
        Tag.IF,
        Tag.WHILE,
        Tag.REPEAT,
        Tag.ELSE,
        Tag.ELSEIF,
        Tag.FOR,
        Tag.DO,
        Tag.FUNCTION,
    }
)

# First-token tags that dedent their own line
DECREASE = frozenset({Tag.END, Tag.ELSE, Tag.ELSEIF, Tag.UNTIL})


@dataclass(frozen=True, slots=True)
class Line:
    """Tokens belonging to one logical line.

    Attributes:
        tokens: Content tokens in source order (never empty)

    """

    tokens: tuple[Token, ...]

    def __post_init__(self) -> None:
        if not self.tokens:
            raise ValueError("a Line needs at least one token")

    @property
    def first(self) -> Token:
        return self.tokens[0]

    @property
    def last(self) -> Token:
        return self.tokens[-1]

    @property
    def dedent_before(self) -> bool:
        """True if this line sits one level shallower than the lines before it."""
        return self.first.tag in DECREASE

    @property
    def indent_after(self) -> bool:
        """True if the lines after this one sit one level deeper."""
        return self.first.tag in INCREASE or self.last.tag is Tag.CLOSE_PARAMETERS

    @property
    def delta(self) -> int:
        """Net indentation change across this line: -1, 0 or +1.

        ``else``/``elseif`` lines dedent and re-indent, netting 0.
        """
        return int(self.indent_after) - int(self.dedent_before)

    @property
    def text(self) -> str:
        """The line's tokens joined the way the renderer lays them out."""
        return "".join(token.text.strip() + " " for token in self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)


@dataclass(frozen=True, slots=True)
class Document:
    """Ordered logical lines of one source file."""

    lines: tuple[Line, ...] = ()

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def directives(self) -> list[Token]:
        """Flatten into the render stream.

        Per line: indent-decrease (if the line dedents), newline, the
        content tokens, indent-increase (if the following lines indent).
        """
        decrease = Token.directive(Tag.INDENT_DECREASE)
        newline = Token.directive(Tag.NEWLINE)
        increase = Token.directive(Tag.INDENT_INCREASE)

        out: list[Token] = []
        for line in self.lines:
            if line.dedent_before:
                out.append(decrease)
            out.append(newline)
            out.extend(line.tokens)
            if line.indent_after:
                out.append(increase)
        return out
