"""Tests for Line and Document (indentation deltas, directive flattening)."""

import dataclasses

import pytest

from luaflow.document import Document, Line
from luaflow.tokens import Tag, Token


def line(*tags: Tag) -> Line:
    return Line(tuple(Token(tag, tag.value, i) for i, tag in enumerate(tags)))


class TestLineDelta:
    """Deltas come from the first token, or a trailing close-parameters."""

    @pytest.mark.parametrize(
        "tags,delta",
        [
            ((Tag.IF, Tag.WORD, Tag.THEN), 1),
            ((Tag.WHILE, Tag.WORD, Tag.DO), 1),
            ((Tag.FOR, Tag.WORD, Tag.DO), 1),
            ((Tag.REPEAT,), 1),
            ((Tag.DO,), 1),
            ((Tag.FUNCTION, Tag.WORD, Tag.OPEN, Tag.CLOSE_PARAMETERS), 1),
            ((Tag.LOCAL, Tag.FUNCTION, Tag.WORD, Tag.OPEN, Tag.CLOSE_PARAMETERS), 1),
            ((Tag.WORD, Tag.OPEN, Tag.FUNCTION, Tag.OPEN, Tag.CLOSE_PARAMETERS), 1),
            ((Tag.END,), -1),
            ((Tag.UNTIL, Tag.WORD), -1),
            ((Tag.ELSE,), 0),
            ((Tag.ELSEIF, Tag.WORD, Tag.THEN), 0),
            ((Tag.WORD, Tag.ASSIGN, Tag.NUMBER), 0),
            ((Tag.COMMENT,), 0),
            ((Tag.EMPTY,), 0),
        ],
    )
    def test_delta(self, tags: tuple[Tag, ...], delta: int) -> None:
        assert line(*tags).delta == delta

    def test_else_both_dedents_and_indents(self) -> None:
        else_line = line(Tag.ELSE)
        assert else_line.dedent_before
        assert else_line.indent_after

    def test_empty_line_rejected(self) -> None:
        with pytest.raises(ValueError):
            Line(())

    def test_immutable(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            line(Tag.WORD).tokens = ()  # type: ignore[misc]

    def test_text(self) -> None:
        text_line = Line((Token(Tag.WORD, "x", 0), Token(Tag.COMMENT, "-- hi  ", 2)))
        assert text_line.text == "x -- hi "


class TestDocumentDirectives:
    """Flattening places decrease before and increase after each line."""

    def test_flatten(self) -> None:
        doc = Document((line(Tag.IF, Tag.WORD, Tag.THEN), line(Tag.WORD), line(Tag.END)))
        assert [t.tag for t in doc.directives()] == [
            Tag.NEWLINE, Tag.IF, Tag.WORD, Tag.THEN, Tag.INDENT_INCREASE,
            Tag.NEWLINE, Tag.WORD,
            Tag.INDENT_DECREASE, Tag.NEWLINE, Tag.END,
        ]

    def test_empty_document(self) -> None:
        assert Document().directives() == []
        assert len(Document()) == 0

    def test_iterates_lines(self) -> None:
        lines = (line(Tag.WORD), line(Tag.WORD))
        assert list(Document(lines)) == list(lines)
