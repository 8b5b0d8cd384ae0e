"""Error taxonomy and message formatting."""

import pytest

from luaflow import reflow, tokenize
from luaflow.errors import (
    LexError,
    LuaflowError,
    RenderError,
    SourceFileError,
    SourceNotFoundError,
    SourceUnreadableError,
    UnrecognizedTokenError,
    UnterminatedLongBracketError,
)


class TestHierarchy:
    """Every error derives from LuaflowError."""

    @pytest.mark.parametrize(
        "cls",
        [
            SourceFileError,
            SourceNotFoundError,
            SourceUnreadableError,
            LexError,
            UnrecognizedTokenError,
            UnterminatedLongBracketError,
            RenderError,
        ],
    )
    def test_is_luaflow_error(self, cls: type) -> None:
        assert issubclass(cls, LuaflowError)

    def test_lex_subclasses(self) -> None:
        assert issubclass(UnrecognizedTokenError, LexError)
        assert issubclass(UnterminatedLongBracketError, LexError)

    def test_file_subclasses(self) -> None:
        assert issubclass(SourceNotFoundError, SourceFileError)
        assert issubclass(SourceUnreadableError, SourceFileError)


class TestLexErrorFormatting:
    """LexError produces location-prefixed messages."""

    def test_offset_only(self) -> None:
        err = LexError(3, "@x")
        assert str(err) == "lexical error: '@x'"
        assert err.lineno is None

    def test_with_line_and_column(self) -> None:
        err = UnrecognizedTokenError(10, "$", lineno=2, col_offset=4)
        assert str(err) == "2:4 unrecognized token: '$'"

    def test_with_source_file(self) -> None:
        err = UnterminatedLongBracketError(0, "[[", lineno=1, col_offset=1, source_file="a.lua")
        assert str(err) == "a.lua:1:1 unterminated long bracket: '[['"

    def test_custom_message(self) -> None:
        err = LexError(0, "x", message="custom")
        assert err.message == "custom"
        assert "custom" in str(err)


class TestUnrecognized:
    """Characters no rule accepts."""

    @pytest.mark.parametrize("char", ["@", "$", "!", "?", "`", "&", "|", "~", "\\", "é"])
    def test_raises(self, char: str) -> None:
        with pytest.raises(UnrecognizedTokenError) as info:
            tokenize(f"x = {char}")
        assert info.value.offset == 4
        assert info.value.snippet == char

    def test_unterminated_quote_is_unrecognized(self) -> None:
        with pytest.raises(UnrecognizedTokenError) as info:
            tokenize("s = 'open")
        assert info.value.offset == 4

    def test_escaped_final_quote_is_unterminated(self) -> None:
        with pytest.raises(UnrecognizedTokenError):
            tokenize('s = "a\\"')

    def test_tilde_equals_is_fine(self) -> None:
        assert [t.text for t in tokenize("a ~= b")] == ["a", "~=", "b"]


class TestNoPartialOutput:
    """Failures raise before any text is produced."""

    def test_late_lex_error(self) -> None:
        with pytest.raises(LexError):
            reflow("x = 1\n" * 50 + "[[")

    def test_unbalanced_end(self) -> None:
        with pytest.raises(RenderError):
            reflow("x = 1 end")
