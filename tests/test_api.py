"""End-to-end tests for the public pipeline API."""

from pathlib import Path

import pytest

import luaflow
from luaflow import (
    SourceNotFoundError,
    SourceUnreadableError,
    build_document,
    read_source,
    reflow,
    reflow_file,
    render,
    segment,
    tokenize,
)

PROGRAM = """local function add(a, b)
  return a + b
end

-- entry point
for i = 1, 3 do
if i % 2 == 0 then print("even") else print('odd') end
end
"""

EXPECTED = (
    "\n"
    "local function add ( a , b ) \n"
    "\treturn a + b \n"
    "end \n"
    " \n"
    "-- entry point \n"
    "for i = 1 , 3 do \n"
    "\tif i % 2 == 0 then \n"
    '\t\tprint ( "even" ) \n'
    "\telse \n"
    "\t\tprint ( 'odd' ) \n"
    "\tend \n"
    "end \n"
)


class TestReflow:
    """Whole-pipeline behaviour."""

    def test_statement_break_example(self) -> None:
        assert reflow("local x=1 print(x)") == "\nlocal x = 1 \nprint ( x ) \n"

    def test_program(self) -> None:
        assert reflow(PROGRAM) == EXPECTED

    def test_program_is_stable(self) -> None:
        assert reflow(EXPECTED) == EXPECTED

    def test_while_do_same_line(self) -> None:
        assert reflow("while x do y() end") == "\nwhile x do \n\ty ( ) \nend \n"

    def test_function_parameters_indent(self) -> None:
        assert reflow("function f(a, b) return a end") == (
            "\nfunction f ( a , b ) \n\treturn a \nend \n"
        )

    def test_repeat_until(self) -> None:
        assert reflow("repeat x = x + 1 until x > 3") == (
            "\nrepeat \n\tx = x + 1 \nuntil x > 3 \n"
        )

    def test_anonymous_function_argument(self) -> None:
        assert reflow("pcall(function() error('x') end)") == (
            "\npcall ( function ( ) \n\terror ( 'x' ) \nend \n) \n"
        )

    def test_long_string_is_verbatim(self) -> None:
        assert reflow("s = [[\n  keep\n]]") == "\ns = [[\n  keep\n]] \n"

    def test_empty_source(self) -> None:
        assert reflow("") == "\n"

    def test_ends_with_exactly_one_line_break(self) -> None:
        out = reflow("x = 1\n\n\n")
        assert out.endswith(" \n")
        assert not out.endswith("\n\n")

    def test_matches_manual_pipeline(self) -> None:
        assert reflow(PROGRAM) == render(segment(tokenize(PROGRAM)))

    def test_document_line_count(self) -> None:
        doc = build_document(tokenize(PROGRAM))
        assert len(doc) == 12


class TestReflowFile:
    """File loading and its error mapping."""

    def test_reads_and_reflows(self, tmp_path: Path) -> None:
        path = tmp_path / "main.lua"
        path.write_text("local x=1 print(x)", encoding="utf-8")
        assert reflow_file(path) == "\nlocal x = 1 \nprint ( x ) \n"

    def test_accepts_str_path(self, tmp_path: Path) -> None:
        path = tmp_path / "main.lua"
        path.write_text("x = 1", encoding="utf-8")
        assert reflow_file(str(path)) == "\nx = 1 \n"

    def test_missing_file(self, tmp_path: Path) -> None:
        missing = tmp_path / "nope.lua"
        with pytest.raises(SourceNotFoundError) as info:
            read_source(missing)
        assert info.value.path == str(missing)
        assert "cannot open file" in str(info.value)

    def test_directory(self, tmp_path: Path) -> None:
        with pytest.raises(SourceUnreadableError):
            read_source(tmp_path)

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.lua"
        path.write_bytes(b"x = '\xff\xfe'")
        with pytest.raises(SourceUnreadableError, match="UTF-8"):
            reflow_file(path)

    def test_lex_error_names_file(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.lua"
        path.write_text("x = 1\ny = @", encoding="utf-8")
        with pytest.raises(luaflow.UnrecognizedTokenError) as info:
            reflow_file(path)
        assert str(path) in str(info.value)
        assert info.value.lineno == 2
