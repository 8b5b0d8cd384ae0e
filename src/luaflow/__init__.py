"""
luaflow — canonical reflow for Lua source

Reads source text and re-emits it with one logical statement per line,
one tab per block depth, and a single space between tokens. Blank-line
runs and comments are kept as their own lines; all other original
whitespace is discarded.

Pipeline:
    tokenize(text) -> list[Token]          # rule-chain lexer
    segment(tokens) -> list[Token]         # logical lines + indent directives
    render(directives) -> str              # tab-indented text

Quick Start:
    >>> from luaflow import reflow
    >>> reflow("local x=1 print(x)")
    '\\nlocal x = 1 \\nprint ( x ) \\n'

Installation:
    pip install luaflow              # zero runtime dependencies
"""

from pathlib import Path

from luaflow.config import (
    FormatConfig,
    format_config_context,
    get_format_config,
    reset_format_config,
    set_format_config,
)
from luaflow.document import Document, Line
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
from luaflow.lexer import Lexer, tokenize
from luaflow.location import SourceLocation
from luaflow.renderers import DirectiveRenderer, RenderState, TextRenderer, render
from luaflow.segmenter import LineSegmenter, build_document, segment
from luaflow.tokens import Tag, Token

__version__ = "0.1.0"


def reflow(source: str, *, source_file: str | None = None) -> str:
    """Run the whole pipeline on ``source``.

    Lexing completes before segmentation starts, and the output string is
    built in full before it is returned, so a failure never yields
    partial output.

    Args:
        source: Lua source text
        source_file: Optional source file path for error messages

    Returns:
        Reflowed text, starting with a line break and ending with exactly
        one trailing line break.

    Raises:
        LexError: the source cannot be tokenized.
        RenderError: the indentation depth would go negative.
    """
    tokens = tokenize(source, source_file=source_file)
    return render(segment(tokens))


def read_source(path: str | Path) -> str:
    """Read a source file into memory.

    Raises:
        SourceNotFoundError: ``path`` does not exist.
        SourceUnreadableError: ``path`` exists but cannot be read as UTF-8 text.
    """
    file_path = Path(path)
    try:
        return file_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise SourceNotFoundError(str(path)) from exc
    except IsADirectoryError as exc:
        raise SourceUnreadableError(str(path), "is a directory") from exc
    except PermissionError as exc:
        raise SourceUnreadableError(str(path), "permission denied") from exc
    except UnicodeDecodeError as exc:
        raise SourceUnreadableError(str(path), f"not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise SourceUnreadableError(str(path), exc.strerror or str(exc)) from exc


def reflow_file(path: str | Path) -> str:
    """Read ``path`` and reflow its contents."""
    return reflow(read_source(path), source_file=str(path))


__all__ = [
    # Pipeline
    "reflow",
    "reflow_file",
    "read_source",
    "tokenize",
    "segment",
    "build_document",
    "render",
    # Components
    "Lexer",
    "LineSegmenter",
    "TextRenderer",
    "RenderState",
    "DirectiveRenderer",
    # Data model
    "Tag",
    "Token",
    "Line",
    "Document",
    "SourceLocation",
    # Configuration
    "FormatConfig",
    "format_config_context",
    "get_format_config",
    "reset_format_config",
    "set_format_config",
    # Errors
    "LuaflowError",
    "SourceFileError",
    "SourceNotFoundError",
    "SourceUnreadableError",
    "LexError",
    "UnterminatedLongBracketError",
    "UnrecognizedTokenError",
    "RenderError",
    "__version__",
]
