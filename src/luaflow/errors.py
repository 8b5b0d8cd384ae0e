"""Exception classes for luaflow.

Every failure is fatal: the pipeline either produces the complete output
text or raises one of these before anything is written.
"""

from __future__ import annotations


class LuaflowError(Exception):
    """Base exception for all luaflow errors.

    Subclass this for specific error categories.
    """

    pass


class SourceFileError(LuaflowError):
    """The input file could not be loaded."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(message)


class SourceNotFoundError(SourceFileError):
    """The input path does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(path, f"cannot open file `{path}`: no such file")


class SourceUnreadableError(SourceFileError):
    """The input path exists but cannot be read as text."""

    def __init__(self, path: str, reason: str) -> None:
        self.reason = reason
        super().__init__(path, f"cannot open file `{path}`: {reason}")


class LexError(LuaflowError):
    """Error during tokenization.

    Carries the offending offset and a bounded snippet of the source
    starting there.
    """

    default_message = "lexical error"

    def __init__(
        self,
        offset: int,
        snippet: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
        message: str | None = None,
    ) -> None:
        """Initialize lex error with its location.

        Args:
            offset: 0-based source offset where lexing failed
            snippet: Source text starting at ``offset`` (already truncated)
            lineno: Line number of ``offset`` (1-indexed)
            col_offset: Column of ``offset`` (1-indexed)
            source_file: Path to source file (optional)
            message: Override for the class default message
        """
        self.offset = offset
        self.snippet = snippet
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file
        self.message = message or self.default_message

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{self.message}: {snippet!r}")


class UnterminatedLongBracketError(LexError):
    """A long string or long comment has no closer of the same level."""

    default_message = "unterminated long bracket"


class UnrecognizedTokenError(LexError):
    """No lexer rule matches at some offset."""

    default_message = "unrecognized token"


class RenderError(LuaflowError):
    """Error during rendering.

    Raised when an indent-decrease directive would take the depth
    below zero.
    """

    pass
