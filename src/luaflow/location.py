"""Source location tracking for error messages.

Tokens only record an absolute offset. Line and column numbers are
computed on demand, when a diagnostic needs them.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages.

    All positions are 1-indexed (lineno and col_offset start at 1);
    ``offset`` is the 0-based absolute position it was derived from.

    Examples:
            >>> SourceLocation.from_offset("local x\\n= 1", 8)
        SourceLocation(lineno=2, col_offset=1, offset=8, source_file=None)

            >>> str(SourceLocation(3, 7, source_file="init.lua"))
            'init.lua:3:7'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def from_offset(
        cls, source: str, offset: int, source_file: str | None = None
    ) -> SourceLocation:
        """Compute line/column for ``offset`` within ``source``.

        Offsets past the end are clamped to the end of source.
        """
        offset = max(0, min(offset, len(source)))
        lineno = source.count("\n", 0, offset) + 1
        line_start = source.rfind("\n", 0, offset) + 1
        return cls(
            lineno=lineno,
            col_offset=offset - line_start + 1,
            offset=offset,
            source_file=source_file,
        )
