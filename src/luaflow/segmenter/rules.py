"""Line-boundary tables.

Tags only; the context-dependent decisions (MIGHT_START / MIGHT_END) are
methods on LineSegmenter because they need the token context.
"""

from __future__ import annotations

from luaflow.tokens import Tag

# Always the first token of their line
MUST_START = frozenset(
    {
        Tag.IF,
        Tag.LOCAL,
        Tag.REPEAT,
        Tag.ELSE,
        Tag.ELSEIF,
        Tag.END,
        Tag.UNTIL,
        Tag.WHILE,
        Tag.FOR,
        # statements
        Tag.RETURN,
        Tag.BREAK,
        # formatting
        Tag.COMMENT,
        Tag.EMPTY,
    }
)

# Always the last token of their line
MUST_END = frozenset(
    {
        Tag.THEN,
        Tag.ELSE,
        Tag.END,
        Tag.REPEAT,
        Tag.DO,
        # statements
        Tag.BREAK,
        # formatting
        Tag.EMPTY,
        Tag.COMMENT,
    }
)

# `do` stays attached to a line opened by one of these
DO_OWNERS = frozenset({Tag.FOR, Tag.WHILE})

# `function` right after one of these does not open a line
FUNCTION_BINDERS = frozenset({Tag.OPEN, Tag.LOCAL})

# Backward scan from `)` stops at these (answer: not a parameter list)
SCAN_STOPPERS = frozenset({Tag.CLOSE, Tag.CLOSE_PARAMETERS, Tag.FUNCTION})

# An expression-ending tag followed by a statement-starting tag means an
# omitted statement separator
STATEMENT_BREAKS = frozenset(
    {
        (Tag.CLOSE, Tag.WORD),
        (Tag.WORD, Tag.WORD),
        (Tag.STRING, Tag.WORD),
        (Tag.NUMBER, Tag.WORD),
    }
)
