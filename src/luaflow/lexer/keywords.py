"""Lexer constants: keyword and operator sets.

The structural keywords themselves live on ``Tag`` (see
``Tag.for_keyword``); this module lists everything else the rule chain
needs to classify words and punctuation.
"""

from __future__ import annotations

# Word operators are tagged as operators, not keywords
LOGICAL_OPERATORS = frozenset({"and", "or", "not"})

# Tried in order; two-character operators precede their one-character prefixes
OPERATORS: tuple[str, ...] = (
    "==",
    "<=",
    ">=",
    "~=",
    "^",
    "*",
    "/",
    "%",
    "<",
    ">",
    "+",
    "-",
    "#",
)

ACCESS_CHARS = frozenset(".:")
SEPARATOR_CHARS = frozenset(";,")
OPEN_CHARS = frozenset("[{(")
CLOSE_CHARS = frozenset("]})")
QUOTE_CHARS = frozenset("\"'")

# C isspace() in the "C" locale
WHITESPACE_CHARS = " \t\n\r\f\v"
