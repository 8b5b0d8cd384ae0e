"""Numeric literal recognition.

The number rule grabs a greedy run of number-ish characters, then keeps
the longest prefix that is a complete numeric literal. A literal here is
anything Lua's ``tonumber`` accepts as a string: an optional sign, a
decimal integer or float with optional exponent, or a hexadecimal integer
or fraction.

Hex floats with a binary exponent (``0x1p4``) never reach the validator
intact, because ``p`` is not in the run character class; ``0x1p4`` lexes
as the number ``0x1`` followed by the word ``p4``.
"""

from __future__ import annotations

import re

# Characters a numeric run may contain
NUMBER_RUN = re.compile(r"[0-9.+\-eExa-fA-F]+")

_DECIMAL = r"(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
_HEX = r"0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)"
NUMERIC_LITERAL = re.compile(rf"[+-]?(?:{_HEX}|{_DECIMAL})")


def is_numeric_literal(text: str) -> bool:
    """Return True if ``text`` as a whole is a valid numeric literal.

    Example:
        >>> is_numeric_literal("0x1F"), is_numeric_literal("1e"), is_numeric_literal("-.5")
        (True, False, True)
    """
    return NUMERIC_LITERAL.fullmatch(text) is not None


def longest_numeric_prefix(run: str) -> int:
    """Length of the longest prefix of ``run`` that is a numeric literal.

    Returns 0 when no prefix qualifies.
    """
    for end in range(len(run), 0, -1):
        if is_numeric_literal(run[:end]):
            return end
    return 0
