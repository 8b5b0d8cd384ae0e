"""Rule-chain lexer for luaflow.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, tokenize
├── core.py              # Lexer class (rule dispatch, error construction)
├── rules.py             # Ordered rule mixin (first match wins)
├── numbers.py           # Numeric literal prefix validation
└── keywords.py          # Operator and punctuation constants

Usage:
    >>> from luaflow.lexer import tokenize
    >>> [t.tag.value for t in tokenize("while x do")]
    ['while', 'word', 'do']

"""

from luaflow.lexer.core import Lexer, tokenize

__all__ = ["Lexer", "tokenize"]
