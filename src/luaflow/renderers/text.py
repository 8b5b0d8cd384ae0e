"""Plain-text renderer for the directive stream.

Layout is fixed: one tab per indentation level, each content token
stripped of surrounding whitespace and followed by a single space, and
exactly one line break after the last directive.

Thread Safety:
All per-render state lives in a RenderState created fresh for each
render() call. A TextRenderer instance can be shared across threads.

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from luaflow.errors import RenderError
from luaflow.tokens import Tag, Token
from luaflow.utils.logger import get_logger

logger = get_logger(__name__)

INDENT_UNIT = "\t"
SEPARATOR = " "


@dataclass(slots=True)
class RenderState:
    """Per-render mutable state.

    Attributes:
        depth: Current indentation depth (never negative)
        max_depth: Deepest level reached so far
        lineno: Output lines started so far
        parts: Output fragments, joined once at the end

    """

    depth: int = 0
    max_depth: int = 0
    lineno: int = 0
    parts: list[str] = field(default_factory=list)


class TextRenderer:
    """Render a directive stream to reflowed source text.

    Usage:
        >>> from luaflow.tokens import Tag, Token
        >>> TextRenderer().render([
        ...     Token.directive(Tag.NEWLINE), Token(Tag.WORD, "x", 0),
        ... ])
        '\\nx \\n'

    """

    def render(self, directives: Sequence[Token]) -> str:
        """Render ``directives`` to text.

        Raises:
            RenderError: an indent-decrease would take depth below zero.
        """
        state = RenderState()
        for token in directives:
            self._emit(token, state)
        state.parts.append("\n")

        logger.debug(
            "rendered %d directives, final depth %d, max depth %d",
            len(directives),
            state.depth,
            state.max_depth,
        )
        return "".join(state.parts)

    def _emit(self, token: Token, state: RenderState) -> None:
        tag = token.tag
        if tag is Tag.NEWLINE:
            state.lineno += 1
            state.parts.append("\n" + INDENT_UNIT * state.depth)
        elif tag is Tag.INDENT_INCREASE:
            state.depth += 1
            state.max_depth = max(state.max_depth, state.depth)
        elif tag is Tag.INDENT_DECREASE:
            if state.depth == 0:
                raise RenderError(
                    f"indentation depth would go negative before output line {state.lineno + 1}"
                )
            state.depth -= 1
        else:
            state.parts.append(token.text.strip() + SEPARATOR)


def render(directives: Sequence[Token]) -> str:
    """Render ``directives`` with a fresh TextRenderer."""
    return TextRenderer().render(directives)
