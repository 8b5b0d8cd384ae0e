"""DirectiveRenderer protocol: stable interface for directive-stream renderers.

Any renderer that implements ``render(directives) -> str`` conforms to
this protocol. The built-in ``TextRenderer`` is the reference
implementation.

"""

from collections.abc import Sequence
from typing import Protocol

from luaflow.tokens import Token


class DirectiveRenderer(Protocol):
    """Protocol for directive-stream renderers."""

    def render(self, directives: Sequence[Token]) -> str:
        """Render a directive stream to a string.

        Args:
            directives: newline / indent directives interleaved with
                content tokens, as produced by ``segment``.

        Returns:
            Rendered string output.

        """
        ...
