"""TokenRenderer protocol: stable interface for token renderers.

Any renderer that implements ``render(tokens) -> str`` conforms to this protocol.
The built-in ``HtmlRenderer`` is the reference implementation.

Example:
    from marklite.renderers.protocol import TokenRenderer

    def render_page(renderer: TokenRenderer, tokens: list[Token]) -> str:
        return renderer.render(tokens)

"""

from collections.abc import Iterable
from typing import Protocol

from marklite.tokens import Token


class TokenRenderer(Protocol):
    """Protocol for token renderers.

    Implementations must accept an ordered token sequence and return a
    rendered string. The built-in ``HtmlRenderer`` conforms to this protocol.

    """

    def render(self, tokens: Iterable[Token]) -> str:
        """Render a token sequence to a string.

        Args:
            tokens: Ordered tokens, as produced by the lexer.

        Returns:
            Rendered string output.

        """
        ...
