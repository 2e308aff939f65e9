"""HTML renderer using StringBuilder pattern.

Renders a token sequence to an HTML fragment in one left-to-right pass.
Paragraph and list wrappers are inserted from token-type adjacency: inline
tokens are gathered into `<p>`, consecutive list items into `<ul>`.

Thread Safety:
All per-render state is encapsulated in RenderContext, created fresh for each
render() call. Multiple threads can safely share a single HtmlRenderer instance
and call render() concurrently without synchronization.
"""

from __future__ import annotations

import html
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from marklite.config import get_convert_config
from marklite.errors import RenderError
from marklite.stringbuilder import StringBuilder
from marklite.tokens import Token, TokenType
from marklite.utils.logger import get_logger

logger = get_logger(__name__)


def html_escape(s: str) -> str:
    """Escape HTML special characters.

    Escapes <, >, &, " but NOT single quotes (html.escape would turn ' into
    &#x27;).
    """
    return html.escape(s, quote=False).replace('"', "&quot;")


def _no_escape(s: str) -> str:
    return s


@dataclass(slots=True)
class RenderContext:
    """Per-render mutable state.

    Created fresh for each render() call so concurrent renders never share
    wrapper flags.
    """

    in_list: bool = False
    in_paragraph: bool = False


class HtmlRenderer:
    """Render a token sequence to HTML.

    Usage:
        >>> from marklite.lexer import Lexer
        >>> tokens = Lexer("Hello **World**").tokens()
        >>> HtmlRenderer().render(tokens)
        '<p>Hello <strong>World</strong></p>\\n'

    Options left as None are read from the active ConvertConfig when
    render() is called.

    Thread Safety:
        Multiple threads can safely share a single HtmlRenderer instance.
        Each render() call creates an independent RenderContext.
    """

    __slots__ = ("_escape_html", "_text_transformer")

    def __init__(
        self,
        *,
        escape_html: bool | None = None,
        text_transformer: Callable[[str], str] | None = None,
    ) -> None:
        """Initialize renderer.

        Args:
            escape_html: Escape payloads and URLs (None = use config)
            text_transformer: Optional callback to transform TEXT values
                (None = use config)
        """
        self._escape_html = escape_html
        self._text_transformer = text_transformer

    def render(self, tokens: Iterable[Token]) -> str:
        """Render tokens to an HTML string.

        EOF markers in the sequence are ignored.

        Args:
            tokens: Ordered token sequence from the lexer

        Returns:
            HTML fragment (no <html>/<body> wrapper)

        Raises:
            RenderError: If a LINK or IMAGE token has no URL.
        """
        config = get_convert_config()
        escape_html = config.escape_html if self._escape_html is None else self._escape_html
        escape = html_escape if escape_html else _no_escape
        transform = self._text_transformer or config.text_transformer

        items = [token for token in tokens if not token.is_eof]
        ctx = RenderContext()
        sb = StringBuilder()
        last = len(items) - 1

        for i, token in enumerate(items):
            # List wrapping
            if token.type is TokenType.LIST_ITEM:
                if ctx.in_paragraph:
                    sb.append_line("</p>")
                    ctx.in_paragraph = False
                if not ctx.in_list:
                    sb.append_line("<ul>")
                    ctx.in_list = True
            elif ctx.in_list:
                sb.append_line("</ul>")
                ctx.in_list = False

            # Paragraph wrapping
            if token.is_inline and not ctx.in_paragraph:
                sb.append("<p>")
                ctx.in_paragraph = True
            elif ctx.in_paragraph and token.is_block:
                sb.append_line("</p>")
                ctx.in_paragraph = False

            self._render_token(token, sb, escape, transform)

            if ctx.in_paragraph and (i == last or items[i + 1].is_block):
                sb.append_line("</p>")
                ctx.in_paragraph = False

        if ctx.in_list:
            sb.append_line("</ul>")
        if ctx.in_paragraph:
            sb.append_line("</p>")

        logger.debug("Rendered %d tokens into %d fragments", len(items), len(sb))
        return sb.build()

    def _render_token(
        self,
        token: Token,
        sb: StringBuilder,
        escape: Callable[[str], str],
        transform: Callable[[str], str] | None,
    ) -> None:
        """Append the HTML fragment for one token."""
        match token.type:
            case TokenType.TEXT:
                value = transform(token.value) if transform else token.value
                sb.append(escape(value))
            case TokenType.HEADING:
                tag = f"h{token.level}"
                sb.append_line(f"<{tag}>{escape(token.value)}</{tag}>")
            case TokenType.BOLD:
                sb.append(f"<strong>{escape(token.value)}</strong>")
            case TokenType.ITALIC:
                sb.append(f"<em>{escape(token.value)}</em>")
            case TokenType.LIST_ITEM:
                sb.append_line(f"<li>{escape(token.value)}</li>")
            case TokenType.LINK:
                url = self._require_url(token)
                sb.append(f'<a href="{escape(url)}">{escape(token.value)}</a>')
            case TokenType.IMAGE:
                url = self._require_url(token)
                sb.append(f'<img src="{escape(url)}" alt="{escape(token.value)}">')

    def _require_url(self, token: Token) -> str:
        if token.url is None:
            raise RenderError(f"{token.type.name} token has no url", token)
        return token.url
