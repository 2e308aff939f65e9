"""
marklite: a small Markdown-to-HTML converter

Converts a constrained Markdown subset (headings, bold, italic, links,
images, flat lists and plain text) to an HTML fragment. A pull-model
character lexer feeds a one-pass token renderer. Malformed syntax never
raises; it degrades to literal text.

Quick Start:
    >>> from marklite import convert
    >>> print(convert("# Hello, World!"), end="")
    <h1>Hello, World!</h1>

    >>> # Or use the high-level Markdown class
    >>> from marklite import Markdown
    >>> md = Markdown()
    >>> html = md("Hello **World**")

Lower-level access:
    >>> from marklite import tokenize, render
    >>> tokens = tokenize("- one\\n- two")
    >>> html = render(tokens)
"""

from collections.abc import Callable, Iterable

from marklite.config import (
    ConvertConfig,
    convert_config_context,
    get_convert_config,
    reset_convert_config,
    set_convert_config,
)
from marklite.errors import MarkliteError, RenderError, SerializationError
from marklite.lexer import Lexer
from marklite.location import SourceLocation
from marklite.profiling import ConvertAccumulator, get_convert_accumulator, profiled_convert
from marklite.renderers.html import HtmlRenderer, html_escape
from marklite.renderers.protocol import TokenRenderer
from marklite.serialization import from_dict, from_json, to_dict, to_json
from marklite.tokens import Token, TokenType

__version__ = "0.1.0"


def tokenize(markdown: str) -> list[Token]:
    """Lex Markdown source into an ordered token sequence.

    Args:
        markdown: Markdown source text

    Returns:
        Tokens in source order, EOF marker excluded

    Example:
        >>> tokenize("**bold**")
        [Token(BOLD, 'bold', 1:1)]
    """
    return Lexer(markdown).tokens()


def render(tokens: Iterable[Token]) -> str:
    """Render a token sequence to HTML with the active ConvertConfig.

    Raises:
        RenderError: If a LINK or IMAGE token has no URL.
    """
    return HtmlRenderer().render(tokens)


def convert(markdown: str) -> str:
    """Convert Markdown source to an HTML fragment.

    Lexes the whole source, then renders the tokens in one pass. The result
    has no <html>/<body> wrapper.

    Args:
        markdown: Markdown source text

    Returns:
        HTML string

    Example:
        >>> convert("[OpenAI](https://openai.com)")
        '<p><a href="https://openai.com">OpenAI</a></p>\\n'
    """
    tokens = tokenize(markdown)
    html = HtmlRenderer().render(tokens)

    acc = get_convert_accumulator()
    if acc is not None:
        acc.record_convert(source_length=len(markdown), token_count=len(tokens))

    return html


class Markdown:
    """High-level converter bound to a fixed configuration.

    Usage:
        >>> md = Markdown()
        >>> md("# Hello **World**")
        '<h1>Hello **World**</h1>\\n'

        >>> # Trusted input with raw HTML
        >>> md = Markdown(escape_html=False)
        >>> md("<b>hi</b>")
        '<p><b>hi</b></p>\\n'

    Thread Safety:
        Uses ContextVar for per-context configuration. Safe to use multiple
        Markdown instances concurrently from different threads.

    """

    __slots__ = ("_config",)

    def __init__(
        self,
        *,
        escape_html: bool = True,
        text_transformer: Callable[[str], str] | None = None,
        config: ConvertConfig | None = None,
    ) -> None:
        """Initialize Markdown converter.

        Args:
            escape_html: Escape `& < > "` in payloads and URLs
            text_transformer: Optional callback applied to TEXT values
            config: Prebuilt config; overrides the keyword options
        """
        # Build immutable config once (thread-safe, reused across calls)
        self._config = config or ConvertConfig(
            escape_html=escape_html,
            text_transformer=text_transformer,
        )

    @property
    def config(self) -> ConvertConfig:
        return self._config

    def __call__(self, source: str) -> str:
        """Convert Markdown to HTML in one call."""
        with convert_config_context(self._config):
            return convert(source)

    def tokenize(self, source: str) -> list[Token]:
        """Lex Markdown source into tokens (EOF excluded)."""
        return tokenize(source)

    def render(self, tokens: Iterable[Token]) -> str:
        """Render tokens to HTML using this instance's config."""
        with convert_config_context(self._config):
            return HtmlRenderer().render(tokens)

    def convert_many(self, sources: Iterable[str]) -> list[str]:
        """Convert multiple Markdown sources.

        Sets config once for the whole batch.

        Example:
            >>> Markdown().convert_many(["# One", "*two*"])
            ['<h1>One</h1>\\n', '<p><em>two</em></p>\\n']
        """
        with convert_config_context(self._config):
            return [convert(source) for source in sources]


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "convert",
    "tokenize",
    "render",
    # High-level
    "Markdown",
    # Components
    "Lexer",
    "HtmlRenderer",
    "TokenRenderer",
    "html_escape",
    # Tokens
    "Token",
    "TokenType",
    "SourceLocation",
    # Errors
    "MarkliteError",
    "RenderError",
    "SerializationError",
    # Profiling
    "ConvertAccumulator",
    "profiled_convert",
    "get_convert_accumulator",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "ConvertConfig",
    "get_convert_config",
    "set_convert_config",
    "reset_convert_config",
    "convert_config_context",
]
