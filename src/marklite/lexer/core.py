"""Pull-model character lexer for marklite.

The lexer walks the source one character at a time and hands out a single
classified Token per next_token() call. Ambiguous prefixes (#, *, [, !, -)
are resolved by the scanner mixins; every failed match falls back to a TEXT
token that reproduces the consumed characters.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from marklite.charsets import (
    EMPHASIS_CHAR,
    HEADING_CHAR,
    IMAGE_CHAR,
    LINK_OPEN,
    LIST_CHAR,
    NEWLINE,
)
from marklite.lexer.scanners import (
    EmphasisScannerMixin,
    HeadingScannerMixin,
    LinkScannerMixin,
    ListScannerMixin,
    TextScannerMixin,
)
from marklite.tokens import Token, TokenType
from marklite.utils.logger import get_logger

logger = get_logger(__name__)

# Trigger character -> scanner method. Extending the grammar means adding a
# character to charsets.MARKDOWN_TRIGGERS and an entry here.
_DISPATCH: dict[str, str] = {
    HEADING_CHAR: "_scan_heading",
    EMPHASIS_CHAR: "_scan_emphasis",
    LINK_OPEN: "_scan_link",
    IMAGE_CHAR: "_scan_image",
    LIST_CHAR: "_scan_list_item",
}


class Lexer(
    HeadingScannerMixin,
    EmphasisScannerMixin,
    LinkScannerMixin,
    ListScannerMixin,
    TextScannerMixin,
):
    """Character-stream lexer producing one token per call.

    Usage:
            >>> lexer = Lexer("# Hello\\n\\nSome **bold** text")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(HEADING1, 'Hello', 1:1)
        Token(TEXT, 'Some ', 3:1)
        Token(BOLD, 'bold', 3:6)
        Token(TEXT, ' text', 3:14)
        Token(EOF, '', 3:19)

    Every code path advances the cursor by at least one character before a
    token is returned, so scanning always terminates.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_pos",
        "_char",  # Character at _pos, "" at end of input
        "_lineno",
        "_col",
        # Start of the token being scanned
        "_start_pos",
        "_start_lineno",
        "_start_col",
    )

    def __init__(self, source: str) -> None:
        """Initialize lexer with source text.

        Args:
            source: Markdown source text
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._char = source[0] if source else ""
        self._lineno = 1
        self._col = 1

        self._start_pos = 0
        self._start_lineno = 1
        self._start_col = 1

    # =========================================================================
    # Public API
    # =========================================================================

    def next_token(self) -> Token:
        """Scan and return the next token.

        Runs of newlines between tokens are skipped. Once the input is
        exhausted, every call returns a new EOF token.

        Returns:
            The next Token, or an EOF token at end of input.
        """
        while self._char == NEWLINE:
            self._advance()

        if not self._char:
            return Token.eof(self._pos, self._lineno, self._col)

        self._mark_start()
        handler = _DISPATCH.get(self._char)
        if handler is None:
            return self._scan_text()
        return getattr(self, handler)()

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into a token stream.

        Yields:
            Token objects one at a time, ending with exactly one EOF token.
        """
        while True:
            token = self.next_token()
            yield token
            if token.is_eof:
                return

    def tokens(self) -> list[Token]:
        """Collect every content token (EOF excluded) into a list."""
        return [token for token in self.tokenize() if not token.is_eof]

    @property
    def exhausted(self) -> bool:
        """True once the cursor has reached the end of the source."""
        return self._pos >= self._source_len

    # =========================================================================
    # Character navigation helpers
    # =========================================================================

    def _advance(self) -> None:
        """Advance the cursor by one character, updating line/column."""
        if self._pos >= self._source_len:
            return

        if self._char == NEWLINE:
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1

        self._pos += 1
        self._char = self._source[self._pos] if self._pos < self._source_len else ""

    def _peek(self) -> str:
        """Return the character after the cursor, or "" past the end."""
        peek_pos = self._pos + 1
        if peek_pos >= self._source_len:
            return ""
        return self._source[peek_pos]

    def _collect_until(self, delimiter: str) -> str:
        """Consume characters up to delimiter, a newline, or end of input.

        The stopping character is not consumed.

        Args:
            delimiter: Character that ends the run

        Returns:
            The consumed characters.
        """
        start = self._pos
        while self._char and self._char != delimiter and self._char != NEWLINE:
            self._advance()
        return self._source[start : self._pos]

    def _collect_line(self) -> str:
        """Consume the rest of the current line (terminator excluded)."""
        return self._collect_until(NEWLINE)

    def _consume_newline(self) -> None:
        """Consume a single line terminator if the cursor sits on one."""
        if self._char == NEWLINE:
            self._advance()

    # =========================================================================
    # Token construction
    # =========================================================================

    def _mark_start(self) -> None:
        """Remember where the current token starts."""
        self._start_pos = self._pos
        self._start_lineno = self._lineno
        self._start_col = self._col

    def _make_token(
        self,
        token_type: TokenType,
        value: str,
        *,
        level: int = 0,
        url: str | None = None,
    ) -> Token:
        """Create a Token spanning from the marked start to the cursor."""
        return Token(
            type=token_type,
            value=value,
            level=level,
            url=url,
            _lineno=self._start_lineno,
            _col=self._start_col,
            _start_offset=self._start_pos,
            _end_offset=self._pos,
        )

    def _fallback(self, value: str, construct: str) -> Token:
        """Create a TEXT token for a construct that failed to match."""
        logger.debug(
            "Unmatched %s at %d:%d, emitting literal text",
            construct,
            self._start_lineno,
            self._start_col,
        )
        return self._make_token(TokenType.TEXT, value)
