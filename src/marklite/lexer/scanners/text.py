"""Plain text scanner mixin."""

from __future__ import annotations

from marklite.charsets import MARKDOWN_TRIGGERS, NEWLINE
from marklite.tokens import Token, TokenType


class TextScannerMixin:
    """Mixin providing plain-text run scanning.

    A run ends at the next trigger character or at a blank line (two
    consecutive newlines). Single newlines inside the run are kept; trailing
    newlines are trimmed from the value.

    """

    _source: str
    _pos: int
    _char: str

    def _advance(self) -> None:
        raise NotImplementedError

    def _peek(self) -> str:
        raise NotImplementedError

    def _make_token(
        self,
        token_type: TokenType,
        value: str,
        *,
        level: int = 0,
        url: str | None = None,
    ) -> Token:
        raise NotImplementedError

    def _scan_text(self) -> Token:
        """Scan a plain-text run starting at a non-trigger character."""
        start = self._pos
        while self._char and self._char not in MARKDOWN_TRIGGERS:
            if self._char == NEWLINE and self._peek() == NEWLINE:
                break
            self._advance()

        content = self._source[start : self._pos].rstrip(NEWLINE)
        return self._make_token(TokenType.TEXT, content)
