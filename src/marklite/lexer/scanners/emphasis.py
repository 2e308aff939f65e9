"""Bold / italic scanner mixin."""

from __future__ import annotations

from marklite.charsets import EMPHASIS_CHAR, NEWLINE
from marklite.tokens import Token, TokenType


class EmphasisScannerMixin:
    """Mixin providing `**bold**` and `*italic*` scanning.

    Matching is greedy and non-recursive: bold content ends at the first `*`
    on the line, so `**a *b* c**` does not nest. Neither form crosses a line
    break.

    """

    _char: str

    def _advance(self) -> None:
        raise NotImplementedError

    def _peek(self) -> str:
        raise NotImplementedError

    def _collect_until(self, delimiter: str) -> str:
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

    def _fallback(self, value: str, construct: str) -> Token:
        raise NotImplementedError

    def _scan_emphasis(self) -> Token:
        """Scan emphasis starting at `*`."""
        self._advance()
        if self._char == EMPHASIS_CHAR:
            self._advance()
            return self._scan_bold()
        return self._scan_italic()

    def _scan_bold(self) -> Token:
        """Scan bold content after the opening `**`.

        On failure a lone closing `*` is echoed in the text but left under
        the cursor for the next call.
        """
        content = self._collect_until(EMPHASIS_CHAR)
        if self._char == EMPHASIS_CHAR and self._peek() == EMPHASIS_CHAR:
            self._advance()
            self._advance()
            return self._make_token(TokenType.BOLD, content)

        trailing = EMPHASIS_CHAR if self._char == EMPHASIS_CHAR else ""
        return self._fallback(EMPHASIS_CHAR * 2 + content + trailing, "bold")

    def _scan_italic(self) -> Token:
        """Scan italic content after the opening `*`."""
        chars: list[str] = []
        while self._char and self._char != NEWLINE:
            if self._char == EMPHASIS_CHAR:
                self._advance()
                return self._make_token(TokenType.ITALIC, "".join(chars))
            chars.append(self._char)
            self._advance()

        return self._fallback(EMPHASIS_CHAR + "".join(chars), "italic")
