"""ATX heading scanner mixin."""

from __future__ import annotations

from marklite.charsets import HEADING_CHAR, MAX_HEADING_LEVEL, NEWLINE, WHITESPACE
from marklite.tokens import Token, TokenType


class HeadingScannerMixin:
    """Mixin providing ATX heading scanning.

    A heading is 1-6 `#` characters followed by whitespace. The level
    saturates at 6; a 7th `#` stays under the cursor, which then fails the
    whitespace check and turns the line into literal text.

    """

    _char: str

    def _advance(self) -> None:
        raise NotImplementedError

    def _collect_line(self) -> str:
        raise NotImplementedError

    def _consume_newline(self) -> None:
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

    def _scan_heading(self) -> Token:
        """Scan a heading starting at `#`.

        Returns:
            HEADING token, or TEXT reproducing the line when no whitespace
            follows the `#` run.
        """
        level = 1
        self._advance()

        while self._char == HEADING_CHAR and level < MAX_HEADING_LEVEL:
            level += 1
            self._advance()

        if self._char not in WHITESPACE:
            rest = self._collect_line()
            self._consume_newline()
            return self._fallback(HEADING_CHAR * level + rest, "heading")

        while self._char in WHITESPACE and self._char != NEWLINE:
            self._advance()

        content = self._collect_line()
        self._consume_newline()
        return self._make_token(TokenType.HEADING, content, level=level)
