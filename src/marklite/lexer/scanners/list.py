"""List item scanner mixin."""

from __future__ import annotations

from marklite.charsets import LIST_CHAR, WHITESPACE
from marklite.tokens import Token, TokenType


class ListScannerMixin:
    """Mixin providing flat `- item` scanning.

    Only the single whitespace character after `-` is dropped; further
    leading whitespace stays in the item content.

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

    def _scan_list_item(self) -> Token:
        """Scan a list item starting at `-`."""
        self._advance()

        if self._char not in WHITESPACE:
            rest = self._collect_line()
            self._consume_newline()
            return self._fallback(LIST_CHAR + rest, "list item")

        self._advance()
        content = self._collect_line()
        self._consume_newline()
        return self._make_token(TokenType.LIST_ITEM, content)
