"""Link and image scanner mixin."""

from __future__ import annotations

import dataclasses

from marklite.charsets import (
    ESCAPE_CHAR,
    IMAGE_CHAR,
    LINK_CLOSE,
    LINK_OPEN,
    URL_CLOSE,
    URL_OPEN,
)
from marklite.tokens import Token, TokenType


class LinkScannerMixin:
    """Mixin providing `[label](url)` and `![alt](url)` scanning.

    The label is a balanced bracket run: nested `[`/`]` pairs are kept in the
    label and `\\[` contributes a literal `[` without opening a new level.
    The label may span lines; the URL may not.

    Fallbacks, in order of how far the match got:
        `[label...`         unterminated bracket
        `[label]`           no `(` after the bracket
        `[label](partial`   no `)` before end of line

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

    def _scan_link(self) -> Token:
        """Scan a link starting at `[`."""
        self._advance()
        label: list[str] = []
        depth = 1

        while self._char:
            if self._char == ESCAPE_CHAR and self._peek() == LINK_OPEN:
                label.append(LINK_OPEN)
                self._advance()
                self._advance()
                continue

            if self._char == LINK_OPEN:
                depth += 1
            elif self._char == LINK_CLOSE:
                depth -= 1
                if depth == 0:
                    self._advance()
                    break
            label.append(self._char)
            self._advance()

        text = "".join(label)
        if depth > 0:
            return self._fallback(LINK_OPEN + text, "link label")

        if self._char != URL_OPEN:
            return self._fallback(LINK_OPEN + text + LINK_CLOSE, "link target")

        self._advance()
        url = self._collect_until(URL_CLOSE)
        if self._char != URL_CLOSE:
            return self._fallback(LINK_OPEN + text + LINK_CLOSE + URL_OPEN + url, "link url")

        self._advance()
        return self._make_token(TokenType.LINK, text, url=url)

    def _scan_image(self) -> Token:
        """Scan an image starting at `!`.

        Delegates to the link scanner; a successful link is re-tagged as an
        IMAGE and a failed one gets the `!` prepended to its literal text.
        """
        self._advance()
        if self._char != LINK_OPEN:
            return self._fallback(IMAGE_CHAR, "image")

        token = self._scan_link()
        if token.type is TokenType.LINK:
            return dataclasses.replace(token, type=TokenType.IMAGE)
        return dataclasses.replace(token, value=IMAGE_CHAR + token.value)
