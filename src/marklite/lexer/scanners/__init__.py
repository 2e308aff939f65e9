"""Construct scanners for the marklite lexer.

Each scanner is a mixin that handles one trigger character (or, for text,
everything else). The Lexer composes them and supplies the navigation and
token construction helpers they declare.
"""

from __future__ import annotations

from marklite.lexer.scanners.emphasis import EmphasisScannerMixin
from marklite.lexer.scanners.heading import HeadingScannerMixin
from marklite.lexer.scanners.link import LinkScannerMixin
from marklite.lexer.scanners.list import ListScannerMixin
from marklite.lexer.scanners.text import TextScannerMixin

__all__ = [
    "EmphasisScannerMixin",
    "HeadingScannerMixin",
    "LinkScannerMixin",
    "ListScannerMixin",
    "TextScannerMixin",
]
