"""Token and TokenType definitions for the marklite lexer.

The lexer produces Token objects one at a time; the renderer consumes the
collected sequence. Each Token has a type, a string value, optional heading
level / link target, and source coordinates.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from marklite.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer.

    EOF is the terminal marker, not content. It is never confused with an
    empty TEXT token.

    """

    # Inline content
    TEXT = auto()  # plain text (also every fallback)
    BOLD = auto()  # **bold**
    ITALIC = auto()  # *italic*
    LINK = auto()  # [label](url)
    IMAGE = auto()  # ![alt](url)

    # Block content
    HEADING = auto()  # # .. ######
    LIST_ITEM = auto()  # - item

    # Stream structure
    EOF = auto()


BLOCK_TYPES: frozenset[TokenType] = frozenset((TokenType.HEADING, TokenType.LIST_ITEM))

INLINE_TYPES: frozenset[TokenType] = frozenset(
    (
        TokenType.TEXT,
        TokenType.BOLD,
        TokenType.ITALIC,
        TokenType.LINK,
        TokenType.IMAGE,
    )
)

# Types whose payload is (label, url) rather than a single string
TARGET_TYPES: frozenset[TokenType] = frozenset((TokenType.LINK, TokenType.IMAGE))


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: Literal content, or the label / alt text for LINK and IMAGE.
            Never HTML-escaped.
        level: Heading level 1-6 for HEADING tokens, 0 otherwise
        url: Target for LINK and IMAGE tokens, None otherwise
        _lineno: Start line number (1-indexed)
        _col: Start column (1-indexed)
        _start_offset: Absolute start position in source
        _end_offset: Absolute end position in source (exclusive)

    Performance:
        SourceLocation is created lazily on first access to `.location`.

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.
        The lazy cache uses idempotent write (safe for concurrent access).

    """

    type: TokenType
    value: str
    level: int = 0
    url: str | None = None
    _lineno: int = 1
    _col: int = 1
    _start_offset: int = 0
    _end_offset: int = 0
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @classmethod
    def eof(cls, offset: int = 0, lineno: int = 1, col: int = 1) -> Token:
        """Create the terminal end-of-stream marker."""
        return cls(
            TokenType.EOF,
            "",
            _lineno=lineno,
            _col=col,
            _start_offset=offset,
            _end_offset=offset,
        )

    @property
    def is_eof(self) -> bool:
        return self.type is TokenType.EOF

    @property
    def is_block(self) -> bool:
        return self.type in BLOCK_TYPES

    @property
    def is_inline(self) -> bool:
        return self.type in INLINE_TYPES

    @property
    def payload(self) -> str | tuple[str, str | None]:
        """Semantic content: a string, or (label, url) for links and images."""
        if self.type in TARGET_TYPES:
            return (self.value, self.url)
        return self.value

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from marklite.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        if self.type is TokenType.HEADING:
            return f"Token(HEADING{self.level}, {val!r}, {self._lineno}:{self._col})"
        if self.type in TARGET_TYPES:
            return f"Token({self.type.name}, {val!r} -> {self.url!r}, {self._lineno}:{self._col})"
        return f"Token({self.type.name}, {val!r}, {self._lineno}:{self._col})"

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col
