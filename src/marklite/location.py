"""Source location tracking for debugging token streams.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Where a token came from in the source text.

    lineno and col_offset are 1-indexed; offset and end_offset are absolute
    positions in the source string (end exclusive).

    Examples:
            >>> loc = SourceLocation(lineno=2, col_offset=3, offset=10, end_offset=14)
            >>> str(loc)
            '2:3'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0

    def __str__(self) -> str:
        return f"{self.lineno}:{self.col_offset}"

    @property
    def length(self) -> int:
        """Number of source characters covered."""
        return self.end_offset - self.offset

    def span_to(self, end: SourceLocation) -> SourceLocation:
        """Create a new location spanning from this location to end."""
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col_offset,
            offset=self.offset,
            end_offset=end.end_offset or end.offset,
        )
