"""StringBuilder for O(n) HTML accumulation.

Fragments are appended to a list and joined once when rendering finishes,
instead of concatenating a growing string per token.

Thread Safety:
StringBuilder instances are local to each render() call.

"""

from __future__ import annotations


class StringBuilder:
    """List-backed string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("<p>").append("hi").append_line("</p>")
            >>> sb.build()
            '<p>hi</p>\\n'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a fragment (empty strings are skipped)."""
        if s:
            self._parts.append(s)
        return self

    def append_line(self, s: str = "") -> StringBuilder:
        """Append a fragment followed by a newline."""
        if s:
            self._parts.append(s)
        self._parts.append("\n")
        return self

    def build(self) -> str:
        """Join all fragments into the final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Number of fragments, not characters."""
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
