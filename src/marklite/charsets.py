"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from marklite.charsets import MARKDOWN_TRIGGERS

    if char in MARKDOWN_TRIGGERS:
        ...
"""

# Characters that start a structured construct. Anything else is plain text.
HEADING_CHAR = "#"
EMPHASIS_CHAR = "*"
LINK_OPEN = "["
LINK_CLOSE = "]"
IMAGE_CHAR = "!"
LIST_CHAR = "-"
URL_OPEN = "("
URL_CLOSE = ")"
ESCAPE_CHAR = "\\"
NEWLINE = "\n"

MARKDOWN_TRIGGERS: frozenset[str] = frozenset(
    (HEADING_CHAR, EMPHASIS_CHAR, LINK_OPEN, IMAGE_CHAR, LIST_CHAR)
)

# ASCII whitespace (matches C isspace). The end-of-input sentinel "" is not
# whitespace.
WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")

# Maximum ATX heading level
MAX_HEADING_LEVEL = 6
