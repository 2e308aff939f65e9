"""Character-stream lexer for the marklite converter.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (mixin composition + navigation)
└── scanners/            # One mixin per construct
    ├── heading.py       # # .. ######
    ├── emphasis.py      # **bold**, *italic*
    ├── link.py          # [label](url), ![alt](url)
    ├── list.py          # - item
    └── text.py          # plain text runs

Usage:
    >>> from marklite.lexer import Lexer
    >>> lexer = Lexer("# Hello\\n\\nWorld")
    >>> for token in lexer.tokenize():
    ...     print(token)
Token(HEADING1, 'Hello', 1:1)
Token(TEXT, 'World', 3:1)
Token(EOF, '', 3:6)

"""

from marklite.lexer.core import Lexer

__all__ = ["Lexer"]
