"""Tests for accurate source location tracking in the lexer.

Line numbers and columns are 1-indexed; offsets are absolute positions in
the source string.
"""

from marklite.lexer import Lexer
from marklite.tokens import TokenType


class TestSingleLineLocations:
    """Test location tracking for single-line tokens."""

    def test_heading_location(self) -> None:
        heading = Lexer("# Heading").tokens()[0]
        assert heading.location.lineno == 1
        assert heading.location.col_offset == 1
        assert heading.location.offset == 0
        assert heading.location.end_offset == 9

    def test_inline_columns(self) -> None:
        tokens = Lexer("Some **bold** text").tokens()
        assert [t.location.col_offset for t in tokens] == [1, 6, 14]
        assert tokens[1].location.offset == 5
        assert tokens[1].location.end_offset == 13

    def test_link_span(self) -> None:
        link = Lexer("[a](b)").tokens()[0]
        assert link.location.length == 6


class TestMultiLineLocations:
    """Test location tracking across lines."""

    def test_after_blank_line(self) -> None:
        tokens = Lexer("# A\n\nB").tokens()
        assert tokens[1].type == TokenType.TEXT
        assert tokens[1].location.lineno == 3
        assert tokens[1].location.col_offset == 1
        assert tokens[1].location.offset == 5

    def test_list_items(self) -> None:
        tokens = Lexer("- one\n- two\n- three").tokens()
        assert [t.lineno for t in tokens] == [1, 2, 3]
        assert all(t.col == 1 for t in tokens)

    def test_eof_location(self) -> None:
        tokens = list(Lexer("ab\ncd").tokenize())
        eof = tokens[-1]
        assert eof.is_eof
        assert eof.location.lineno == 2
        assert eof.location.col_offset == 3
        assert eof.location.offset == 5

    def test_location_is_cached(self) -> None:
        token = Lexer("x").tokens()[0]
        assert token.location is token.location
