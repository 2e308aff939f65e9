"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from marklite.lexer import Lexer
from marklite.tokens import TokenType

# Markdown-heavy alphabet so triggers and newlines show up often
_MARKDOWN_TEXT = st.text(alphabet="#*[]()!-\\ \tab\n", max_size=300)


class TestBasicInvariants:
    """Test basic invariants that should always hold."""

    @given(st.text(max_size=1000))
    @settings(max_examples=200)
    def test_always_ends_with_eof(self, source: str) -> None:
        """Every tokenization must end with exactly one EOF token."""
        tokens = list(Lexer(source).tokenize())

        assert tokens[-1].type == TokenType.EOF
        assert sum(1 for t in tokens if t.is_eof) == 1

    @given(_MARKDOWN_TEXT)
    @settings(max_examples=300)
    def test_cursor_strictly_advances(self, source: str) -> None:
        """Each content token consumes at least one character, so scanning terminates."""
        tokens = Lexer(source).tokens()

        assert len(tokens) <= len(source)
        previous_end = 0
        for token in tokens:
            loc = token.location
            assert loc.offset >= previous_end
            assert loc.end_offset > loc.offset
            previous_end = loc.end_offset
        assert previous_end <= len(source)

    @given(_MARKDOWN_TEXT)
    @settings(max_examples=200)
    def test_deterministic(self, source: str) -> None:
        assert Lexer(source).tokens() == Lexer(source).tokens()

    @given(_MARKDOWN_TEXT, st.integers(min_value=1, max_value=5))
    @settings(max_examples=100)
    def test_eof_is_idempotent(self, source: str, extra: int) -> None:
        lexer = Lexer(source)
        list(lexer.tokenize())
        for _ in range(extra):
            assert lexer.next_token().is_eof


class TestPayloadInvariants:
    """Structured tokens carry the fields their type needs."""

    @given(_MARKDOWN_TEXT)
    @settings(max_examples=200)
    def test_heading_levels_in_range(self, source: str) -> None:
        for token in Lexer(source).tokens():
            if token.type == TokenType.HEADING:
                assert 1 <= token.level <= 6
            else:
                assert token.level == 0

    @given(_MARKDOWN_TEXT)
    @settings(max_examples=200)
    def test_only_links_and_images_have_urls(self, source: str) -> None:
        for token in Lexer(source).tokens():
            if token.type in (TokenType.LINK, TokenType.IMAGE):
                assert token.url is not None
                assert "\n" not in token.url
            else:
                assert token.url is None

    @given(st.text(alphabet="abc*[]!-", min_size=1, max_size=50))
    @settings(max_examples=100)
    def test_hash_without_space_never_heading(self, rest: str) -> None:
        tokens = Lexer("#" + rest).tokens()
        assert tokens[0].type == TokenType.TEXT
        assert tokens[0].value.startswith("#")
