"""Tests for marklite utility modules."""

import logging

from marklite.lexer import Lexer
from marklite.location import SourceLocation
from marklite.stringbuilder import StringBuilder
from marklite.utils.logger import get_logger


class TestGetLogger:
    def test_prefixes_name(self) -> None:
        assert get_logger("mymodule").name == "marklite.mymodule"

    def test_keeps_package_names(self) -> None:
        assert get_logger("marklite").name == "marklite"
        assert get_logger("marklite.lexer.core").name == "marklite.lexer.core"

    def test_no_handlers_installed(self) -> None:
        assert get_logger("marklite").handlers == []

    def test_fallback_logged_at_debug(self, caplog) -> None:  # type: ignore[no-untyped-def]
        with caplog.at_level(logging.DEBUG, logger="marklite"):
            Lexer("#bad").tokens()
        assert "Unmatched heading at 1:1" in caplog.text

    def test_successful_match_not_logged(self, caplog) -> None:  # type: ignore[no-untyped-def]
        with caplog.at_level(logging.DEBUG, logger="marklite.lexer"):
            Lexer("# good").tokens()
        assert "Unmatched" not in caplog.text


class TestStringBuilder:
    def test_build(self) -> None:
        sb = StringBuilder()
        sb.append("<p>").append("hi").append_line("</p>")
        assert sb.build() == "<p>hi</p>\n"

    def test_empty_fragments_skipped(self) -> None:
        sb = StringBuilder()
        sb.append("")
        assert not sb
        assert len(sb) == 0

    def test_bare_newline(self) -> None:
        sb = StringBuilder()
        sb.append_line()
        assert sb.build() == "\n"


class TestSourceLocation:
    def test_str(self) -> None:
        assert str(SourceLocation(lineno=2, col_offset=3)) == "2:3"

    def test_length(self) -> None:
        assert SourceLocation(1, 1, offset=4, end_offset=10).length == 6

    def test_span_to(self) -> None:
        start = SourceLocation(1, 1, offset=0, end_offset=3)
        end = SourceLocation(2, 5, offset=10, end_offset=14)
        span = start.span_to(end)
        assert span.lineno == 1
        assert span.offset == 0
        assert span.end_offset == 14
