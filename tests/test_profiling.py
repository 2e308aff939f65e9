"""Tests for marklite.profiling: convert profiling API."""

from marklite import Markdown, convert
from marklite.profiling import (
    ConvertAccumulator,
    get_convert_accumulator,
    profiled_convert,
)


class TestGetConvertAccumulator:
    def test_returns_none_when_disabled(self) -> None:
        assert get_convert_accumulator() is None

    def test_returns_none_outside_context(self) -> None:
        with profiled_convert():
            pass
        assert get_convert_accumulator() is None


class TestProfiledConvert:
    def test_yields_accumulator(self) -> None:
        with profiled_convert() as acc:
            assert isinstance(acc, ConvertAccumulator)
            assert get_convert_accumulator() is acc

    def test_records_convert_call(self) -> None:
        with profiled_convert() as acc:
            convert("# Hello\n\nSome **bold**")
        assert acc.convert_calls == 1
        assert acc.source_length == len("# Hello\n\nSome **bold**")
        assert acc.token_count == 3

    def test_records_markdown_batch(self) -> None:
        with profiled_convert() as acc:
            Markdown().convert_many(["# One", "# Two", "# Three"])
        assert acc.convert_calls == 3
        assert acc.token_count == 3

    def test_total_duration_positive(self) -> None:
        with profiled_convert() as acc:
            convert("# Hello **World**")
        assert acc.total_duration_ms > 0


class TestSummary:
    def test_summary_keys(self) -> None:
        with profiled_convert() as acc:
            convert("*x*")
        summary = acc.summary()
        assert set(summary) == {"total_ms", "source_length", "token_count", "convert_calls"}
        assert summary["convert_calls"] == 1
        assert summary["source_length"] == 3
