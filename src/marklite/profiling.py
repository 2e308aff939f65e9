"""marklite ConvertAccumulator: opt-in profiling for Markdown conversion.

This module provides accumulated metrics during conversion:
- Total convert time
- Source length
- Token count produced by the lexer

Zero overhead when disabled (get_convert_accumulator() returns None).

Example:
    from marklite import convert
    from marklite.profiling import profiled_convert

    # Normal convert (no overhead)
    html = convert("# Hello")

    # Profiled convert (opt-in)
    with profiled_convert() as metrics:
        html = convert("# Hello **World**")

    print(metrics.summary())
    # {"total_ms": 0.3, "source_length": 17, "token_count": 1, "convert_calls": 1}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ConvertAccumulator:
    """Accumulated metrics during Markdown conversion.

    Attributes:
        start_time: Profiling start timestamp.
        source_length: Total length of sources converted.
        token_count: Total number of tokens lexed (EOF excluded).
        convert_calls: Number of convert() calls recorded.

    """

    start_time: float = field(default_factory=perf_counter)
    source_length: int = 0
    token_count: int = 0
    convert_calls: int = 0

    def record_convert(self, source_length: int, token_count: int) -> None:
        """Record a convert call.

        Args:
            source_length: Length of the source string converted.
            token_count: Number of tokens the lexer produced.

        """
        self.convert_calls += 1
        self.source_length += source_length
        self.token_count += token_count

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of convert metrics.

        Returns:
            Dict with total_ms, source_length, token_count, convert_calls.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "source_length": self.source_length,
            "token_count": self.token_count,
            "convert_calls": self.convert_calls,
        }


_accumulator: ContextVar[ConvertAccumulator | None] = ContextVar(
    "convert_accumulator",
    default=None,
)


def get_convert_accumulator() -> ConvertAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_convert() -> Iterator[ConvertAccumulator]:
    """Context manager for profiled conversion.

    Creates a ConvertAccumulator and makes it available via
    get_convert_accumulator() for the duration of the with block.

    Yields:
        ConvertAccumulator that will be populated during convert calls.

    """
    acc = ConvertAccumulator()
    token: Token[ConvertAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
