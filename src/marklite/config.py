"""ContextVar-based conversion configuration for marklite.

Config is set once per Markdown instance (or per convert() call) and read by
the renderer in the same context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    # In Markdown class
    md = Markdown(escape_html=False)
    html = md("# Hello")  # Sets config internally via ContextVar

    # Or use the context manager
    with convert_config_context(ConvertConfig(escape_html=False)):
        html = HtmlRenderer().render(tokens)

"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields


@dataclass(frozen=True, slots=True)
class ConvertConfig:
    """Immutable conversion configuration.

    Attributes:
        escape_html: Escape `& < > "` in every payload and URL. Disable only
            for trusted input that intentionally embeds raw HTML.
        text_transformer: Optional callback applied to TEXT token values
            before escaping

    """

    escape_html: bool = True
    text_transformer: Callable[[str], str] | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ConvertConfig":
        """Create ConvertConfig from a dictionary.

        Unknown keys are silently ignored.

        Example:
            >>> config = ConvertConfig.from_dict({"escape_html": False, "other": 1})
            >>> config.escape_html
            False

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ConvertConfig = ConvertConfig()

_convert_config: ContextVar[ConvertConfig] = ContextVar(
    "convert_config",
    default=_DEFAULT_CONFIG,
)


def get_convert_config() -> ConvertConfig:
    """Get the active ConvertConfig for this thread/context."""
    return _convert_config.get()


def set_convert_config(config: ConvertConfig) -> None:
    """Set conversion configuration for the current context."""
    _convert_config.set(config)


def reset_convert_config() -> None:
    """Reset to the module-level default configuration."""
    _convert_config.set(_DEFAULT_CONFIG)


@contextmanager
def convert_config_context(config: ConvertConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with convert_config_context(ConvertConfig(escape_html=False)):
        ...     get_convert_config().escape_html
        False

    """
    previous = _convert_config.get()
    _convert_config.set(config)
    try:
        yield
    finally:
        _convert_config.set(previous)


__all__ = [
    "ConvertConfig",
    "get_convert_config",
    "set_convert_config",
    "reset_convert_config",
    "convert_config_context",
]
