"""Tests for ContextVar-based conversion configuration.

Validates thread isolation, context manager behavior, and from_dict.
"""

from threading import Thread

import pytest

from marklite import (
    ConvertConfig,
    HtmlRenderer,
    Markdown,
    convert,
    convert_config_context,
    get_convert_config,
    reset_convert_config,
    set_convert_config,
    tokenize,
)


class TestConvertConfigDataclass:
    """Test ConvertConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = ConvertConfig()
        assert config.escape_html is True
        assert config.text_transformer is None

    def test_immutability(self) -> None:
        config = ConvertConfig()
        with pytest.raises(AttributeError):
            config.escape_html = False  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ConvertConfig.from_dict({"escape_html": False, "tables": True})
        assert config.escape_html is False
        assert config.text_transformer is None

    def test_from_dict_empty(self) -> None:
        assert ConvertConfig.from_dict({}) == ConvertConfig()


class TestContextVarAccess:
    def setup_method(self) -> None:
        reset_convert_config()

    def teardown_method(self) -> None:
        reset_convert_config()

    def test_default_config(self) -> None:
        assert get_convert_config() == ConvertConfig()

    def test_set_and_reset(self) -> None:
        set_convert_config(ConvertConfig(escape_html=False))
        assert get_convert_config().escape_html is False
        reset_convert_config()
        assert get_convert_config().escape_html is True

    def test_context_manager_restores(self) -> None:
        with convert_config_context(ConvertConfig(escape_html=False)):
            assert convert("<b>") == "<p><b></p>\n"
        assert convert("<b>") == "<p>&lt;b&gt;</p>\n"

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with convert_config_context(ConvertConfig(escape_html=False)):
                raise RuntimeError("boom")
        assert get_convert_config().escape_html is True

    def test_renderer_argument_overrides_config(self) -> None:
        with convert_config_context(ConvertConfig(escape_html=False)):
            html = HtmlRenderer(escape_html=True).render(tokenize("<b>"))
        assert html == "<p>&lt;b&gt;</p>\n"

    def test_text_transformer_from_config(self) -> None:
        with convert_config_context(ConvertConfig(text_transformer=str.upper)):
            assert convert("abc") == "<p>ABC</p>\n"


class TestThreadIsolation:
    def test_config_is_per_thread(self) -> None:
        """Setting config in one thread is invisible to another."""
        seen: dict[str, bool] = {}

        def worker() -> None:
            set_convert_config(ConvertConfig(escape_html=False))
            seen["worker"] = get_convert_config().escape_html

        thread = Thread(target=worker)
        thread.start()
        thread.join()

        assert seen["worker"] is False
        assert get_convert_config().escape_html is True

    def test_markdown_instance_holds_config(self) -> None:
        md = Markdown(escape_html=False)
        assert md.config.escape_html is False
        assert Markdown(config=ConvertConfig(escape_html=False)).config == md.config
