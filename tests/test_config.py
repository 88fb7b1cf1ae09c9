"""Tests for ContextVar-based stream configuration."""

from threading import Thread

import pytest

from richstream import (
    Color3,
    StreamConfig,
    get_stream_config,
    reset_stream_config,
    rich,
    set_stream_config,
    stream_config_context,
)


class TestStreamConfigDataclass:
    """StreamConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = StreamConfig()
        assert config.line_break == "<br />"
        assert config.strict is False
        assert config.font_name is None
        assert config.color_channels is None

    def test_immutability(self) -> None:
        config = StreamConfig()
        with pytest.raises(AttributeError):
            config.strict = True  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = StreamConfig.from_dict({"strict": True, "line_break": "\n", "theme": "dark"})
        assert config.strict is True
        assert config.line_break == "\n"

    def test_from_dict_empty(self) -> None:
        assert StreamConfig.from_dict({}) == StreamConfig()


class TestContextVarFunctions:
    """get/set/reset functions."""

    def teardown_method(self) -> None:
        reset_stream_config()

    def test_default_config(self) -> None:
        assert get_stream_config() == StreamConfig()

    def test_set_and_get(self) -> None:
        custom = StreamConfig(strict=True)
        set_stream_config(custom)
        assert get_stream_config() is custom

    def test_reset(self) -> None:
        set_stream_config(StreamConfig(strict=True))
        reset_stream_config()
        assert get_stream_config().strict is False

    def test_context_manager_restores(self) -> None:
        with stream_config_context(StreamConfig(line_break="\n")):
            assert get_stream_config().line_break == "\n"
        assert get_stream_config().line_break == "<br />"

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError), stream_config_context(StreamConfig(strict=True)):
            raise RuntimeError("boom")
        assert get_stream_config().strict is False

    def test_thread_isolation(self) -> None:
        """Each thread sees the config it set."""
        results: dict[int, str] = {}

        def worker(thread_id: int, line_break: str) -> None:
            set_stream_config(StreamConfig(line_break=line_break))
            results[thread_id] = rich("a").break_line().to_string()

        threads = [Thread(target=worker, args=(i, f"[{i}]")) for i in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == {i: f"a[{i}]" for i in range(4)}
        assert get_stream_config().line_break == "<br />"


class TestStreamUsesConfig:
    """Streams capture config at construction."""

    def teardown_method(self) -> None:
        reset_stream_config()

    def test_custom_line_break(self) -> None:
        with stream_config_context(StreamConfig(line_break="\n")):
            stream = rich("a").break_line()
        assert stream.to_string() == "a\n"

    def test_config_captured_at_creation(self) -> None:
        stream = rich("a")
        set_stream_config(StreamConfig(line_break="<br/>"))
        assert stream.break_line().to_string() == "a<br />"

    def test_explicit_config_wins(self) -> None:
        with stream_config_context(StreamConfig(line_break="\n")):
            stream = rich("a", config=StreamConfig()).break_line()
        assert stream.to_string() == "a<br />"

    def test_config_property(self) -> None:
        config = StreamConfig(strict=True)
        assert rich(config=config).config is config

    def test_injected_font_name(self) -> None:
        config = StreamConfig(font_name=lambda font: font["Name"])
        out = rich("x", config=config).font_face_enum({"Name": "Jura"}).to_string()
        assert out == '<font face="Jura">x</font>'

    def test_injected_color_channels(self) -> None:
        config = StreamConfig(color_channels=lambda c: (c.R, c.G, c.B))

        class HostColor:
            R, G, B = 0, 0.5, 1

        out = rich("x", config=config).font_color3(HostColor()).to_string()
        assert out == '<font color="rgb(0,0.5,1)">x</font>'

    def test_default_color_channels(self) -> None:
        out = rich("x").font_color3(Color3(0.25, 0, 1)).to_string()
        assert out == '<font color="rgb(0.25,0,1)">x</font>'
