"""ContextVar-based stream configuration for richstream.

A stream reads the active configuration once, when it is created, and keeps
it for the rest of its life. Changing the configuration afterwards only
affects streams created later.

Usage:
    from richstream import rich
    from richstream.config import StreamConfig, stream_config_context

    with stream_config_context(StreamConfig(strict=True)):
        stream = rich("Hello").font_color("#ff0000")

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage.

"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class StreamConfig:
    """Immutable stream configuration.

    Attributes:
        line_break: Fragment text appended by ``break_line()``
        strict: Raise on unknown font names and malformed color strings
            instead of logging a warning
        font_name: Converts a font identifier to its canonical face name
            (default: the object's ``name`` attribute)
        color_channels: Converts a color object to its ``(r, g, b)`` channels
            (default: the object's ``r``, ``g`` and ``b`` attributes)

    """

    line_break: str = "<br />"
    strict: bool = False
    font_name: Callable[[Any], str] | None = None
    color_channels: Callable[[Any], tuple[Any, Any, Any]] | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "StreamConfig":
        """Create StreamConfig from dictionary.

        Only includes keys that are valid StreamConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = StreamConfig.from_dict({"strict": True, "theme": "dark"})
            >>> config.strict
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: StreamConfig = StreamConfig()

_stream_config: ContextVar[StreamConfig] = ContextVar(
    "stream_config",
    default=_DEFAULT_CONFIG,
)


def get_stream_config() -> StreamConfig:
    """Get current stream configuration (thread-local)."""
    return _stream_config.get()


def set_stream_config(config: StreamConfig) -> None:
    """Set stream configuration for current context.

    Args:
        config: StreamConfig instance to use for this context.

    """
    _stream_config.set(config)


def reset_stream_config() -> None:
    """Reset to the default configuration."""
    _stream_config.set(_DEFAULT_CONFIG)


@contextmanager
def stream_config_context(config: StreamConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Example:
        >>> from richstream import rich
        >>> with stream_config_context(StreamConfig(line_break="\\n")):
        ...     text = rich("a").break_line().to_string()
        >>> text
        'a\\n'

    Thread Safety:
        Only affects the current thread's context. Restores the previous
        config even if an exception is raised.

    """
    previous = _stream_config.get()
    _stream_config.set(config)
    try:
        yield
    finally:
        _stream_config.set(previous)


__all__ = [
    "StreamConfig",
    "get_stream_config",
    "set_stream_config",
    "reset_stream_config",
    "stream_config_context",
]
