"""
richstream — fluent builder for tagged rich text

Builds a markup string from an ordered list of text fragments, each carrying
its own stack of formatting tags.

Quick Start:
    >>> from richstream import rich
    >>> str(rich("Hello, ").bold().add("world!").italic())
    '<b>Hello, </b><i>world!</i>'

    >>> # Font modifiers on one fragment merge into a single tag
    >>> rich("hi").font_size(12).font_color("#ff0000").to_string()
    '<font size="12" color="#ff0000">hi</font>'

    >>> # Short aliases
    >>> rich().a("a").b().br().a("b").fc3i(255, 0, 0).to_string()
    '<b>a</b><br /><font color="rgb(255,0,0)">b</font>'
"""

from richstream.colors import Color3, format_number, rgb_string
from richstream.config import (
    StreamConfig,
    get_stream_config,
    reset_stream_config,
    set_stream_config,
    stream_config_context,
)
from richstream.errors import (
    EmptyStreamError,
    InvalidColorError,
    RichTextError,
    UnknownFontError,
)
from richstream.fonts import Font, is_known_font
from richstream.fragment import Fragment, Tag
from richstream.protocols import ColorLike, NamedFont
from richstream.renderers.markup import MarkupRenderer
from richstream.renderers.protocol import StreamRenderer
from richstream.stream import RichTextStream, rich

__version__ = "0.1.0"


def render(stream: RichTextStream, *, renderer: StreamRenderer | None = None) -> str:
    """Render a stream to a string.

    Args:
        stream: Stream to render
        renderer: Renderer to use (default: ``MarkupRenderer``)

    Returns:
        Rendered markup

    Example:
        >>> render(rich("hi").underline())
        '<u>hi</u>'
    """
    return stream.to_string(renderer)


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "rich",
    "render",
    "RichTextStream",
    # Data model
    "Fragment",
    "Tag",
    # Value types
    "Color3",
    "ColorLike",
    "Font",
    "NamedFont",
    "format_number",
    "is_known_font",
    "rgb_string",
    # Renderer
    "MarkupRenderer",
    "StreamRenderer",
    # Errors
    "RichTextError",
    "EmptyStreamError",
    "InvalidColorError",
    "UnknownFontError",
    # Configuration (ContextVar-based)
    "StreamConfig",
    "get_stream_config",
    "set_stream_config",
    "reset_stream_config",
    "stream_config_context",
]
