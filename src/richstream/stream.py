"""Fluent rich text builder.

A RichTextStream is an ordered list of fragments plus a cursor on the most
recently added one. ``add()`` appends a fragment and moves the cursor; every
other chained call decorates the fragment under the cursor.

Merging:
    Boolean modifiers (``bold``, ``italic``, ...) occupy one slot each and are
    idempotent. All font modifiers share the single ``font`` slot, so
    ``font_size(12).font_color("#fff")`` renders one ``<font size="12"
    color="#fff">`` tag. A slot keeps the position it got when it was first
    used; that position is its nesting depth.

Example:
    >>> from richstream import rich
    >>> str(rich("hi").bold().font_size(12).italic().font_color("#fff"))
    '<i><font size="12" color="#fff"><b>hi</b></font></i>'

Thread Safety:
    A stream has a single writer. Build one stream per message.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from richstream.colors import (
    default_color_channels,
    format_number,
    is_color_string,
    is_hex_digits,
    rgb_string,
)
from richstream.config import StreamConfig, get_stream_config
from richstream.errors import EmptyStreamError, InvalidColorError, UnknownFontError
from richstream.fonts import default_font_name, is_known_font
from richstream.fragment import Fragment, Tag
from richstream.renderers.markup import MarkupRenderer
from richstream.renderers.protocol import StreamRenderer
from richstream.utils.logger import get_logger

logger = get_logger(__name__)

if TYPE_CHECKING:
    from richstream.protocols import ColorLike, NamedFont

_DEFAULT_RENDERER = MarkupRenderer()


class RichTextStream:
    """A rich text creator.

    Every method except ``to_string`` returns the stream for chaining. Short
    aliases (``a``, ``b``, ``i``, ``u``, ``s``, ``sc``, ``fs``, ``ff``,
    ``ffe``, ``fc``, ``fch``, ``fc3``, ``fc3i``, ``br``) are provided for
    terse call chains.

    Raises:
        EmptyStreamError: A modifier is called before the first ``add()``.

    """

    __slots__ = ("_config", "_cursor", "_fragments")

    def __init__(self, *, config: StreamConfig | None = None) -> None:
        """Initialize an empty stream.

        Args:
            config: Configuration for this stream. Defaults to the active
                context configuration at construction time.
        """
        self._config = config if config is not None else get_stream_config()
        self._fragments: list[Fragment] = []
        self._cursor: int | None = None

    @property
    def config(self) -> StreamConfig:
        return self._config

    @property
    def fragments(self) -> tuple[Fragment, ...]:
        """Fragments in output order."""
        return tuple(self._fragments)

    @property
    def current(self) -> Fragment | None:
        """The fragment that modifiers decorate, or None if the stream is empty."""
        if self._cursor is None:
            return None
        return self._fragments[self._cursor]

    # =========================================================================
    # Fragments
    # =========================================================================

    def add(self, text: str) -> RichTextStream:
        """Add a text to the end of the stream.

        Args:
            text: The literal text; written as given, without escaping
        """
        self._fragments.append(Fragment(text))
        self._cursor = len(self._fragments) - 1
        return self

    def break_line(self) -> RichTextStream:
        """Add a line break as a new fragment.

        Modifiers chained after this decorate the break, not the text before it.
        """
        return self.add(self._config.line_break)

    # =========================================================================
    # Boolean modifiers
    # =========================================================================

    def bold(self) -> RichTextStream:
        """Bold the current fragment."""
        self._target("bold").set_flag(Tag.BOLD)
        return self

    def italic(self) -> RichTextStream:
        """Italicize the current fragment."""
        self._target("italic").set_flag(Tag.ITALIC)
        return self

    def underline(self) -> RichTextStream:
        """Underline the current fragment."""
        self._target("underline").set_flag(Tag.UNDERLINE)
        return self

    def strikethrough(self) -> RichTextStream:
        """Strike through the current fragment."""
        self._target("strikethrough").set_flag(Tag.STRIKETHROUGH)
        return self

    def small_caps(self) -> RichTextStream:
        """Render the current fragment in small caps."""
        self._target("small_caps").set_flag(Tag.SMALL_CAPS)
        return self

    # =========================================================================
    # Font modifiers
    # =========================================================================

    def font_size(self, size: float) -> RichTextStream:
        """Change the font size.

        Args:
            size: The size of the text
        """
        return self._font("font_size", f'size="{format_number(size)}"')

    def font_face(self, face: str) -> RichTextStream:
        """Change the font face by name.

        Args:
            face: Canonical face name (a ``Font`` member name, e.g. "Gotham")
        """
        fragment = self._target("font_face")
        if not is_known_font(face):
            self._violation(UnknownFontError(face))
        fragment.add_parameter(Tag.FONT, f'face="{face}"')
        return self

    def font_face_enum(self, face: NamedFont | Any) -> RichTextStream:
        """Change the font face from an enumerated identifier.

        Args:
            face: A ``Font`` member, or any object the configured
                ``font_name`` converter accepts
        """
        to_name = self._config.font_name or default_font_name
        return self._font("font_face_enum", f'face="{to_name(face)}"')

    def font_color(self, color: str) -> RichTextStream:
        """Change the font color.

        Args:
            color: ``#hex`` or ``rgb(r,g,b)`` string, written as given

        Example:
            >>> rich("x").font_color("rgb(255,255,255)").to_string()
            '<font color="rgb(255,255,255)">x</font>'
        """
        fragment = self._target("font_color")
        if not is_color_string(color):
            self._violation(InvalidColorError(color))
        fragment.add_parameter(Tag.FONT, f'color="{color}"')
        return self

    def font_color_hex(self, color: str) -> RichTextStream:
        """Change the font color from hex digits.

        Args:
            color: Hex digits without the leading ``#`` (e.g. "ffffff")
        """
        fragment = self._target("font_color_hex")
        if not is_hex_digits(color):
            self._violation(InvalidColorError(color, f"Invalid hex digits {color!r}"))
        fragment.add_parameter(Tag.FONT, f'color="#{color}"')
        return self

    def font_color3(self, color: ColorLike | Any) -> RichTextStream:
        """Change the font color from a three-channel color value.

        Args:
            color: A ``Color3`` (or any ``ColorLike``); channels are written as
                stored, e.g. ``Color3(1, 0.5, 0)`` -> ``rgb(1,0.5,0)``
        """
        to_channels = self._config.color_channels or default_color_channels
        fragment = self._target("font_color3")
        r, g, b = to_channels(color)
        fragment.add_parameter(Tag.FONT, f'color="{rgb_string(r, g, b)}"')
        return self

    def font_color3_input(self, r: float, g: float, b: float) -> RichTextStream:
        """Change the font color from three components.

        Args:
            r: The red value
            g: The green value
            b: The blue value
        """
        return self._font("font_color3_input", f'color="{rgb_string(r, g, b)}"')

    # =========================================================================
    # Output
    # =========================================================================

    def to_string(self, renderer: StreamRenderer | None = None) -> str:
        """Render the stream.

        Pure: rendering never changes the stream, so repeated calls return
        the same string.

        Args:
            renderer: Renderer to use (default: ``MarkupRenderer``)
        """
        return (renderer or _DEFAULT_RENDERER).render(self._fragments)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"RichTextStream(fragments={len(self._fragments)})"

    # =========================================================================
    # Internals
    # =========================================================================

    def _target(self, modifier: str) -> Fragment:
        if self._cursor is None:
            raise EmptyStreamError(modifier)
        return self._fragments[self._cursor]

    def _font(self, modifier: str, param: str) -> RichTextStream:
        self._target(modifier).add_parameter(Tag.FONT, param)
        return self

    def _violation(self, error: InvalidColorError | UnknownFontError) -> None:
        if self._config.strict:
            raise error
        logger.warning("%s; using the value as given", error)

    # Short aliases
    a = add
    b = bold
    i = italic
    u = underline
    s = strikethrough
    sc = small_caps
    fs = font_size
    ff = font_face
    ffe = font_face_enum
    fc = font_color
    fch = font_color_hex
    fc3 = font_color3
    fc3i = font_color3_input
    br = break_line


def rich(starting: str | None = None, *, config: StreamConfig | None = None) -> RichTextStream:
    """Create a rich text stream.

    Args:
        starting: Optional initial text; same as calling ``add(starting)``
        config: Optional configuration (default: the active context config)

    Example:
        >>> rich().a("Hello, ").b().fc("#ff0000").a("world!").i().to_string()
        '<font color="#ff0000"><b>Hello, </b></font><i>world!</i>'
    """
    stream = RichTextStream(config=config)
    if starting is not None:
        stream.add(starting)
    return stream
