"""Markup renderer using StringBuilder pattern.

Renders fragments to tagged markup in one pass.

Nesting Order:
Conceptually each attribute slot wraps the text rendered so far, in slot
order, so the first slot is innermost::

    text -> <b>text</b> -> <i><b>text</b></i>

The renderer writes the same result directly: opening tags in reverse slot
order, the text, then closing tags in slot order.

Thread Safety:
A StringBuilder is created per render() call. A single MarkupRenderer can be
shared across threads.

"""

from collections.abc import Iterable

from richstream.fragment import Fragment
from richstream.stringbuilder import StringBuilder
from richstream.utils.logger import get_logger

logger = get_logger(__name__)


class MarkupRenderer:
    """Render fragments to markup.

    Usage:
        >>> from richstream import rich
        >>> stream = rich("Hello, ").bold().font_color("#ff0000").add("world!").italic()
        >>> MarkupRenderer().render(stream.fragments)
        '<font color="#ff0000"><b>Hello, </b></font><i>world!</i>'

    Text and parameter values are written verbatim; nothing is escaped.
    """

    __slots__ = ()

    def render(self, fragments: Iterable[Fragment]) -> str:
        """Render fragments, in order, to one markup string."""
        sb = StringBuilder()
        count = 0
        for fragment in fragments:
            self._render_fragment(fragment, sb)
            count += 1
        logger.debug("Rendered %d fragment(s) into %d part(s)", count, len(sb))
        return sb.build()

    def render_fragment(self, fragment: Fragment) -> str:
        """Render a single fragment."""
        sb = StringBuilder()
        self._render_fragment(fragment, sb)
        return sb.build()

    def _render_fragment(self, fragment: Fragment, sb: StringBuilder) -> None:
        slots = list(fragment.wrap_order())
        for name, params in reversed(slots):
            sb.open_tag(name, params)
        sb.append(fragment.text)
        for name, _params in slots:
            sb.close_tag(name)
