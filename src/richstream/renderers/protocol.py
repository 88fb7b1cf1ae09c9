"""StreamRenderer protocol — stable interface for fragment renderers.

Any renderer that implements ``render(fragments) -> str`` conforms to this
protocol. The built-in ``MarkupRenderer`` is the reference implementation.

Example:
    from richstream.renderers.protocol import StreamRenderer

    def render_message(renderer: StreamRenderer, stream: RichTextStream) -> str:
        return renderer.render(stream.fragments)

"""

from collections.abc import Iterable
from typing import Protocol

from richstream.fragment import Fragment


class StreamRenderer(Protocol):
    """Protocol for fragment renderers."""

    def render(self, fragments: Iterable[Fragment]) -> str:
        """Render fragments, in order, to one string.

        Args:
            fragments: Fragments in output order.

        Returns:
            Rendered string output.

        """
        ...
