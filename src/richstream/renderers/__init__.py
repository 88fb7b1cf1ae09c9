"""richstream renderers.

Renderers turn a stream's fragments into an output string.

Available Renderers:
- MarkupRenderer: nested tag markup (``<b>``, ``<font ...>``)

"""

from richstream.renderers.markup import MarkupRenderer
from richstream.renderers.protocol import StreamRenderer

__all__ = ["MarkupRenderer", "StreamRenderer"]
