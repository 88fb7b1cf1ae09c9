"""Fragment data model for richstream.

A fragment is one literal text segment plus the tags that decorate it.

Attribute slots:
    Each tag name maps to either ``None`` (a bare tag such as ``<b>``) or a
    list of ``key="value"`` parameters (``<font size="12" color="#fff">``).
    The mapping is insertion-ordered and a name occupies one slot only, so
    the position of a tag is fixed the first time it is applied. Position
    decides nesting: the first slot is the innermost tag.

"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum


class Tag(StrEnum):
    """Tag names emitted by the stream."""

    BOLD = "b"
    ITALIC = "i"
    UNDERLINE = "u"
    STRIKETHROUGH = "s"
    SMALL_CAPS = "sc"
    FONT = "font"


@dataclass(frozen=True, slots=True)
class Fragment:
    """Literal text plus its ordered attribute slots.

    The text is fixed at creation. Only the attribute mapping changes, and
    only through ``set_flag`` and ``add_parameter``.

    Example:
        >>> frag = Fragment("hi")
        >>> frag.set_flag(Tag.BOLD)
        >>> frag.add_parameter(Tag.FONT, 'size="12"')
        >>> frag.attributes
        {<Tag.BOLD: 'b'>: None, <Tag.FONT: 'font'>: ['size="12"']}

    """

    text: str
    attributes: dict[str, list[str] | None] = field(default_factory=dict)

    def set_flag(self, name: str) -> None:
        """Mark a bare tag as present. Re-setting keeps the first slot."""
        if name not in self.attributes:
            self.attributes[name] = None

    def add_parameter(self, name: str, param: str) -> None:
        """Append ``param`` to the parameter list stored under ``name``.

        Creates the list, and the slot, on first use.
        """
        params = self.attributes.get(name)
        if params is None:
            params = []
            self.attributes[name] = params
        params.append(param)

    def wrap_order(self) -> Iterator[tuple[str, list[str] | None]]:
        """Yield ``(name, params)`` innermost first."""
        yield from self.attributes.items()

    def has(self, name: str) -> bool:
        return name in self.attributes
