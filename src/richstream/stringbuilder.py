"""StringBuilder for O(n) markup accumulation.

Appends to a list, joins once at the end. Tag helpers emit the opening and
closing halves of a markup tag so a fragment's nested tags can be written in
a single pass instead of re-wrapping the rendered string once per attribute.

Thread Safety:
StringBuilder instances are local to each render() call.

"""

from __future__ import annotations

from collections.abc import Sequence


class StringBuilder:
    """Efficient string accumulator with tag helpers.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.open_tag("font", ['size="12"']).append("hi").close_tag("font")
            >>> sb.build()
            '<font size="12">hi</font>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string (empty strings are skipped).

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def open_tag(self, name: str, params: Sequence[str] | None = None) -> StringBuilder:
        """Append ``<name>`` or ``<name p1 p2 ...>``.

        Args:
            name: Tag name
            params: ``key="value"`` strings, or None for a bare tag

        Returns:
            self for method chaining
        """
        if params is None:
            self._parts.append(f"<{name}>")
        else:
            self._parts.append(f"<{name} {' '.join(params)}>")
        return self

    def close_tag(self, name: str) -> StringBuilder:
        """Append ``</name>``."""
        self._parts.append(f"</{name}>")
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
