"""Exception classes for richstream.

Misuse of the builder is a programming error and is raised, never masked.
Value checks (color strings, font names) only raise in strict mode.
"""

from __future__ import annotations


class RichTextError(Exception):
    """Base exception for all richstream errors."""

    pass


class EmptyStreamError(RichTextError):
    """A modifier was called before any fragment was added.

    Modifiers decorate the current fragment, so at least one ``add()``
    (or a seeded ``rich("...")``) must come first.
    """

    def __init__(self, modifier: str) -> None:
        """Initialize with the name of the offending modifier.

        Args:
            modifier: Method name that was called (e.g., "bold")
        """
        self.modifier = modifier
        super().__init__(f"Cannot apply '{modifier}()': the stream has no fragments; call add() first")


class InvalidColorError(RichTextError):
    """Color value is not a ``#hex`` or ``rgb(r,g,b)`` string."""

    def __init__(self, value: str, message: str | None = None) -> None:
        self.value = value
        super().__init__(message or f"Invalid color {value!r}: expected '#hex' or 'rgb(r,g,b)'")


class UnknownFontError(RichTextError):
    """Font face name is not one of the known ``Font`` members."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown font face {name!r}")
