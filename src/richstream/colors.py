"""Color values and color-string production.

Every color modifier on the stream ends up as one ``color="..."`` parameter.
The string forms are part of the output contract:

- ``font_color("#ff0000")``      -> ``color="#ff0000"`` (as given)
- ``font_color_hex("ff0000")``   -> ``color="#ff0000"``
- ``font_color3(Color3(1, 0, 0))`` -> ``color="rgb(1,0,0)"``
- ``font_color3_input(255, 0, 0)`` -> ``color="rgb(255,0,0)"``

Channel values are written as given. ``Color3`` keeps the 0-1 channel range
of the host color type, so ``Color3.from_rgb(255, 0, 0)`` renders as
``rgb(1,0,0)``.

"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

_HEX_DIGITS_RE = re.compile(r"[0-9a-fA-F]+")
_NUMBER = r"\s*-?(?:\d+(?:\.\d*)?|\.\d+)\s*"
_RGB_RE = re.compile(rf"rgb\({_NUMBER},{_NUMBER},{_NUMBER}\)")


def format_number(value: Any) -> str:
    """Format a size or channel value for markup.

    Integral numbers render without fractional digits; other floats use the
    shortest round-trip form; anything else goes through ``str()``.

    Examples:
        >>> format_number(12)
        '12'
        >>> format_number(12.0)
        '12'
        >>> format_number(0.5)
        '0.5'
    """
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def rgb_string(r: Any, g: Any, b: Any) -> str:
    """Build ``rgb(r,g,b)`` with no spaces between components."""
    return f"rgb({format_number(r)},{format_number(g)},{format_number(b)})"


def is_hex_digits(value: str) -> bool:
    """True for a non-empty run of hex digits (no leading ``#``)."""
    return _HEX_DIGITS_RE.fullmatch(value) is not None


def is_color_string(value: str) -> bool:
    """True for ``#<hex>`` or ``rgb(r,g,b)`` strings."""
    if value.startswith("#"):
        return is_hex_digits(value[1:])
    return _RGB_RE.fullmatch(value) is not None


@dataclass(frozen=True, slots=True)
class Color3:
    """Three-channel color with components in the 0-1 range.

    Example:
        >>> Color3.from_rgb(255, 0, 0)
        Color3(r=1.0, g=0.0, b=0.0)
        >>> Color3.from_hex("#00ff00").g
        1.0

    """

    r: float
    g: float
    b: float

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float) -> Color3:
        """Create from 0-255 components."""
        return cls(r / 255, g / 255, b / 255)

    @classmethod
    def from_hex(cls, value: str) -> Color3:
        """Create from ``#rrggbb`` / ``rrggbb`` (or the 3-digit short form).

        Raises:
            ValueError: If the value is not 3 or 6 hex digits
        """
        digits = value.removeprefix("#")
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        if len(digits) != 6 or not is_hex_digits(digits):
            raise ValueError(f"Invalid hex color: {value!r}")
        return cls.from_rgb(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    def to_hex(self) -> str:
        """Return ``#rrggbb`` with channels rounded to 0-255."""
        return "#" + "".join(f"{round(c * 255):02x}" for c in (self.r, self.g, self.b))


def default_color_channels(color: Any) -> tuple[Any, Any, Any]:
    """Read ``(r, g, b)`` from any object exposing ``r``, ``g`` and ``b``."""
    return color.r, color.g, color.b


__all__ = [
    "Color3",
    "default_color_channels",
    "format_number",
    "is_color_string",
    "is_hex_digits",
    "rgb_string",
]
