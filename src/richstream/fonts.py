"""Font face identifiers.

``Font`` enumerates the canonical face names a renderer understands. The
stream accepts either a plain name (``font_face("Arial")``) or an enumerated
identifier (``font_face_enum(Font.Arial)``); both render ``face="Arial"``.

"""

from __future__ import annotations

from enum import Enum
from typing import Any


class Font(Enum):
    """Known font faces. The member name is the canonical face name."""

    Legacy = 0
    Arial = 1
    ArialBold = 2
    SourceSans = 3
    SourceSansBold = 4
    SourceSansLight = 5
    SourceSansItalic = 6
    Bodoni = 7
    Garamond = 8
    Cartoon = 9
    Code = 10
    Highway = 11
    SciFi = 12
    Arcade = 13
    Fantasy = 14
    Antique = 15
    SourceSansSemibold = 16
    Gotham = 17
    GothamMedium = 18
    GothamBold = 19
    GothamBlack = 20
    AmaticSC = 21
    Bangers = 22
    Creepster = 23
    DenkOne = 24
    Fondamento = 25
    FredokaOne = 26
    GrenzeGotisch = 27
    IndieFlower = 28
    JosefinSans = 29
    Jura = 30
    Kalam = 31
    LuckiestGuy = 32
    Merriweather = 33
    Michroma = 34
    Nunito = 35
    Oswald = 36
    PatrickHand = 37
    PermanentMarker = 38
    Roboto = 39
    RobotoCondensed = 40
    RobotoMono = 41
    Sarpanch = 42
    SpecialElite = 43
    TitilliumWeb = 44
    Ubuntu = 45


def is_known_font(name: str) -> bool:
    """True if ``name`` is a ``Font`` member name (case-sensitive)."""
    return name in Font.__members__


def default_font_name(font: Any) -> str:
    """Canonical name of an enumerated font identifier (its ``name``)."""
    return font.name


__all__ = ["Font", "default_font_name", "is_known_font"]
