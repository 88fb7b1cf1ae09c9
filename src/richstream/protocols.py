"""Protocols for host value types accepted by the stream.

The stream never depends on concrete host types. Anything that looks like
one of these protocols works with the default converters; anything else can
be supported by injecting ``StreamConfig.font_name`` or
``StreamConfig.color_channels``.
"""

from __future__ import annotations

from typing import Protocol


class NamedFont(Protocol):
    """Enumerated font identifier exposing its canonical face name.

    ``enum.Enum`` members (including ``richstream.Font``) conform.
    """

    @property
    def name(self) -> str: ...


class ColorLike(Protocol):
    """Three-channel color value.

    ``richstream.Color3`` conforms. Channels are emitted as given.
    """

    @property
    def r(self) -> float: ...

    @property
    def g(self) -> float: ...

    @property
    def b(self) -> float: ...
