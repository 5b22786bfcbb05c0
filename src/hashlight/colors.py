"""Color table and name-like token classification.

Every name-like token gets a color picked by CRC-8 of its text, so the same
identifier always has the same color wherever it appears. The default
palette is 60 muted hues running once around the color wheel, three
lightness steps per hue.

Example:
    >>> from hashlight.colors import DEFAULT_COLOR_TABLE
    >>> DEFAULT_COLOR_TABLE.color_for("x")
    '#c689c8'
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from hashlight.errors import ConfigError
from hashlight.tokens import Token
from hashlight.utils.hashing import crc8

# Scope prefixes that mark a token as an identifier worth coloring
NAME_SCOPE_PREFIXES: tuple[str, ...] = ("entity.name", "variable")

DEFAULT_COLORS: tuple[str, ...] = (
    "#d78797",
    "#c47d85",
    "#b27373",
    "#d38b83",
    "#bf8172",
    "#ac7762",
    "#ca9170",
    "#b78761",
    "#a37c53",
    "#bf975f",
    "#ab8d53",
    "#978248",
    "#af9d55",
    "#9c924c",
    "#898744",
    "#9da353",
    "#8a974e",
    "#788b48",
    "#88a85c",
    "#759c58",
    "#638f54",
    "#6fac6b",
    "#5d9f67",
    "#4c9263",
    "#52af7d",
    "#41a179",
    "#319373",
    "#31b191",
    "#21a28a",
    "#129484",
    "#09b1a4",
    "#00a29c",
    "#039393",
    "#13afb5",
    "#1e9fab",
    "#2690a0",
    "#3cabc3",
    "#439bb7",
    "#468caa",
    "#61a5ce",
    "#6395c0",
    "#6386b1",
    "#829ed4",
    "#808fc4",
    "#7c80b3",
    "#9e96d5",
    "#9887c3",
    "#9179b1",
    "#b58fd1",
    "#ac81be",
    "#a174ab",
    "#c689c8",
    "#ba7cb4",
    "#ad70a1",
    "#d185bb",
    "#c27aa7",
    "#b36e93",
    "#d685aa",
    "#c67a96",
    "#b57084",
)

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


@dataclass(frozen=True, slots=True)
class ColorTable:
    """Immutable palette indexed by checksum.

    Attributes:
        colors: "#rrggbb" strings, at least one

    """

    colors: tuple[str, ...] = DEFAULT_COLORS

    def __post_init__(self) -> None:
        if not self.colors:
            raise ConfigError("Color table must contain at least one color")
        for color in self.colors:
            if not isinstance(color, str) or not _HEX_COLOR.match(color):
                raise ConfigError(f"Invalid color {color!r}, expected #rrggbb")

    @classmethod
    def from_iterable(cls, colors: Iterable[str]) -> ColorTable:
        """Build a table from any iterable of color strings."""
        return cls(tuple(colors))

    def __len__(self) -> int:
        return len(self.colors)

    def __getitem__(self, index: int) -> str:
        return self.colors[index]

    def index_for(self, text: str) -> int:
        """Palette index for text: crc8 of its UTF-8 bytes modulo the table size."""
        return crc8(text) % len(self.colors)

    def color_for(self, text: str) -> str:
        """Color for text. Identical text always maps to the identical color."""
        return self.colors[self.index_for(text)]


DEFAULT_COLOR_TABLE = ColorTable()


def is_name_like(token: Token, prefixes: tuple[str, ...] = NAME_SCOPE_PREFIXES) -> bool:
    """Whether a token should be colored.

    A plain string prefix test on every scope, with no dot-boundary
    check: "variableX" matches "variable".
    """
    return token.has_scope_prefix(prefixes)


__all__ = [
    "DEFAULT_COLORS",
    "DEFAULT_COLOR_TABLE",
    "NAME_SCOPE_PREFIXES",
    "ColorTable",
    "is_name_like",
]
