from enum import Enum
from typing import Sequence

# Index = up | right << 1 | down << 2 | left << 3, index 16 is the solution fill
CORNERS_ASCII   = " |-+||++-+-+++++*"
CORNERS_SIMPLE  = " │─└││┌├─┘─┴┐┤┬┼█"
CORNERS_ROUNDED = " ╵╶╰╷│╭├╴╯─┴╮┤┬┼█"
CORNERS_BOLD    = " ╹╺┗╻┃┏┣╸┛━┻┓┫┳╋█"
CORNERS_DOUBLE  = " ║═╚║║╔╠═╝═╩╗╣╦╬█"

class GlyphTable:
    EMPTY = 0
    VERTICAL = 5     # up + down
    HORIZONTAL = 10  # right + left
    FILL = 16

    def __init__(self, chars: Sequence[str]):
        if len(chars) != 17:
            raise ValueError(f"Glyph table needs 17 entries, got {len(chars)}")
        self.chars = tuple(chars)

    def corner(self, up: bool, right: bool, down: bool, left: bool) -> str:
        ix = (1 if up else 0) + (2 if right else 0) + (4 if down else 0) + (8 if left else 0)
        return self.chars[ix]

    @property
    def empty(self) -> str:
        return self.chars[self.EMPTY]

    @property
    def vertical(self) -> str:
        return self.chars[self.VERTICAL]

    @property
    def horizontal(self) -> str:
        return self.chars[self.HORIZONTAL]

    @property
    def fill(self) -> str:
        return self.chars[self.FILL]

class GlyphStyle(Enum):
    ASCII = "a"
    SIMPLE = "s"
    ROUNDED = "r"
    BOLD = "b"
    DOUBLE = "d"

    @property
    def table(self) -> GlyphTable:
        return _TABLES[self]

    @classmethod
    def from_letter(cls, letter: str) -> "GlyphStyle":
        try:
            return cls(letter.lower())
        except ValueError:
            raise ValueError(f"Unknown border style '{letter}', expected one of a, s, r, b, d") from None

_TABLES = {
    GlyphStyle.ASCII: GlyphTable(CORNERS_ASCII),
    GlyphStyle.SIMPLE: GlyphTable(CORNERS_SIMPLE),
    GlyphStyle.ROUNDED: GlyphTable(CORNERS_ROUNDED),
    GlyphStyle.BOLD: GlyphTable(CORNERS_BOLD),
    GlyphStyle.DOUBLE: GlyphTable(CORNERS_DOUBLE),
}
