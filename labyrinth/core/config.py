from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from labyrinth.viz.glyphs import GlyphStyle

MIN_SIZE = 5
MAX_SIZE = 200

# Fixed seed so repeated runs print the same maze unless shuffling is requested
DEFAULT_SEED = 2

@dataclass
class MazeConfig:
    rows: int = 10
    cols: int = 20
    glyph_style: GlyphStyle = GlyphStyle.ASCII
    show_solution: bool = False
    is_monochrome: bool = False
    simple_print: bool = False
    random_shuffle: bool = False

    @property
    def seed(self) -> Optional[int]:
        """None seeds the generator from system entropy."""
        return None if self.random_shuffle else DEFAULT_SEED

    def validate(self) -> "MazeConfig":
        for name in ("rows", "cols"):
            value = getattr(self, name)
            if not MIN_SIZE <= value <= MAX_SIZE:
                raise ValueError(f"{name} must be in the range {MIN_SIZE}..{MAX_SIZE}, got {value}")
        return self

    def as_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["glyph_style"] = self.glyph_style.name
        return data
