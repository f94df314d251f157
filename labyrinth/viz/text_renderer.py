from typing import Iterator
from labyrinth.core.grid import Grid, Mark
from labyrinth.viz.glyphs import GlyphStyle, GlyphTable

# ANSI SGR sequences bracketing each colored glyph
WALL_ON = "\x1b[32m"
WALL_OFF = "\x1b[37m"
SOLUTION_ON = "\x1b[33m"
SOLUTION_OFF = "\x1b[30m"
SOLUTION_BACKGROUND = "\x1b[43m"
RESET = "\x1b[0m"

class TextRenderer:
    """
    Base for text renderers. Reads the grid, never modifies it.

    Every row prints as two lines: corners and top walls, then left walls and
    cell interiors. A cell is two characters wide.
    """

    def __init__(self, grid: Grid, show_solution: bool = False, monochrome: bool = False):
        self.grid = grid
        self.show_solution = show_solution
        self.monochrome = monochrome

    @property
    def colored(self) -> bool:
        return self.show_solution and not self.monochrome

    def on_path(self, row: int, col: int) -> bool:
        """
        True if the solution runs through (row, col). Row 0 and row rows+1
        stand for the outside, reached through the entry and exit openings.
        """
        if not self.show_solution:
            return False
        grid = self.grid
        if row == 0:
            return col == grid.col_start
        if row == grid.rows + 1:
            return col == grid.col_end
        if not grid.in_bounds(row, col):
            return False
        return grid.get_mark(row, col) == Mark.ON_PATH

    def lines(self) -> Iterator[str]:
        rows, cols = self.grid.rows, self.grid.cols
        for r in range(1, rows + 2):
            yield "".join(
                [self.corner(r, c) + self.top_segment(r, c) for c in range(1, cols + 1)]
                + [self.corner(r, cols + 1)]
            )
            if r <= rows:
                yield "".join(
                    [self.left_segment(r, c) + self.interior(r, c) for c in range(1, cols + 1)]
                    + [self.left_segment(r, cols + 1)]
                )

    def render(self) -> str:
        return "\n".join(self.lines()) + "\n"

    def _top_open_on_path(self, r: int, c: int) -> bool:
        return self.on_path(r - 1, c) and self.on_path(r, c)

    def _left_open_on_path(self, r: int, c: int) -> bool:
        return c > 1 and self.on_path(r, c - 1) and self.on_path(r, c)

    def corner(self, r: int, c: int) -> str:
        raise NotImplementedError

    def top_segment(self, r: int, c: int) -> str:
        raise NotImplementedError

    def left_segment(self, r: int, c: int) -> str:
        raise NotImplementedError

    def interior(self, r: int, c: int) -> str:
        raise NotImplementedError

class EnhancedRenderer(TextRenderer):
    """Draws wall junctions with a glyph table (ASCII or box drawing)."""

    def __init__(self, grid: Grid, glyphs: GlyphTable = None, show_solution: bool = False,
                 monochrome: bool = False):
        super().__init__(grid, show_solution, monochrome)
        self.glyphs = glyphs if glyphs is not None else GlyphStyle.ASCII.table

    def _wall(self, text: str) -> str:
        if self.colored:
            return WALL_ON + text + WALL_OFF
        return text

    def _solution(self, text: str) -> str:
        if self.colored:
            return SOLUTION_ON + text + SOLUTION_OFF
        return text

    def corner(self, r: int, c: int) -> str:
        grid = self.grid
        up = False if r == 1 else grid.get_left_wall(r - 1, c)
        left = False if c == 1 else grid.get_top_wall(r, c - 1)
        right = False if c == grid.cols + 1 else grid.get_top_wall(r, c)
        down = False if r == grid.rows + 1 else grid.get_left_wall(r, c)
        glyph = self.glyphs.corner(up, right, down, left)
        if glyph == self.glyphs.empty:
            return glyph
        return self._wall(glyph)

    def top_segment(self, r: int, c: int) -> str:
        if self.grid.get_top_wall(r, c):
            return self._wall(self.glyphs.horizontal * 2)
        if self._top_open_on_path(r, c):
            return self._solution(self.glyphs.fill * 2)
        return self.glyphs.empty * 2

    def left_segment(self, r: int, c: int) -> str:
        if self.grid.get_left_wall(r, c):
            return self._wall(self.glyphs.vertical)
        if self._left_open_on_path(r, c):
            return self._solution(self.glyphs.fill)
        return self.glyphs.empty

    def interior(self, r: int, c: int) -> str:
        if self.on_path(r, c):
            return self._solution(self.glyphs.fill * 2)
        return self.glyphs.empty * 2

class SimpleRenderer(TextRenderer):
    """Plain '+', '-' and '|' drawing, the glyph table is not used."""

    BLOCK = "█"

    def _path(self, width: int) -> str:
        if self.monochrome:
            return self.BLOCK * width
        return SOLUTION_BACKGROUND + " " * width + RESET

    def corner(self, r: int, c: int) -> str:
        return "+"

    def top_segment(self, r: int, c: int) -> str:
        if self.grid.get_top_wall(r, c):
            return "--"
        if self._top_open_on_path(r, c):
            return self._path(2)
        return "  "

    def left_segment(self, r: int, c: int) -> str:
        if self.grid.get_left_wall(r, c):
            return "|"
        if self._left_open_on_path(r, c):
            return self._path(1)
        return " "

    def interior(self, r: int, c: int) -> str:
        if self.on_path(r, c):
            return self._path(2)
        return "  "

def make_renderer(grid: Grid, style: GlyphStyle = GlyphStyle.ASCII, simple_print: bool = False,
                  show_solution: bool = False, monochrome: bool = False) -> TextRenderer:
    if simple_print:
        return SimpleRenderer(grid, show_solution=show_solution, monochrome=monochrome)
    return EnhancedRenderer(grid, style.table, show_solution=show_solution, monochrome=monochrome)
