import logging
import random
from typing import Iterator, Optional, Tuple
from labyrinth.core.grid import Grid, Side
from labyrinth.algo.base import Generator

logger = logging.getLogger(__name__)

class GrowingGallery(Generator):
    """
    Carves a random spanning tree by growing "galleries": random walks into
    unvisited cells. A gallery stops at a dead end and the next one starts
    from a random cell that is already part of the tree.
    """

    def __init__(self, grid: Grid, seed: int = None):
        super().__init__(grid, seed)
        self.rng = random.Random(seed)
        self.gallery_count = 0

    def run(self) -> Iterator[str]:
        rows, cols = self.grid.rows, self.grid.cols
        remaining = rows * cols

        while remaining > 0:
            # First gallery may start anywhere, later ones must branch off the tree
            while True:
                r = self.rng.randint(1, rows)
                c = self.rng.randint(1, cols)
                if remaining == rows * cols or self.grid.is_visited(r, c):
                    break

            remaining -= self._grow_gallery(r, c)
            self.gallery_count += 1

            if self.gallery_count % 100 == 0:
                yield f"Galleries: {self.gallery_count}, remaining: {remaining}"

        # Open one cell on first and last row
        self.grid.col_start = self.rng.randint(1, cols)
        self.grid.col_end = self.rng.randint(1, cols)
        self.grid.clear_wall(1, self.grid.col_start, Side.TOP)
        self.grid.clear_wall(rows, self.grid.col_end, Side.BOTTOM)

        logger.debug(
            f"Carved {self.step_count} passages in {self.gallery_count} galleries, "
            f"entry col {self.grid.col_start}, exit col {self.grid.col_end}"
        )
        yield "Done"

    def _grow_gallery(self, r: int, c: int) -> int:
        """Walks from (r, c) until blocked. Returns the number of newly visited cells."""
        newly_visited = 0
        while True:
            if not self.grid.is_visited(r, c):
                self.grid.set_visited(r, c)
                newly_visited += 1

            found = self._pick_direction(r, c)
            if found is None:
                # All directions blocked, gallery finished
                return newly_visited

            side, rt, ct = found
            self.grid.clear_wall(r, c, side)
            self.step_count += 1
            r, c = rt, ct

    def _pick_direction(self, r: int, c: int) -> Optional[Tuple[Side, int, int]]:
        direction = self.rng.randint(1, 4)
        for _ in range(4):
            side = Side(direction)
            rt, ct = self.grid.neighbor(r, c, side)
            if self.grid.in_bounds(rt, ct) and not self.grid.is_visited(rt, ct):
                return side, rt, ct
            # Doesn't fit, turn direction
            direction = direction % 4 + 1
        return None
