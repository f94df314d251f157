import logging
from typing import Iterator, List, Tuple
from labyrinth.core.grid import Grid, Mark, Side
from labyrinth.algo.base import Solver

logger = logging.getLogger(__name__)

class MazeInvariantError(RuntimeError):
    """The grid is not a connected maze, which generation never produces."""

class DepthFirstSolver(Solver):
    """
    Depth-first search from entry to exit, recording its state in the grid marks.

    While a cell is on the search stack its mark is the Side being probed
    (PROBE_TOP..PROBE_BOTTOM), so the mark doubles as the resume point of the
    frame. Exhausted cells become DEAD_END. Once the exit is reached every
    cell still holding a probe mark is on the path and becomes ON_PATH.
    """

    def run(self, start: Tuple[int, int], end: Tuple[int, int]) -> Iterator[str]:
        grid = self.grid
        for r, c in (start, end):
            if not grid.in_bounds(r, c):
                raise IndexError(f"Solver endpoint ({r}, {c}) is not an interior cell")

        grid.set_mark(*start, Mark.ON_PATH)
        grid.set_mark(*end, Mark.ON_PATH)
        self.visited_count = 1

        if start == end:
            self.path = [start]
            yield "Solved"
            return

        max_depth = grid.rows * grid.cols
        stack: List[Tuple[int, int]] = [start]
        finished = False
        count = 0

        while stack:
            r, c = stack[-1]
            current = grid.get_mark(r, c)
            # Start cell carries ON_PATH until its first probe
            direction = int(current) + 1 if current.is_probing else 1

            if direction > len(Side):
                grid.set_mark(r, c, Mark.DEAD_END)
                stack.pop()
                continue

            side = Side(direction)
            grid.set_mark(r, c, Mark.probing(side))
            rn, cn = grid.neighbor(r, c, side)
            if not grid.in_bounds(rn, cn) or grid.get_wall(r, c, side):
                continue

            neighbor_mark = grid.get_mark(rn, cn)
            if neighbor_mark == Mark.ON_PATH:
                stack.append((rn, cn))
                finished = True
                break
            if neighbor_mark == Mark.UNVISITED:
                stack.append((rn, cn))
                self.visited_count += 1
                if len(stack) > max_depth:
                    raise MazeInvariantError(
                        f"Search depth {len(stack)} exceeds the {max_depth} cells of the grid"
                    )

            count += 1
            if count % 100 == 0:
                yield f"Stack: {len(stack)}"

        if not finished:
            raise MazeInvariantError(f"No path from {start} to {end}, the maze is not connected")

        # Cells left in a probe state form the successful search stack
        for r, c in grid.interior():
            if grid.get_mark(r, c).is_probing:
                grid.set_mark(r, c, Mark.ON_PATH)

        self.path = stack
        logger.debug(f"Path of {len(self.path)} cells, {self.visited_count} cells explored")
        yield "Solved"
