from collections import deque

import numpy as np

from labyrinth.core.grid import Grid, Mark, Side

class MazeStats:
    @staticmethod
    def count_passages(grid: Grid) -> int:
        """
        Number of open walls between two interior cells.
        Entry/exit openings lead outside and are not counted.
        """
        walls = grid.wall_bitmap()
        # Top walls of rows 2..rows separate interior cells, likewise left walls of cols 2..cols
        open_top = (walls[1:grid.rows, :grid.cols] & Grid.TOP_WALL) == 0
        open_left = (walls[:grid.rows, 1:grid.cols] & Grid.LEFT_WALL) == 0
        return int(np.count_nonzero(open_top) + np.count_nonzero(open_left))

    @staticmethod
    def count_reachable(grid: Grid, start=(1, 1)) -> int:
        seen = {start}
        queue = deque([start])
        while queue:
            r, c = queue.popleft()
            for nr, nc, _ in grid.get_open_neighbors(r, c):
                if (nr, nc) not in seen:
                    seen.add((nr, nc))
                    queue.append((nr, nc))
        return len(seen)

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        """Connected with exactly rows*cols - 1 passages, i.e. a spanning tree."""
        cells = grid.rows * grid.cols
        return (MazeStats.count_passages(grid) == cells - 1
                and MazeStats.count_reachable(grid) == cells)

    @staticmethod
    def calculate_stats(grid: Grid):
        dead_ends = 0
        intersections = 0 # 0, 1 walls
        corridors = 0 # 2 walls
        path_len = 0

        for r, c in grid.interior():
            # Entry/exit openings count as walls, the outside is not a cell
            exits = sum(1 for _ in grid.get_open_neighbors(r, c))
            walls = len(Side) - exits
            if walls == 3: dead_ends += 1
            elif walls == 2: corridors += 1
            elif walls <= 1: intersections += 1
            if grid.get_mark(r, c) == Mark.ON_PATH:
                path_len += 1

        total = grid.rows * grid.cols
        return {
            "passages": MazeStats.count_passages(grid),
            "dead_ends": dead_ends,
            "corridors": corridors,
            "intersections": intersections,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0,
            "path_len": path_len,
        }
