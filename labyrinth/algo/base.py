from abc import ABC, abstractmethod
from typing import Iterator, List, Tuple
from labyrinth.core.grid import Grid

class Generator(ABC):
    def __init__(self, grid: Grid, seed: int = None):
        self.grid = grid
        self.seed = seed
        self.step_count = 0

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual grid modifications happen in-place on self.grid.
        """
        pass

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass

class Solver(ABC):
    def __init__(self, grid: Grid):
        self.grid = grid
        self.path: List[Tuple[int, int]] = []
        self.visited_count = 0

    @abstractmethod
    def run(self, start: Tuple[int, int], end: Tuple[int, int]) -> Iterator[str]:
        pass

    def run_all(self, start: Tuple[int, int], end: Tuple[int, int]) -> List[Tuple[int, int]]:
        for _ in self.run(start, end):
            pass
        return self.path

    def solve(self) -> List[Tuple[int, int]]:
        """Solves from the generated entry (row 1) to the exit (last row)."""
        if self.grid.col_start is None or self.grid.col_end is None:
            raise ValueError("Grid has no entry/exit, run a generator first")
        start = (1, self.grid.col_start)
        end = (self.grid.rows, self.grid.col_end)
        return self.run_all(start, end)
