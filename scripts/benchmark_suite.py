import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from labyrinth.core.grid import Grid
from labyrinth.algo.gallery import GrowingGallery
from labyrinth.algo.solvers import DepthFirstSolver
from labyrinth.core.complexity import MazeStats
from labyrinth.viz.text_renderer import EnhancedRenderer

def benchmark_size(rows: int, cols: int):
    print(f"\n--- Benchmarking {rows}x{cols} ({rows*cols:,} cells) ---")

    # 1. Generation
    grid = Grid(rows, cols)
    algo = GrowingGallery(grid, seed=42)

    gen_start = time.time()
    algo.run_all()
    gen_time = time.time() - gen_start
    print(f"Generation Time: {gen_time:.4f}s ({algo.gallery_count} galleries)")
    print(f"Speed: {(rows*cols)/gen_time:,.0f} cells/sec")

    # 2. Solving
    solver = DepthFirstSolver(grid)
    solve_start = time.time()
    path = solver.solve()
    print(f"Solve Time: {time.time() - solve_start:.4f}s (path {len(path)}, explored {solver.visited_count})")

    # 3. Rendering
    render_start = time.time()
    text = EnhancedRenderer(grid, show_solution=True).render()
    print(f"Render Time: {time.time() - render_start:.4f}s ({len(text):,} chars)")

    stats = MazeStats.calculate_stats(grid)
    print(f"Dead ends: {stats['dead_end_percent']:.1f}%")

def run_suite():
    sizes = [
        (10, 20),
        (50, 50),
        (100, 100),
        (200, 200),
    ]

    for rows, cols in sizes:
        benchmark_size(rows, cols)

if __name__ == "__main__":
    run_suite()
