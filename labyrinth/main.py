import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'labyrinth' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from labyrinth.core.config import MazeConfig, MIN_SIZE, MAX_SIZE
from labyrinth.core.grid import Grid
from labyrinth.viz.glyphs import GlyphStyle

logger = logging.getLogger("labyrinth")

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def grid_size(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer '{text}'")
    if not MIN_SIZE <= value <= MAX_SIZE:
        raise argparse.ArgumentTypeError(f"must be in the range {MIN_SIZE}..{MAX_SIZE}")
    return value

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="labyrinth",
        description="Generation of a random labyrinth, and optionally show solution path"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    parser.add_argument("-a", "--simple", action="store_true", help="Simple print (ASCII only)")
    parser.add_argument("-b", "--border", type=str.lower, default="a", choices=[s.value for s in GlyphStyle],
                        help="Border style, a=ASCII, s=Simple, b=Bold, d=Double, r=Rounded")
    parser.add_argument("-s", "--solution", action="store_true", help="Shows solution")
    parser.add_argument("-m", "--monochrome", action="store_true", help="Monochrome (no color) solution output")
    parser.add_argument("-d", "--shuffle", action="store_true", help="Shuffle random generator")
    parser.add_argument("-r", "--rows", type=grid_size, default=MazeConfig.rows,
                        help=f"Number of rows in [{MIN_SIZE}..{MAX_SIZE}], default %(default)s")
    parser.add_argument("-c", "--cols", type=grid_size, default=MazeConfig.cols,
                        help=f"Number of columns in [{MIN_SIZE}..{MAX_SIZE}], default %(default)s")
    parser.add_argument("--visual", action="store_true", help="Also show the maze in a window")
    return parser

def build_config(args: argparse.Namespace) -> MazeConfig:
    return MazeConfig(
        rows=args.rows,
        cols=args.cols,
        glyph_style=GlyphStyle.from_letter(args.border),
        show_solution=args.solution,
        is_monochrome=args.monochrome,
        simple_print=args.simple,
        random_shuffle=args.shuffle,
    ).validate()

def generate_maze(config: MazeConfig) -> Grid:
    from labyrinth.algo.gallery import GrowingGallery
    from labyrinth.algo.solvers import DepthFirstSolver

    grid = Grid(config.rows, config.cols)
    logger.debug(f"Generating {config.rows}x{config.cols} maze (seed={config.seed})...")
    GrowingGallery(grid, seed=config.seed).run_all()

    if config.show_solution:
        solver = DepthFirstSolver(grid)
        path = solver.solve()
        logger.debug(f"Solution length: {len(path)}")

    return grid

def render_maze(grid: Grid, config: MazeConfig) -> str:
    from labyrinth.viz.text_renderer import make_renderer
    renderer = make_renderer(
        grid,
        style=config.glyph_style,
        simple_print=config.simple_print,
        show_solution=config.show_solution,
        monochrome=config.is_monochrome,
    )
    return renderer.render()

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    try:
        config = build_config(args)
    except ValueError as e:
        parser.error(str(e))

    logger.debug(f"Config: {config.as_dict()}")

    grid = generate_maze(config)
    sys.stdout.write(render_maze(grid, config))

    if args.verbose:
        from labyrinth.core.complexity import MazeStats
        logger.debug(f"Stats: {MazeStats.calculate_stats(grid)}")

    if args.visual:
        from labyrinth.viz.window import MazeWindow
        logger.info("Visual mode enabled - Opening window...")
        window = MazeWindow(grid)
        window.init_window()
        window.run_loop()

    return 0

if __name__ == "__main__":
    sys.exit(main())
