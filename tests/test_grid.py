import unittest
import sys
import os

# Add project root to path so we can import labyrinth
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from labyrinth.core.grid import Grid, Side, Mark

class TestGrid(unittest.TestCase):
    def test_initialization(self):
        rows, cols = 4, 6
        grid = Grid(rows, cols)
        # One sentinel row and column
        self.assertEqual(len(grid.cells), (rows + 1) * (cols + 1))
        for val in grid.cells:
            self.assertEqual(val, Grid.ALL_WALLS)
        for mark in grid.marks:
            self.assertEqual(mark, Mark.UNVISITED)
        self.assertIsNone(grid.col_start)
        self.assertIsNone(grid.col_end)

    def test_invalid_size(self):
        with self.assertRaises(ValueError):
            Grid(0, 5)
        with self.assertRaises(ValueError):
            Grid(5, -1)

    def test_coordinates(self):
        grid = Grid(5, 5)
        self.assertEqual(grid.get_index(1, 1), 0)
        self.assertEqual(grid.get_index(2, 3), 8) # 1 * 6 + 2
        self.assertEqual(grid.get_index(6, 6), 35) # sentinel corner

        with self.assertRaises(IndexError):
            grid.get_index(0, 1)
        with self.assertRaises(IndexError):
            grid.get_index(1, 7)

    def test_clear_right_is_left_of_neighbor(self):
        grid = Grid(3, 3)
        grid.clear_wall(2, 2, Side.RIGHT)

        self.assertFalse(grid.get_wall(2, 2, Side.RIGHT))
        self.assertFalse(grid.get_wall(2, 3, Side.LEFT))
        self.assertFalse(grid.cell(2, 3).left_wall)
        # Others remain
        self.assertTrue(grid.get_wall(2, 2, Side.LEFT))
        self.assertTrue(grid.get_wall(2, 2, Side.TOP))
        self.assertTrue(grid.get_wall(2, 2, Side.BOTTOM))

    def test_clear_bottom_is_top_of_neighbor(self):
        grid = Grid(3, 3)
        grid.clear_wall(1, 2, Side.BOTTOM)

        self.assertFalse(grid.get_wall(1, 2, Side.BOTTOM))
        self.assertFalse(grid.get_wall(2, 2, Side.TOP))
        self.assertTrue(grid.cell(1, 2).top_wall)

    def test_clear_last_row_opens_sentinel(self):
        grid = Grid(3, 3)
        grid.clear_wall(3, 1, Side.BOTTOM)
        self.assertFalse(grid.get_top_wall(4, 1))
        grid.clear_wall(2, 3, Side.RIGHT)
        self.assertFalse(grid.get_wall(2, 4, Side.LEFT))

    def test_sentinels_cannot_be_carved(self):
        grid = Grid(3, 3)
        with self.assertRaises(IndexError):
            grid.clear_wall(4, 1, Side.TOP)
        with self.assertRaises(IndexError):
            grid.clear_wall(1, 4, Side.LEFT)
        with self.assertRaises(IndexError):
            grid.clear_wall(0, 1, Side.BOTTOM)

    def test_wall_queries(self):
        grid = Grid(3, 3)
        # Sentinels can be queried on their stored walls
        self.assertTrue(grid.get_wall(4, 4, Side.TOP))
        self.assertTrue(grid.get_wall(4, 4, Side.LEFT))
        # But redirection past the array is a precondition violation
        with self.assertRaises(IndexError):
            grid.get_wall(1, 4, Side.RIGHT)
        with self.assertRaises(IndexError):
            grid.get_wall(4, 1, Side.BOTTOM)
        # Renderer accessor clamps the last column
        self.assertTrue(grid.get_left_wall(2, 4))

    def test_wall_consistency(self):
        grid = Grid(4, 4)
        grid.clear_wall(1, 1, Side.RIGHT)
        grid.clear_wall(2, 3, Side.BOTTOM)
        grid.clear_wall(3, 3, Side.LEFT)
        for r, c in grid.interior():
            self.assertEqual(grid.get_wall(r, c, Side.RIGHT), grid.get_wall(r, c + 1, Side.LEFT))
            self.assertEqual(grid.get_wall(r, c, Side.BOTTOM), grid.get_wall(r + 1, c, Side.TOP))

    def test_visited_flags(self):
        grid = Grid(3, 3)
        self.assertFalse(grid.is_visited(2, 2))
        grid.set_visited(2, 2)
        self.assertTrue(grid.is_visited(2, 2))
        self.assertTrue(grid.cell(2, 2).visited)
        # Walls untouched by the flag
        self.assertTrue(grid.get_wall(2, 2, Side.TOP))
        grid.set_visited(2, 2, False)
        self.assertFalse(grid.is_visited(2, 2))

    def test_marks(self):
        grid = Grid(3, 3)
        grid.set_mark(1, 2, Mark.probing(Side.RIGHT))
        self.assertEqual(grid.get_mark(1, 2), Mark.PROBE_RIGHT)
        self.assertTrue(grid.get_mark(1, 2).is_probing)
        self.assertFalse(Mark.DEAD_END.is_probing)
        self.assertFalse(Mark.UNVISITED.is_probing)

    def test_open_neighbors(self):
        grid = Grid(3, 3)
        self.assertEqual(list(grid.get_open_neighbors(2, 2)), [])
        grid.clear_wall(2, 2, Side.TOP)
        grid.clear_wall(2, 2, Side.RIGHT)
        self.assertEqual(
            sorted(grid.get_open_neighbors(2, 2)),
            [(1, 2, Side.TOP), (2, 3, Side.RIGHT)]
        )
        # An opening to the outside is not a neighbor
        grid.clear_wall(1, 1, Side.TOP)
        self.assertEqual(list(grid.get_open_neighbors(1, 1)), [])

    def test_interior(self):
        grid = Grid(2, 3)
        cells = list(grid.interior())
        self.assertEqual(len(cells), 6)
        self.assertEqual(cells[0], (1, 1))
        self.assertEqual(cells[-1], (2, 3))

    def test_wall_bitmap(self):
        grid = Grid(2, 2)
        grid.set_visited(1, 1)
        grid.clear_wall(1, 1, Side.RIGHT)
        bitmap = grid.wall_bitmap()
        self.assertEqual(bitmap.shape, (3, 3))
        # Visited flag is masked out
        self.assertEqual(bitmap[0, 0], Grid.ALL_WALLS)
        self.assertEqual(bitmap[0, 1], Grid.TOP_WALL)

if __name__ == '__main__':
    unittest.main()
