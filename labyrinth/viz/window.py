import pygame
from labyrinth.core.grid import Grid, Mark

class MazeWindow:
    COLOR_BG = (10, 10, 10)
    COLOR_WALL = (200, 200, 200)
    COLOR_SOLUTION = (255, 215, 0)# Gold

    def __init__(self, grid: Grid, cell_size: int = 20, padding: int = 20):
        self.grid = grid
        self.cell_size = cell_size
        self.padding = padding
        self.screen_width = grid.cols * cell_size + padding * 2
        self.screen_height = grid.rows * cell_size + padding * 2

        self.running = True
        self.clock = None
        self.surface = None

    def cell_origin(self, row: int, col: int):
        """Top-left pixel of cell (row, col), rows and cols are 1-based."""
        return (self.padding + (col - 1) * self.cell_size,
                self.padding + (row - 1) * self.cell_size)

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Labyrinth - {self.grid.rows}x{self.grid.cols}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height))
        self.clock = pygame.time.Clock()

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
                self.running = False

    def draw(self, surface):
        surface.fill(self.COLOR_BG)
        size = self.cell_size

        # 1. Solution cells (Pass 1 - Backgrounds)
        for row, col in self.grid.interior():
            if self.grid.get_mark(row, col) == Mark.ON_PATH:
                px, py = self.cell_origin(row, col)
                pygame.draw.rect(surface, self.COLOR_SOLUTION, (px, py, size, size))

        # 2. Walls (Pass 2 - Foreground)
        # Sentinel row/column supply the bottom and right border
        for row in range(1, self.grid.rows + 2):
            for col in range(1, self.grid.cols + 2):
                px, py = self.cell_origin(row, col)
                if col <= self.grid.cols and self.grid.get_top_wall(row, col):
                    pygame.draw.line(surface, self.COLOR_WALL, (px, py), (px + size, py), 1)
                if row <= self.grid.rows and self.grid.get_left_wall(row, col):
                    pygame.draw.line(surface, self.COLOR_WALL, (px, py), (px, py + size), 1)

    def run_loop(self):
        while self.running:
            self.handle_input()
            self.draw(self.surface)
            pygame.display.flip()
            self.clock.tick(30)

        pygame.quit()
