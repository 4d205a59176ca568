from collections import namedtuple

import pygame

from .settings import GRID_CELL_SIZE, GRID_SIZE


class GridPosition(namedtuple("GridPosition", ["x", "y"])):
    """A cell on the toroidal board."""

    __slots__ = ()

    @classmethod
    def random(cls, rng, max_x, max_y):
        """Return a uniformly random cell in [0, max_x) x [0, max_y)."""
        return cls(rng.randrange(max_x), rng.randrange(max_y))

    @classmethod
    def from_move(cls, pos, direction, grid=GRID_SIZE):
        """Return the cell one step away from pos, wrapping at every edge."""
        dx, dy = direction.value
        # Python's % already gives a non-negative remainder for a positive modulus.
        return cls((pos.x + dx) % grid.width, (pos.y + dy) % grid.height)

    def to_rect(self, cell_size=GRID_CELL_SIZE):
        """Return the pixel rectangle covered by this cell."""
        cell_w, cell_h = cell_size
        return pygame.Rect(self.x * cell_w, self.y * cell_h, cell_w, cell_h)


def all_cells(grid=GRID_SIZE):
    """Yield every cell of the grid, column by column."""
    for x in range(grid.width):
        for y in range(grid.height):
            yield GridPosition(x, y)
