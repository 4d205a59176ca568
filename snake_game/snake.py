import logging
from collections import deque
from enum import Enum

from .grid import GridPosition, all_cells
from .settings import GRID_SIZE

logger = logging.getLogger(__name__)


class Ate(Enum):
    FOOD = "food"
    ITSELF = "itself"


class Food:
    """The single food pellet on the board."""

    def __init__(self, pos):
        self.pos = pos


class Snake:
    """Grid-based snake: a head cell plus a body deque with the newest cell in front."""

    def __init__(self, pos, direction, grid=GRID_SIZE):
        if not (0 <= pos.x < grid.width and 0 <= pos.y < grid.height):
            raise ValueError(f"Snake head {pos} lies outside a {grid.width}x{grid.height} grid.")
        if grid.width * grid.height < 2:
            raise ValueError("The grid must hold at least two cells.")

        self.grid = grid
        self.head = GridPosition(*pos)
        # The starting segment sits one step along `direction`, so the snake
        # travels away from it.
        tail = GridPosition.from_move(self.head, direction, grid)
        if tail == self.head:
            raise ValueError(f"Cannot lay out a snake along {direction.name} on a {grid.width}x{grid.height} grid.")
        self.body = deque([tail])
        self.dir = direction.inverse()
        self.last_update_dir = self.dir
        self.next_dir = None
        self.ate = None
        self.num_segments = len(self.body) + 1

    def cells(self):
        """Return every occupied cell, head first."""
        return [self.head, *self.body]

    def occupies(self, pos):
        """Check whether the head or any body segment is on pos."""
        return pos == self.head or pos in self.body

    def eats(self, food):
        """Check whether the head is on the food."""
        return self.head == food.pos

    def eats_self(self):
        """Check whether the head has run into the body."""
        return self.head in self.body

    def change_direction(self, direction):
        """Apply a key press right away, buffering it if a turn is already pending."""
        if self.dir != self.last_update_dir and direction.inverse() != self.dir:
            self.next_dir = direction
        elif direction.inverse() != self.last_update_dir:
            self.dir = direction
        else:
            logger.debug("Ignoring %s: it would reverse into the body", direction.name)

    def update(self, food):
        """Advance one tick and record what, if anything, the head ran into."""
        # Only take the buffered turn once the previous one has actually moved us.
        if self.last_update_dir == self.dir and self.next_dir is not None:
            self.dir = self.next_dir
            self.next_dir = None

        new_head = GridPosition.from_move(self.head, self.dir, self.grid)

        self.body.appendleft(self.head)
        self.head = new_head

        if self.eats_self():
            self.ate = Ate.ITSELF
        elif self.eats(food):
            self.ate = Ate.FOOD
            self.num_segments += 1
        else:
            self.ate = None

        # Nothing eaten: drop the tail so the snake moves instead of growing.
        if self.ate is None:
            self.body.pop()

        self.last_update_dir = self.dir

    def food_space(self, rng):
        """Return a uniformly random free cell, or None when the board is full."""
        occupied = set(self.cells())
        free = [pos for pos in all_cells(self.grid) if pos not in occupied]
        if not free:
            logger.info("No free cell left for food")
            return None
        return free[rng.randrange(len(free))]
