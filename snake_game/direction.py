from enum import Enum

import pygame


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def inverse(self):
        """Return the opposite direction."""
        return _INVERSES[self]

    @staticmethod
    def from_key(key):
        """Map an arrow key code to a direction, or None for any other key."""
        return _KEY_TO_DIRECTION.get(key)

    @staticmethod
    def random(rng, choices=None):
        """Pick one of the four directions (or of choices) uniformly."""
        options = _ORDER if choices is None else tuple(choices)
        return options[rng.randrange(len(options))]


_ORDER = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


def directions_for(grid):
    """Return the directions along which a step on this grid reaches another cell."""
    return [d for d in _ORDER if (grid.width > 1 if d.value[0] else grid.height > 1)]


_INVERSES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_KEY_TO_DIRECTION = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}
