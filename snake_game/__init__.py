"""Grid Snake with a title screen, win and loss screens, built on pygame."""

from .direction import Direction
from .grid import GridPosition
from .modes import Mode
from .snake import Ate, Food, Snake
from .state import GameState

__all__ = ["Ate", "Direction", "Food", "GameState", "GridPosition", "Mode", "Snake"]
