import os
from collections import namedtuple

GridSize = namedtuple("GridSize", ["width", "height"])

# Board configuration
GRID_SIZE = GridSize(30, 20)
GRID_CELL_SIZE = (32, 32)
SCREEN_SIZE = (
    GRID_SIZE.width * GRID_CELL_SIZE[0],
    GRID_SIZE.height * GRID_CELL_SIZE[1],
)
DESIRED_FPS = 10
MAX_FRAME_RATE = 60
WINDOW_TITLE = "Snake!"

# Colors (R, G, B)
GAMEPLAY_BG = (0, 255, 0)
BODY_COLOR = (77, 77, 0)
HEAD_COLOR = (255, 128, 0)
FOOD_COLOR = (0, 0, 255)
TITLE_BG = (0, 0, 0)
WIN_BG = (0, 0, 255)
LOSS_BG = (255, 0, 0)
BUTTON_COLOR = (255, 255, 255)
BUTTON_TEXT = (0, 0, 0)
WHITE = (255, 255, 255)
FONT_SIZE = 28

# Audio
SOUND_ENABLED = True
SAMPLE_RATE = 44100
MUSIC_VOLUME = 1.0
GAME_MUSIC_VOLUME = 0.3

LOG_LEVEL = os.environ.get("SNAKE_LOG_LEVEL", "WARNING").upper()


def grid_capacity(grid):
    """Return the number of cells on a grid."""
    return grid.width * grid.height
