import logging
import random

import pygame

from .audio import ModeAudio, SilentAudioPlayer
from .direction import Direction, directions_for
from .grid import GridPosition
from .modes import Mode
from .screens import CANCEL, CONFIRM, loss_screen, title_screen, win_screen
from .settings import GRID_CELL_SIZE, GRID_SIZE, grid_capacity
from .snake import Ate, Food, Snake

logger = logging.getLogger(__name__)

CONFIRM_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)
CANCEL_KEYS = (pygame.K_ESCAPE,)


class GameState:
    """Owns the snake, the food and the current mode, and advances them one tick at a time.

    Input callbacks only set the snake's direction or a screen's clicked flags.
    Everything else, mode changes included, happens in update().
    """

    def __init__(self, grid=GRID_SIZE, rng=None, audio=None, seed=None):
        self.grid = grid
        self.rng = rng if rng is not None else random.Random(seed)
        screen_size = (grid.width * GRID_CELL_SIZE[0], grid.height * GRID_CELL_SIZE[1])
        self.title_screen = title_screen(screen_size)
        self.loss_screen = loss_screen(screen_size)
        self.win_screen = win_screen(screen_size)
        self.audio = ModeAudio(audio if audio is not None else SilentAudioPlayer())
        self.quit_requested = False

        self.snake, self.food = self._new_round()
        self.mode = Mode.TITLE
        self.audio.enter(self.mode)

    def _new_round(self):
        snake_pos = GridPosition.random(self.rng, self.grid.width, self.grid.height)
        # A one-cell-wide axis would wrap the starting segment onto the head.
        direction = Direction.random(self.rng, directions_for(self.grid))
        snake = Snake(snake_pos, direction, self.grid)
        food = Food(snake.food_space(self.rng))
        return snake, food

    def _set_mode(self, mode):
        if mode is self.mode:
            return
        logger.info("Mode %s -> %s", self.mode.name, mode.name)
        self.audio.exit(self.mode)
        self.mode = mode
        self.audio.enter(mode)

    def reset(self):
        """Start a fresh round: new snake, new food, mode PLAYING."""
        self.snake, self.food = self._new_round()
        self._set_mode(Mode.PLAYING)

    def active_screen(self):
        """Return the option screen shown in the current mode, or None while playing."""
        if self.mode is Mode.TITLE:
            return self.title_screen
        elif self.mode is Mode.WON:
            return self.win_screen
        elif self.mode is Mode.LOST:
            return self.loss_screen
        elif self.mode is Mode.PLAYING:
            return None
        raise ValueError(f"Unknown mode: {self.mode!r}")

    def update(self):
        """Run one tick."""
        if self.mode is Mode.PLAYING:
            self._update_gameplay()
        elif self.mode in (Mode.TITLE, Mode.WON, Mode.LOST):
            self._update_screen(self.active_screen())
        else:
            raise ValueError(f"Unknown mode: {self.mode!r}")
        self.audio.tick()

    def _update_screen(self, screen):
        if screen.button1_clicked:
            self.reset()
        elif screen.button2_clicked:
            logger.info("Quit requested from %s screen", self.mode.name)
            self.quit_requested = True
        screen.clear()

    def _update_gameplay(self):
        snake = self.snake
        snake.update(self.food)

        if snake.ate is Ate.FOOD:
            self.audio.effect("eat")
            logger.debug("Ate food at %s, length %d", self.food.pos, snake.num_segments)
            # Check for the win before looking for space: a full board has none.
            if snake.num_segments >= grid_capacity(self.grid):
                logger.info("Board filled, snake wins")
                self._set_mode(Mode.WON)
            else:
                self.food.pos = snake.food_space(self.rng)
        elif snake.ate is Ate.ITSELF:
            logger.info("Snake ran into itself at %s", snake.head)
            self._set_mode(Mode.LOST)

    def key_down(self, key):
        """Turn the snake while playing, or flag a button on the option screens."""
        if self.mode is Mode.PLAYING:
            direction = Direction.from_key(key)
            if direction is not None:
                self.snake.change_direction(direction)
        elif self.mode in (Mode.TITLE, Mode.WON, Mode.LOST):
            if key in CONFIRM_KEYS:
                self.active_screen().press(CONFIRM)
            elif key in CANCEL_KEYS:
                self.active_screen().press(CANCEL)
        else:
            raise ValueError(f"Unknown mode: {self.mode!r}")

    def mouse_down(self, button, x, y):
        """Hit-test a left click against the active option screen."""
        if button != pygame.BUTTON_LEFT:
            return
        if self.mode in (Mode.TITLE, Mode.WON, Mode.LOST):
            self.active_screen().click(x, y)
        elif self.mode is Mode.PLAYING:
            return
        else:
            raise ValueError(f"Unknown mode: {self.mode!r}")
