import logging
import sys

import pygame

from .audio import build_audio
from .errors import StartupError
from .render import PygameRenderer, draw
from .settings import (
    DESIRED_FPS,
    LOG_LEVEL,
    MAX_FRAME_RATE,
    SAMPLE_RATE,
    SCREEN_SIZE,
    SOUND_ENABLED,
    WINDOW_TITLE,
)
from .state import GameState

logger = logging.getLogger(__name__)


class TickScheduler:
    """Fixed-rate update timer, decoupled from the frame rate.

    check_update_time() returns True once for every whole tick period that has
    elapsed, so a caller looping on it catches up after a slow frame.
    """

    def __init__(self, rate, now=pygame.time.get_ticks):
        self.period_ms = 1000.0 / rate
        self.now = now
        self.last_ms = now()
        self.accumulator = 0.0

    def check_update_time(self):
        current = self.now()
        self.accumulator += current - self.last_ms
        self.last_ms = current
        if self.accumulator >= self.period_ms:
            self.accumulator -= self.period_ms
            return True
        return False


def create_window():
    """Initialise pygame and open the game window."""
    try:
        pygame.mixer.pre_init(SAMPLE_RATE, -16, 1, 512)
        pygame.init()
        pygame.display.set_caption(WINDOW_TITLE)
        return pygame.display.set_mode(SCREEN_SIZE)
    except pygame.error as exc:
        raise StartupError(f"Could not create the game window: {exc}") from exc


def handle_events(state):
    """Feed pending input to the game. Returns False once the window is closed."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            state.key_down(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            state.mouse_down(event.button, *event.pos)
    return True


def run(state, renderer, scheduler, clock):
    while not state.quit_requested:
        if not handle_events(state):
            break

        while scheduler.check_update_time():
            state.update()
            if state.quit_requested:
                break

        draw(state, renderer)
        clock.tick(MAX_FRAME_RATE)


def main():
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        window = create_window()
        audio = build_audio(SOUND_ENABLED)
    except StartupError as exc:
        logger.error("Startup failed: %s", exc)
        pygame.quit()
        sys.exit(1)

    state = GameState(audio=audio)
    try:
        run(state, PygameRenderer(window), TickScheduler(DESIRED_FPS), pygame.time.Clock())
    finally:
        pygame.quit()
    sys.exit(0)


if __name__ == "__main__":
    main()
