import pygame

from .modes import Mode
from .settings import (
    BODY_COLOR,
    BUTTON_COLOR,
    BUTTON_TEXT,
    FONT_SIZE,
    FOOD_COLOR,
    GAMEPLAY_BG,
    GRID_CELL_SIZE,
    HEAD_COLOR,
    LOSS_BG,
    TITLE_BG,
    WHITE,
    WIN_BG,
)

SCREEN_BACKGROUNDS = {
    Mode.TITLE: TITLE_BG,
    Mode.WON: WIN_BG,
    Mode.LOST: LOSS_BG,
}


class Renderer:
    """Draw commands issued by the game for one frame."""

    def clear(self, color):
        raise NotImplementedError

    def fill_rect(self, rect, color):
        raise NotImplementedError

    def text(self, string, point, color, center=False):
        raise NotImplementedError

    def present(self):
        raise NotImplementedError


def get_ui_font(size):
    """Load a preferred UI font, then fall back safely to pygame default."""
    preferred = ["Bahnschrift", "Segoe UI", "DejaVu Sans", "Arial"]
    for name in preferred:
        path = pygame.font.match_font(name)
        if path:
            return pygame.font.Font(path, size)
    return pygame.font.Font(None, size)


class PygameRenderer(Renderer):
    def __init__(self, surface, font=None):
        self.surface = surface
        self.font = font if font is not None else get_ui_font(FONT_SIZE)

    def clear(self, color):
        self.surface.fill(color)

    def fill_rect(self, rect, color):
        pygame.draw.rect(self.surface, color, rect)

    def text(self, string, point, color, center=False):
        label = self.font.render(string, True, color)
        if center:
            self.surface.blit(label, label.get_rect(center=point))
        else:
            self.surface.blit(label, point)

    def present(self):
        pygame.display.flip()


def draw_gameplay(state, renderer, cell_size=GRID_CELL_SIZE):
    """Draw the board: background, body, head, food and a length readout."""
    snake = state.snake
    renderer.clear(GAMEPLAY_BG)
    for seg in snake.body:
        renderer.fill_rect(seg.to_rect(cell_size), BODY_COLOR)
    renderer.fill_rect(snake.head.to_rect(cell_size), HEAD_COLOR)
    if state.food.pos is not None:
        renderer.fill_rect(state.food.pos.to_rect(cell_size), FOOD_COLOR)
    renderer.text(f"Length: {snake.num_segments}", (8, 4), WHITE)


def draw_option_screen(screen, background, renderer):
    """Draw a title and two labelled buttons on a solid background."""
    renderer.clear(background)
    renderer.text(screen.title, screen.title_pos, WHITE, center=True)
    for rect, label in screen.buttons():
        renderer.fill_rect(rect, BUTTON_COLOR)
        renderer.text(label, rect.center, BUTTON_TEXT, center=True)


def draw(state, renderer):
    """Draw the scene for the current mode. Never changes the game state."""
    if state.mode is Mode.PLAYING:
        draw_gameplay(state, renderer)
    elif state.mode in (Mode.TITLE, Mode.WON, Mode.LOST):
        draw_option_screen(state.active_screen(), SCREEN_BACKGROUNDS[state.mode], renderer)
    else:
        raise ValueError(f"Unknown mode: {state.mode!r}")
    renderer.present()
