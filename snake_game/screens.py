import pygame

from .settings import SCREEN_SIZE

CONFIRM = "confirm"
CANCEL = "cancel"


class OptionScreen:
    """A modal screen with a title and two buttons.

    The clicked flags are set by input callbacks and read once per tick by the
    game state, which clears them at the end of that tick whether or not they
    were used.
    """

    def __init__(self, title, button1_text, button2_text, screen_size=SCREEN_SIZE):
        width, height = screen_size
        self.title = title
        self.title_pos = (width / 2, height / 2 - 100)
        self.button1 = pygame.Rect(int(width / 2 - 100), int(height / 2 + 50), int(width / 8), int(height / 10))
        self.button2 = pygame.Rect(int(width / 2 + 100), int(height / 2 + 50), int(width / 8), int(height / 10))
        self.button1_text = button1_text
        self.button2_text = button2_text
        self.button1_clicked = False
        self.button2_clicked = False

    def buttons(self):
        """Return (rect, label) pairs in display order."""
        return [(self.button1, self.button1_text), (self.button2, self.button2_text)]

    def click(self, x, y):
        """Flag every button that contains the pointer position."""
        if self.button1.collidepoint(x, y):
            self.button1_clicked = True
        if self.button2.collidepoint(x, y):
            self.button2_clicked = True

    def press(self, action):
        """Flag a button from the keyboard."""
        if action == CONFIRM:
            self.button1_clicked = True
        elif action == CANCEL:
            self.button2_clicked = True

    def clear(self):
        """Reset both clicked flags."""
        self.button1_clicked = False
        self.button2_clicked = False


def title_screen(screen_size=SCREEN_SIZE):
    return OptionScreen("Snake!", "Start", "Quit", screen_size)


def loss_screen(screen_size=SCREEN_SIZE):
    return OptionScreen("Game Over", "Try Again?", "Quit", screen_size)


def win_screen(screen_size=SCREEN_SIZE):
    return OptionScreen("You Won!", "Restart", "Quit", screen_size)
