class SnakeGameError(Exception):
    """Base class for errors raised by the game."""


class StartupError(SnakeGameError):
    """The window, mixer or a track could not be set up."""
