from enum import Enum


class Mode(Enum):
    TITLE = "title"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"
