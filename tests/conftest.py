import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pytest

from snake_game.audio import SilentAudioPlayer
from snake_game.settings import GridSize


class RecordingAudio(SilentAudioPlayer):
    """Silent player that remembers every play/pause call."""

    def __init__(self, tracks=()):
        super().__init__(tracks)
        self.calls = []

    def play(self, track):
        self.calls.append(("play", track))
        super().play(track)

    def pause(self, track):
        self.calls.append(("pause", track))
        super().pause(track)

    def stop(self, track):
        self.calls.append(("stop", track))
        super().stop(track)


class RecordingRenderer:
    def __init__(self):
        self.commands = []

    def clear(self, color):
        self.commands.append(("clear", color))

    def fill_rect(self, rect, color):
        self.commands.append(("rect", tuple(rect), color))

    def text(self, string, point, color, center=False):
        self.commands.append(("text", string, tuple(point), color))

    def present(self):
        self.commands.append(("present",))


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def audio():
    player = RecordingAudio(["title", "game", "win", "loss", "death", "eat"])
    for track in ("title", "game", "win", "loss"):
        player.set_looping(track, True)
    return player


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def small_grid():
    return GridSize(5, 4)
