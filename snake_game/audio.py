import logging
import math
from array import array

import pygame

from .errors import StartupError
from .modes import Mode
from .settings import GAME_MUSIC_VOLUME, MUSIC_VOLUME, SAMPLE_RATE, SOUND_ENABLED

logger = logging.getLogger(__name__)

# Note frequencies (Hz) used by the synthesized tracks.
C4, D4, E4, F4, G4, A4, B4 = 261.63, 293.66, 329.63, 349.23, 392.0, 440.0, 493.88
C5, E5, G5 = 523.25, 659.25, 783.99
A3, B3, E3 = 220.0, 246.94, 164.81

# name: (notes as (frequency, duration_ms), volume, looping)
TRACKS = {
    "title": ([(C4, 220), (E4, 220), (G4, 220), (B4, 330), (A4, 220), (F4, 220), (D4, 440)], MUSIC_VOLUME, True),
    "game": ([(A3, 120), (A3, 120), (C4, 120), (A3, 120), (E4, 120), (D4, 120), (C4, 120), (B3, 120)], GAME_MUSIC_VOLUME, True),
    "win": ([(C4, 150), (E4, 150), (G4, 150), (C5, 300), (G4, 150), (C5, 150), (E5, 150), (G5, 450)], MUSIC_VOLUME, True),
    "loss": ([(A4, 500), (G4, 500), (F4, 500), (E4, 900), (D4, 500), (C4, 500), (B3, 500), (E3, 1000)], MUSIC_VOLUME, True),
}


def tone_samples(
    frequency_hz,
    duration_ms,
    volume=0.35,
    end_frequency_hz=None,
    attack_ms=8,
    release_ms=60,
):
    """Generate mono 16-bit PCM for a tone/chirp with a soft envelope."""
    sample_count = int(SAMPLE_RATE * (duration_ms / 1000.0))
    if sample_count <= 0:
        sample_count = 1

    amplitude = int(32767 * max(0.0, min(volume, 1.0)))
    attack_samples = int(SAMPLE_RATE * (attack_ms / 1000.0))
    release_samples = int(SAMPLE_RATE * (release_ms / 1000.0))
    release_start = max(0, sample_count - release_samples)
    end_frequency_hz = frequency_hz if end_frequency_hz is None else end_frequency_hz

    pcm = array("h")
    phase = 0.0
    for i in range(sample_count):
        progress = i / max(1, sample_count - 1)
        current_freq = frequency_hz + (end_frequency_hz - frequency_hz) * progress
        phase += (2.0 * math.pi * current_freq) / SAMPLE_RATE

        env = 1.0
        if attack_samples > 0 and i < attack_samples:
            env = i / attack_samples
        if release_samples > 0 and i >= release_start:
            env *= max(0.0, (sample_count - i) / release_samples)

        pcm.append(int(amplitude * env * math.sin(phase)))

    return pcm


def melody_samples(notes, volume=0.3):
    """Concatenate tones into one PCM buffer."""
    pcm = array("h")
    for frequency_hz, duration_ms in notes:
        pcm.extend(tone_samples(frequency_hz, duration_ms, volume, attack_ms=10, release_ms=40))
    return pcm


def create_tone(*args, **kwargs):
    """Build a pygame Sound from a single tone."""
    return pygame.mixer.Sound(buffer=tone_samples(*args, **kwargs).tobytes())


def create_melody(notes, volume=0.3):
    """Build a pygame Sound from a list of (frequency, duration_ms) notes."""
    return pygame.mixer.Sound(buffer=melody_samples(notes, volume).tobytes())


class AudioPlayer:
    """What the game needs from an audio backend."""

    def play(self, track):
        raise NotImplementedError

    def pause(self, track):
        raise NotImplementedError

    def stop(self, track):
        raise NotImplementedError

    def is_playing(self, track):
        raise NotImplementedError

    def set_looping(self, track, looping):
        raise NotImplementedError

    def set_volume(self, track, volume):
        raise NotImplementedError


class PygameAudioPlayer(AudioPlayer):
    """Plays each track on its own mixer channel."""

    def __init__(self, sounds):
        pygame.mixer.set_num_channels(max(8, len(sounds)))
        self.sounds = dict(sounds)
        self.channels = {name: pygame.mixer.Channel(i) for i, name in enumerate(self.sounds)}
        self.looping = {name: False for name in self.sounds}
        self.paused = set()

    def play(self, track):
        channel = self.channels[track]
        if track in self.paused:
            channel.unpause()
            self.paused.discard(track)
        elif not channel.get_busy():
            channel.play(self.sounds[track], loops=-1 if self.looping[track] else 0)

    def pause(self, track):
        if self.is_playing(track):
            self.channels[track].pause()
            self.paused.add(track)

    def stop(self, track):
        self.channels[track].stop()
        self.paused.discard(track)

    def is_playing(self, track):
        return self.channels[track].get_busy() and track not in self.paused

    def set_looping(self, track, looping):
        self.looping[track] = looping

    def set_volume(self, track, volume):
        self.sounds[track].set_volume(volume)


class SilentAudioPlayer(AudioPlayer):
    """Keeps track state without making any sound. One-shot tracks end at once."""

    def __init__(self, tracks=()):
        self.looping = {name: False for name in tracks}
        self.volume = {name: 1.0 for name in tracks}
        self.playing = set()

    def play(self, track):
        if self.looping.get(track, False):
            self.playing.add(track)

    def pause(self, track):
        self.playing.discard(track)

    def stop(self, track):
        self.playing.discard(track)

    def is_playing(self, track):
        return track in self.playing

    def set_looping(self, track, looping):
        self.looping[track] = looping

    def set_volume(self, track, volume):
        self.volume[track] = volume


# Tracks each mode owns; they start on entering the mode and stop on leaving it.
MODE_TRACKS = {
    Mode.TITLE: ("title",),
    Mode.PLAYING: ("game",),
    Mode.WON: ("win",),
    Mode.LOST: ("death", "loss"),
}

# Stopped, not paused, when their mode ends: every trigger plays from the start.
ONE_SHOT_TRACKS = ("death", "eat")


class ModeAudio:
    """Starts and stops the music owned by each game mode."""

    def __init__(self, player):
        self.player = player
        self.loss_pending = False

    def enter(self, mode):
        if mode is Mode.LOST:
            # The death sting plays first; tick() starts the loss music after it.
            self.player.play("death")
            self.loss_pending = True
        elif mode in (Mode.TITLE, Mode.PLAYING, Mode.WON):
            for track in MODE_TRACKS[mode]:
                self.player.play(track)
        else:
            raise ValueError(f"Unknown mode: {mode!r}")

    def exit(self, mode):
        self.loss_pending = False
        for track in MODE_TRACKS[mode]:
            if track in ONE_SHOT_TRACKS:
                self.player.stop(track)
            else:
                self.player.pause(track)

    def tick(self):
        if self.loss_pending and not self.player.is_playing("death"):
            self.player.play("loss")
            self.loss_pending = False

    def effect(self, track):
        self.player.play(track)


def configure_tracks(player):
    """Apply the looping and volume settings of every track."""
    for name, (_notes, volume, looping) in TRACKS.items():
        player.set_looping(name, looping)
        player.set_volume(name, volume)
    for name in ONE_SHOT_TRACKS:
        player.set_looping(name, False)
    return player


def build_audio(sound_enabled=SOUND_ENABLED):
    """Create the audio player, or a silent one when sound is switched off."""
    names = list(TRACKS) + list(ONE_SHOT_TRACKS)
    if not sound_enabled:
        logger.info("Sound disabled; using silent audio")
        return configure_tracks(SilentAudioPlayer(names))

    try:
        if pygame.mixer.get_init() is None:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1, buffer=512)
        sounds = {name: create_melody(notes) for name, (notes, _volume, _looping) in TRACKS.items()}
        # Descending whoosh when the snake bites itself.
        sounds["death"] = create_tone(420, 900, 0.3, end_frequency_hz=110, attack_ms=16, release_ms=300)
        # Soft pop/chomp on food.
        sounds["eat"] = create_tone(720, 95, 0.26, end_frequency_hz=520, attack_ms=6, release_ms=70)
    except pygame.error as exc:
        raise StartupError(f"Could not set up audio: {exc}") from exc

    return configure_tracks(PygameAudioPlayer(sounds))
