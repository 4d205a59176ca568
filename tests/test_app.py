"""Tests for the tick scheduler and the main loop wiring."""

import pygame
import pytest

from snake_game import app
from snake_game.app import TickScheduler, handle_events, run
from snake_game.errors import StartupError
from snake_game.modes import Mode
from snake_game.state import GameState


class FakeClock:
    def __init__(self, times):
        self.times = list(times)
        self.current = self.times.pop(0)

    def __call__(self):
        return self.current

    def advance(self):
        self.current = self.times.pop(0)


class TestTickScheduler:
    def test_no_tick_before_period(self):
        clock = FakeClock([0, 50])
        scheduler = TickScheduler(10, now=clock)
        clock.advance()
        assert scheduler.check_update_time() is False

    def test_one_tick_per_period(self):
        clock = FakeClock([0, 100])
        scheduler = TickScheduler(10, now=clock)
        clock.advance()
        assert scheduler.check_update_time() is True
        assert scheduler.check_update_time() is False

    def test_catches_up_after_slow_frame(self):
        clock = FakeClock([0, 350])
        scheduler = TickScheduler(10, now=clock)
        clock.advance()
        ticks = 0
        while scheduler.check_update_time():
            ticks += 1
        assert ticks == 3
        assert scheduler.accumulator == pytest.approx(50)


class TestHandleEvents:
    def test_routes_keys_and_clicks(self, rng, monkeypatch):
        state = GameState(rng=rng)
        events = [
            pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN),
            pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=pygame.BUTTON_LEFT, pos=state.title_screen.button2.center),
        ]
        monkeypatch.setattr(app.pygame.event, "get", lambda: events)
        assert handle_events(state) is True
        assert state.title_screen.button1_clicked
        assert state.title_screen.button2_clicked

    def test_window_close_stops(self, rng, monkeypatch):
        state = GameState(rng=rng)
        monkeypatch.setattr(app.pygame.event, "get", lambda: [pygame.event.Event(pygame.QUIT)])
        assert handle_events(state) is False


class TestRun:
    def test_escape_on_title_ends_loop(self, rng, renderer, monkeypatch):
        state = GameState(rng=rng)
        batches = [[pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)]]
        monkeypatch.setattr(app.pygame.event, "get", lambda: batches.pop(0) if batches else [])

        class OneTick:
            ticks = 1

            def check_update_time(self):
                self.ticks -= 1
                return self.ticks >= 0

        class Clock:
            frames = 0

            def tick(self, rate):
                self.frames += 1

        clock = Clock()
        run(state, renderer, OneTick(), clock)

        assert state.quit_requested is True
        assert clock.frames == 1
        assert renderer.commands[-1] == ("present",)

    def test_start_then_play_a_few_ticks(self, rng, renderer, monkeypatch):
        state = GameState(rng=rng)
        batches = [[pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN)], [], []]
        monkeypatch.setattr(app.pygame.event, "get", lambda: batches.pop(0) if batches else [pygame.event.Event(pygame.QUIT)])

        class EveryFrame:
            def check_update_time(self):
                self.due = not getattr(self, "due", False)
                return self.due

        class Clock:
            def tick(self, rate):
                pass

        run(state, renderer, EveryFrame(), Clock())
        assert state.mode in (Mode.PLAYING, Mode.WON, Mode.LOST)
        assert state.quit_requested is False


class TestMain:
    def test_startup_failure_exits_with_status_1(self, monkeypatch):
        def broken_window():
            raise StartupError("no display")

        monkeypatch.setattr(app, "create_window", broken_window)
        with pytest.raises(SystemExit) as excinfo:
            app.main()
        assert excinfo.value.code == 1

    def test_window_error_is_wrapped(self, monkeypatch):
        def broken_set_mode(size):
            raise pygame.error("video system not initialized")

        monkeypatch.setattr(app.pygame.display, "set_mode", broken_set_mode)
        with pytest.raises(StartupError):
            app.create_window()
        pygame.quit()
