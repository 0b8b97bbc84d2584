"""Shared fixtures for the jumprun test suite."""

import random

import pytest

from jumprun.config.settings import GameSettings
from jumprun.core.driver import Driver, FrameCallbackScheduler
from jumprun.core.events import EventBus
from jumprun.game.session import GameSession
from jumprun.hardware.base import Renderer


class RecordingRenderer(Renderer):
    """Renderer fake that records every call in order."""

    def __init__(self):
        self.calls = []
        self.scores = []
        self.end_screen_visible = False

    def clear(self):
        self.calls.append("clear")

    def draw_ground(self):
        self.calls.append("ground")

    def draw_actor(self, actor):
        self.calls.append("actor")

    def draw_obstacle(self, obstacle):
        self.calls.append("obstacle")

    def draw_score(self, score):
        self.calls.append("score")
        self.scores.append(score)

    def show_end_screen(self):
        self.calls.append("show_end")
        self.end_screen_visible = True

    def hide_end_screen(self):
        self.calls.append("hide_end")
        self.end_screen_visible = False


@pytest.fixture
def settings():
    return GameSettings(seed=1234)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def session(settings, rng):
    return GameSession.create(settings, rng)


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def scheduler():
    return FrameCallbackScheduler()


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def driver(renderer, scheduler, settings, rng, event_bus):
    d = Driver(
        renderer=renderer,
        scheduler=scheduler,
        settings=settings,
        rng=rng,
        event_bus=event_bus,
    )
    yield d
    d.close()
