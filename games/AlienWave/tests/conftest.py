"""Shared fixtures for Alien Waves tests."""

import os

# Headless pygame for the engine and input source tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pygame
import pytest

from models import Resolution, TargetConfig, WaveConfig


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> float:
        self.now += ms
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def rng():
    """Seeded random source so spawns are reproducible."""
    return random.Random(1234)


@pytest.fixture
def playfield():
    return Resolution(width=800, height=600)


@pytest.fixture
def target_config():
    return TargetConfig()


@pytest.fixture
def short_waves():
    """Two one-target waves with a one second countdown."""
    return WaveConfig(
        total_waves=2,
        base_size=1,
        increment=1,
        max_budget_ms=1000,
        min_budget_ms=1000,
    )


@pytest.fixture
def pygame_init():
    """Initialize pygame with a small display for rendering tests."""
    pygame.init()
    screen = pygame.display.set_mode((800, 600))
    yield screen
    pygame.quit()
