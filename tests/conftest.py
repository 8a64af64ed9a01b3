"""Shared fixtures for the Isoghost test suite.

Sets up headless pygame and provides hand-built levels, a recording renderer
and seeded random generators.
"""

import os
import random

# Set SDL dummy drivers before pygame is initialised anywhere.
os.environ["SDL_VIDEODRIVER"] = "dummy"
os.environ["SDL_AUDIODRIVER"] = "dummy"

import pytest

from isoghost.tiles.tile_types import TileType, DecorationType, GhostFrame
from isoghost.level.level import Level
from isoghost.entities.ghost import Ghost
from isoghost.systems.camera import Camera
from isoghost.systems.score import ScoreTracker
from isoghost.core.game_loop import GameState

G = TileType.GRASS
W = TileType.WATER
NONE = DecorationType.NONE

VIEWPORT = (1260, 850)


def uniform_variants(side=10, variant=G):
    return [[variant] * side for _ in range(side)]


def empty_decorations(side=10):
    return [[NONE] * side for _ in range(side)]


@pytest.fixture
def make_level():
    """Factory: make_level(variants=None, decorations=None, side=10) -> Level.

    Defaults to an all-grass board with no decorations.
    """
    def _factory(variants=None, decorations=None, side=10):
        if variants is None:
            variants = uniform_variants(side)
        if decorations is None:
            decorations = empty_decorations(len(variants))
        return Level.from_variants(variants, decorations)
    return _factory


@pytest.fixture
def make_state(make_level):
    """Factory: make_state(level=None, start=(0, 0)) -> GameState."""
    def _factory(level=None, start=(0, 0), viewport=VIEWPORT):
        if level is None:
            level = make_level()
        return GameState(
            level=level,
            ghost=Ghost(GhostFrame.ORANGE, *start),
            camera=Camera(viewport),
            score=ScoreTracker(),
        )
    return _factory


@pytest.fixture
def rng():
    return random.Random(12345)


class RecordingRenderer:
    """Stands in for TileRenderer and records every draw call."""

    def __init__(self):
        self.sprites = []
        self.texts = []
        self.cleared = []

    def clear(self, color):
        self.cleared.append(color)

    def draw_sprite(self, sprite_id, screen_x, screen_y):
        self.sprites.append((sprite_id, screen_x, screen_y))

    def draw_text(self, text, x, y, size, align="topleft"):
        self.texts.append((text, x, y, size, align))


@pytest.fixture
def recording_renderer():
    return RecordingRenderer()
