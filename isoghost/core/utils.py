import logging
import pygame
from typing import Tuple

from config import FONT_PATH, TILE_WIDTH, TILE_HEIGHT, DX, DY

logger = logging.getLogger(__name__)

# Distance between neighbouring tile centres, in world units
STEP_X = TILE_WIDTH + DX
STEP_Y = TILE_HEIGHT + DY


def iso_project(x: int, y: int) -> Tuple[float, float]:
    """Project a grid cell to its world position (tile centre).

    Grid x runs down-right on screen, grid y runs down-left.
    """
    return ((x - y) * STEP_X / 2, (x + y) * STEP_Y / 2)


# Lazy font getter to avoid init-order issues
_fonts = {}


def get_font(size=18):
    if size not in _fonts:
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            _fonts[size] = pygame.font.Font(FONT_PATH, size)
        except (pygame.error, FileNotFoundError, OSError):
            if not _fonts:
                logger.warning("Failed to load font %s, using system font", FONT_PATH)
            _fonts[size] = pygame.font.SysFont("georgia", size)
    return _fonts[size]


def sign(x):
    return (x > 0) - (x < 0)
