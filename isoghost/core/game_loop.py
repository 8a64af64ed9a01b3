"""
Per-frame game logic.

`tick(state, commands, viewport)` applies queued input and advances the
camera; `render(state, renderer)` draws the result. Keeping the two apart lets
the whole update run without a display.

Guidelines:
- All mutable game data lives on `GameState`; there are no module globals.
- Input is applied in full before anything else looks at the state.
- `render` only reads the state.
"""
import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from config import GHOST_START, SIDE_LENGTH, DX, DY, FONT_SIZE
from ..tiles.tile_types import Direction, DecorationType
from ..level.level import Level
from ..level.level_generator import generate_level
from ..level.config_loader import RuntimeConfig
from ..entities.ghost import Ghost
from ..systems.camera import Camera
from ..systems.score import ScoreTracker
from ..ui.hud import draw_hud
from .utils import iso_project

logger = logging.getLogger(__name__)

# Banner position relative to the ghost's tile, in world units
BANNER_OFFSET = (DX / 2, DY / 2 - 100)


@dataclass
class GameState:
    level: Level
    ghost: Ghost
    camera: Camera
    score: ScoreTracker = field(default_factory=ScoreTracker)
    won: bool = False
    # Nothing ends the game in a loss yet; kept so a loss rule has somewhere to go
    lost: bool = False
    frame: int = 0

    @property
    def is_over(self) -> bool:
        return self.won or self.lost


def new_game(runtime: RuntimeConfig, viewport: Tuple[int, int],
             side_length: int = SIDE_LENGTH) -> GameState:
    """Generate a level and place the ghost on its start tile."""
    rng = runtime.make_rng()
    level = generate_level(side_length, rng=rng, start=GHOST_START)
    ghost = Ghost(runtime.ghost_frame, *GHOST_START)
    state = GameState(level=level, ghost=ghost, camera=Camera(viewport))
    state.won = evaluate_won(level)
    logger.info("New game (seed_mode=%s, seed=%s)", runtime.seed_mode, runtime.seed)
    return state


def evaluate_won(level: Level) -> bool:
    """Won once no valued decoration is left on the board."""
    return level.valued_decoration_count() == 0


def apply_command(state: GameState, direction: Direction) -> bool:
    """Try to move the ghost. Ignored once the game is over."""
    if state.is_over:
        return False
    moved = state.ghost.try_move(direction, state.level, state.score)
    if moved:
        logger.debug("Ghost moved %s to %s", direction.name, state.ghost.position)
    return moved


def tick(state: GameState, commands: Iterable[Direction], viewport: Tuple[int, int]) -> GameState:
    """Advance the game by one frame and return the state."""
    state.ghost.settle()
    for direction in commands:
        apply_command(state, direction)

    was_won = state.won
    state.won = evaluate_won(state.level)
    if state.won and not was_won:
        logger.info("Won with %d points after %d frames", state.score.total(), state.frame)

    state.camera.update(iso_project(*state.ghost.position), viewport)
    state.frame += 1
    return state


def render(state: GameState, renderer, background: Optional[Tuple[int, int, int]] = None) -> None:
    """Draw the level back to front, then the HUD."""
    if background is not None:
        renderer.clear(background)

    camera = state.camera
    for (x, y), tile in state.level.cells():
        wx, wy = iso_project(x, y)
        sx, sy = camera.to_screen((wx, wy))
        renderer.draw_sprite(tile.variant, sx, sy)
        if tile.decoration != DecorationType.NONE:
            renderer.draw_sprite(tile.decoration, sx, sy)

        if (x, y) == state.ghost.position:
            renderer.draw_sprite(state.ghost.frame, sx, sy)
            if state.is_over:
                bx, by = camera.to_screen((wx + BANNER_OFFSET[0], wy + BANNER_OFFSET[1]))
                renderer.draw_text("Lost!" if state.lost else "Won!", bx, by, FONT_SIZE, align="center")

    draw_hud(state.score.total(), renderer)
