import logging
from enum import Enum, auto

from ..tiles.tile_types import Direction, GhostFrame
from ..level.level import Level, Position
from ..systems.score import ScoreTracker

logger = logging.getLogger(__name__)


class GhostState(Enum):
    IDLE = auto()
    MOVED = auto()  # position changed this tick


class Ghost:
    """The player token. Moves one tile at a time onto walkable tiles."""

    def __init__(self, frame: GhostFrame = GhostFrame.ORANGE, x: int = 0, y: int = 0):
        self.frame = frame
        self.position: Position = (x, y)
        self.state = GhostState.IDLE

    def try_move(self, direction: Direction, level: Level, score: ScoreTracker) -> bool:
        """Step one tile in `direction` if the target is in bounds and walkable.

        A blocked move changes nothing. A successful one collects the valued
        decoration on the destination tile, if any.
        """
        target = direction.step(self.position)
        if not level.can_go_to(target):
            return False

        self.position = target
        self.state = GhostState.MOVED
        self.collect(level, score)
        return True

    def collect(self, level: Level, score: ScoreTracker) -> int:
        """Pick up the decoration under the ghost. Returns the points gained."""
        tile = level.tile_at(self.position)
        if tile.decoration_value <= 0:
            return 0
        decoration = tile.decoration
        value = tile.clear_decoration()
        score.credit(value)
        logger.debug("Collected %s at %s for %d points", decoration.name, self.position, value)
        return value

    def settle(self) -> None:
        """End of tick: back to idle."""
        self.state = GhostState.IDLE
