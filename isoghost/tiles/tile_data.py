from dataclasses import dataclass, field
from typing import FrozenSet, Tuple
from .tile_types import TileType, DecorationType, DecorationClass, Direction


@dataclass(frozen=True)
class SpriteRect:
    """Location of a frame on the sprite sheet."""
    x: int
    y: int
    w: int
    h: int
    # Offset from the tile anchor to the sprite centre, in world units
    offset: Tuple[int, int] = (0, 0)

    @property
    def size(self) -> Tuple[int, int]:
        return (self.w, self.h)


@dataclass(frozen=True)
class TileData:
    """Static descriptor for a terrain variant."""
    tile_type: TileType
    name: str
    sprite: SpriteRect
    accepts_ghost: bool = True
    bridge_directions: FrozenSet[Direction] = field(default_factory=frozenset)
    decoration_class: DecorationClass = DecorationClass.NONE
    placeholder: str = "grass"  # key into PLACEHOLDER_COLORS

    @property
    def is_walkable(self) -> bool:
        """Check if the ghost can stand on the tile."""
        return self.accepts_ghost

    @property
    def is_bridge(self) -> bool:
        return bool(self.bridge_directions)

    @property
    def is_land(self) -> bool:
        """Walkable ground a bridge end can rest on."""
        return self.accepts_ghost and not self.is_bridge


@dataclass(frozen=True)
class DecorationData:
    """Static descriptor for a decoration."""
    decoration_type: DecorationType
    name: str
    sprite: SpriteRect
    value: int = 0

    @property
    def is_valued(self) -> bool:
        return self.value > 0
