from .tile_types import TileType, DecorationType, DecorationClass, Direction, GhostFrame
from .tile_data import TileData, DecorationData, SpriteRect
from .tile_registry import TileRegistry, tile_registry

__all__ = [
    "TileType",
    "DecorationType",
    "DecorationClass",
    "Direction",
    "GhostFrame",
    "TileData",
    "DecorationData",
    "SpriteRect",
    "TileRegistry",
    "tile_registry",
]
