from typing import Dict, FrozenSet, Iterable, List, Optional
from .tile_types import TileType, DecorationType, DecorationClass, Direction, GhostFrame
from .tile_data import TileData, DecorationData, SpriteRect

# Frames on the sprite sheet sit in a grid of square cells
CELL = 132

N, E, S, W = Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST


def _cell(col: int, row: int, offset=(0, 0)) -> SpriteRect:
    return SpriteRect(col * CELL, row * CELL, CELL, CELL, offset)


class TileRegistry:
    """Registry for terrain, decoration and ghost sprite definitions."""

    def __init__(self):
        self._tiles: Dict[TileType, TileData] = {}
        self._decorations: Dict[DecorationType, DecorationData] = {}
        self._ghosts: Dict[GhostFrame, SpriteRect] = {}
        self._bridges: Dict[FrozenSet[Direction], TileType] = {}
        self._initialize_default_tiles()
        self._initialize_default_decorations()
        self._initialize_default_ghosts()

    def _initialize_default_tiles(self):
        """Initialize default terrain variants with their properties."""

        # Plain land
        self.register_tile(TileData(TileType.GRASS, "Grass", _cell(0, 0)))
        self.register_tile(TileData(TileType.DIRT, "Dirt", _cell(3, 0), placeholder="dirt"))
        self.register_tile(TileData(TileType.STONE, "Stone", _cell(5, 0), placeholder="stone"))

        # Green families carry any decoration
        self.register_tile(TileData(
            TileType.GREEN_GRASS, "Green Grass", _cell(1, 0),
            decoration_class=DecorationClass.ANY,
            placeholder="green",
        ))
        self.register_tile(TileData(
            TileType.GREEN_HILL, "Green Hill", _cell(2, 0, offset=(0, -8)),
            decoration_class=DecorationClass.ANY,
            placeholder="green",
        ))

        # Sunken families carry a valued decoration
        self.register_tile(TileData(
            TileType.DIRT_SUNKEN, "Dirt Sunken", _cell(4, 0, offset=(0, 8)),
            decoration_class=DecorationClass.VALUE,
            placeholder="dirt",
        ))
        self.register_tile(TileData(
            TileType.STONE_SUNKEN, "Stone Sunken", _cell(6, 0, offset=(0, 8)),
            decoration_class=DecorationClass.VALUE,
            placeholder="stone",
        ))

        # Water blocks the ghost
        self.register_tile(TileData(
            TileType.WATER, "Water", _cell(7, 0),
            accepts_ghost=False,
            placeholder="water",
        ))

        # Bridges, keyed by the directions they connect toward
        for col, tile_type, name, directions in (
            (0, TileType.BRIDGE_NORTH_SOUTH, "Bridge North-South", (N, S)),
            (1, TileType.BRIDGE_EAST_WEST, "Bridge East-West", (E, W)),
            (2, TileType.BRIDGE_NORTH, "Bridge North", (N,)),
            (3, TileType.BRIDGE_EAST, "Bridge East", (E,)),
            (4, TileType.BRIDGE_SOUTH, "Bridge South", (S,)),
            (5, TileType.BRIDGE_WEST, "Bridge West", (W,)),
        ):
            self.register_tile(TileData(
                tile_type, name, _cell(col, 1),
                bridge_directions=frozenset(directions),
                placeholder="bridge",
            ))

    def _initialize_default_decorations(self):
        """Initialize decorations and their point values."""
        offset = (0, -30)
        for col, decoration_type, name, value in (
            (0, DecorationType.BUSH, "Bush", 0),
            (1, DecorationType.FLOWERS, "Flowers", 0),
            (2, DecorationType.ROCK, "Rock", 0),
            (3, DecorationType.MUSHROOM, "Mushroom", 1),
            (4, DecorationType.COIN, "Coin", 2),
            (5, DecorationType.CHEST, "Chest", 5),
            (6, DecorationType.GEM, "Gem", 10),
        ):
            self.register_decoration(DecorationData(decoration_type, name, _cell(col, 2, offset), value))

        # NONE has no frame and is never drawn
        self.register_decoration(DecorationData(DecorationType.NONE, "None", SpriteRect(0, 0, 0, 0), 0))

    def _initialize_default_ghosts(self):
        for frame in GhostFrame:
            self._ghosts[frame] = _cell(int(frame), 3, offset=(0, -60))

    def register_tile(self, tile_data: TileData):
        """Register a terrain variant."""
        self._tiles[tile_data.tile_type] = tile_data
        if tile_data.is_bridge:
            self._bridges[tile_data.bridge_directions] = tile_data.tile_type

    def register_decoration(self, decoration_data: DecorationData):
        """Register a decoration."""
        if decoration_data.decoration_type == DecorationType.NONE and decoration_data.value != 0:
            raise ValueError("DecorationType.NONE must be worth 0 points")
        if decoration_data.decoration_type != DecorationType.NONE and decoration_data.value < 0:
            raise ValueError(f"Decoration {decoration_data.name} has a negative value")
        self._decorations[decoration_data.decoration_type] = decoration_data

    def get_tile(self, tile_type: TileType) -> TileData:
        """Get tile data by type. Unknown types raise KeyError."""
        try:
            return self._tiles[tile_type]
        except KeyError:
            raise KeyError(f"Unknown tile variant: {tile_type!r}") from None

    def get_decoration(self, decoration_type: DecorationType) -> DecorationData:
        """Get decoration data by type. Unknown types raise KeyError."""
        try:
            return self._decorations[decoration_type]
        except KeyError:
            raise KeyError(f"Unknown decoration variant: {decoration_type!r}") from None

    def get_ghost_sprite(self, frame: GhostFrame) -> SpriteRect:
        return self._ghosts[frame]

    def get_all_tiles(self) -> Dict[TileType, TileData]:
        """Get all registered tiles."""
        return self._tiles.copy()

    def terrain_types(self) -> List[TileType]:
        """All terrain variants, in enum order."""
        return sorted(self._tiles)

    def decoration_types(self, valued_only: bool = False) -> List[DecorationType]:
        """All decorations (NONE included), or only the valued ones."""
        if valued_only:
            return sorted(d for d, data in self._decorations.items() if data.is_valued)
        return sorted(self._decorations)

    def decoration_value(self, decoration_type: DecorationType) -> int:
        return self.get_decoration(decoration_type).value

    def bridge_variant_for(self, directions: Iterable[Direction]) -> Optional[TileType]:
        """Return the bridge variant connecting exactly toward `directions`, if any."""
        return self._bridges.get(frozenset(directions))


# Global tile registry instance
tile_registry = TileRegistry()
