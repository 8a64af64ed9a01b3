from enum import Enum, IntEnum, auto
from typing import Tuple


class Direction(Enum):
    """Compass directions on the grid. NORTH is up the rows (y - 1)."""

    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return {
            Direction.NORTH: Direction.SOUTH,
            Direction.SOUTH: Direction.NORTH,
            Direction.EAST: Direction.WEST,
            Direction.WEST: Direction.EAST,
        }[self]

    def step(self, position: Tuple[int, int]) -> Tuple[int, int]:
        """Return the neighbouring position in this direction."""
        return (position[0] + self.dx, position[1] + self.dy)


class DecorationClass(Enum):
    """Which decorations a terrain variant may carry."""

    NONE = auto()   # never decorated
    VALUE = auto()  # a valued decoration (the sunken families)
    ANY = auto()    # any decoration, cosmetic or valued (the green families)


class TileType(IntEnum):
    """Enumeration of all terrain variants."""

    # Land
    GRASS = 0
    GREEN_GRASS = auto()
    GREEN_HILL = auto()
    DIRT = auto()
    DIRT_SUNKEN = auto()
    STONE = auto()
    STONE_SUNKEN = auto()

    # Blocking
    WATER = auto()

    # Bridges: straights and ends
    BRIDGE_NORTH_SOUTH = auto()
    BRIDGE_EAST_WEST = auto()
    BRIDGE_NORTH = auto()
    BRIDGE_EAST = auto()
    BRIDGE_SOUTH = auto()
    BRIDGE_WEST = auto()

    @property
    def label(self) -> str:
        """Return the sprite-sheet frame name."""
        return {
            TileType.GRASS: "Grass",
            TileType.GREEN_GRASS: "GreenGrass",
            TileType.GREEN_HILL: "GreenHill",
            TileType.DIRT: "Dirt",
            TileType.DIRT_SUNKEN: "DirtSunken",
            TileType.STONE: "Stone",
            TileType.STONE_SUNKEN: "StoneSunken",
            TileType.WATER: "Water",
            TileType.BRIDGE_NORTH_SOUTH: "BridgeNorthSouth",
            TileType.BRIDGE_EAST_WEST: "BridgeEastWest",
            TileType.BRIDGE_NORTH: "BridgeNorth",
            TileType.BRIDGE_EAST: "BridgeEast",
            TileType.BRIDGE_SOUTH: "BridgeSouth",
            TileType.BRIDGE_WEST: "BridgeWest",
        }[self]


class DecorationType(IntEnum):
    """Enumeration of all decorations that can sit on a tile."""

    NONE = 0

    # Cosmetic, worth nothing
    BUSH = auto()
    FLOWERS = auto()
    ROCK = auto()

    # Valued
    MUSHROOM = auto()
    COIN = auto()
    CHEST = auto()
    GEM = auto()


class GhostFrame(IntEnum):
    """Ghost colour variants on the sprite sheet."""

    ORANGE = 0
    RED = auto()
    PINK = auto()
    CYAN = auto()
