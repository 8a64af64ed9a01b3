from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from ..tiles.tile_types import TileType, DecorationType
from ..tiles.tile_registry import tile_registry

Position = Tuple[int, int]


@dataclass
class Tile:
    """A single grid cell. `walkable` is fixed by the variant at creation."""
    variant: TileType
    decoration: DecorationType = DecorationType.NONE
    walkable: bool = field(init=False)

    def __post_init__(self):
        self.walkable = tile_registry.get_tile(self.variant).accepts_ghost

    @property
    def decoration_value(self) -> int:
        return tile_registry.decoration_value(self.decoration)

    def clear_decoration(self) -> int:
        """Remove the decoration and return what it was worth."""
        value = self.decoration_value
        self.decoration = DecorationType.NONE
        return value


class Level:
    """Square grid of tiles, indexed row-major as tiles[y][x]."""

    def __init__(self, tiles: List[List[Tile]]):
        side = len(tiles)
        if any(len(row) != side for row in tiles):
            raise ValueError("Level grid must be square")
        self.tiles = tiles
        self.side_length = side

    @classmethod
    def from_variants(cls, variants: List[List[TileType]],
                      decorations: List[List[DecorationType]] = None) -> "Level":
        rows = []
        for y, row in enumerate(variants):
            rows.append([
                Tile(variant, decorations[y][x] if decorations else DecorationType.NONE)
                for x, variant in enumerate(row)
            ])
        return cls(rows)

    def in_bounds(self, position: Position) -> bool:
        x, y = position
        return 0 <= x < self.side_length and 0 <= y < self.side_length

    def tile_at(self, position: Position) -> Tile:
        x, y = position
        return self.tiles[y][x]

    def can_go_to(self, position: Position) -> bool:
        """True if the position is inside the grid and its tile accepts the ghost."""
        return self.in_bounds(position) and self.tile_at(position).walkable

    def cells(self) -> Iterator[Tuple[Position, Tile]]:
        """Yield ((x, y), tile) in draw order: rows top to bottom, left to right."""
        for y, row in enumerate(self.tiles):
            for x, tile in enumerate(row):
                yield (x, y), tile

    def valued_decoration_count(self) -> int:
        return sum(1 for _, tile in self.cells() if tile.decoration_value > 0)

    def remaining_value(self) -> int:
        return sum(tile.decoration_value for _, tile in self.cells())
