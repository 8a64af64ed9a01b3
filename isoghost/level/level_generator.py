"""Random level generation with bridge repair.

Generation runs in three steps:
- Random fill: every cell gets a uniformly random terrain variant. Green
  families get any decoration, sunken families get a valued decoration,
  everything else gets none.
- The ghost's start cell is forced to plain dirt so the ghost never starts
  in the water.
- Bridge repair: each bridge keeps only the directions whose neighbour exists
  and accepts the connection back. The repaired direction set is swapped for
  the matching bridge variant; a bridge left with nothing becomes water.

Repair reads a snapshot of the variant grid and never revisits a tile. A
bridge-to-bridge link is valid from one side exactly when it is valid from the
other, so filtering each tile's own directions is enough to leave every
remaining bridge end connected.
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Tuple

from config import SIDE_LENGTH, GHOST_START
from ..tiles.tile_types import TileType, DecorationType, DecorationClass, Direction
from ..tiles.tile_registry import tile_registry
from .level import Level, Position

logger = logging.getLogger(__name__)

# Where a bridge with no valid direction left ends up
BRIDGE_FALLBACK = TileType.WATER
# Plain land the ghost starts on
START_VARIANT = TileType.DIRT

VariantGrid = List[List[TileType]]


def get_random_tile_type(rng: random.Random) -> TileType:
    return rng.choice(tile_registry.terrain_types())


def get_random_decoration(rng: random.Random) -> DecorationType:
    """Any decoration, NONE and cosmetic ones included."""
    return rng.choice(tile_registry.decoration_types())


def get_random_value_decoration(rng: random.Random) -> DecorationType:
    return rng.choice(tile_registry.decoration_types(valued_only=True))


def decoration_for(tile_type: TileType, rng: random.Random) -> DecorationType:
    """Pick a decoration according to the variant's decoration class."""
    decoration_class = tile_registry.get_tile(tile_type).decoration_class
    if decoration_class is DecorationClass.VALUE:
        return get_random_value_decoration(rng)
    if decoration_class is DecorationClass.ANY:
        return get_random_decoration(rng)
    if decoration_class is DecorationClass.NONE:
        return DecorationType.NONE
    raise AssertionError(f"Unhandled decoration class {decoration_class!r}")


def accepts_connection(variants: VariantGrid, position: Position, from_direction: Direction) -> bool:
    """Can the tile at `position` take a bridge arriving from `from_direction`?

    `from_direction` is the side of this tile the bridge comes in on. Land
    always accepts; a bridge accepts only if it connects back that way.
    """
    data = tile_registry.get_tile(variants[position[1]][position[0]])
    if data.is_bridge:
        return from_direction in data.bridge_directions
    return data.is_land


def is_valid_bridge_direction(variants: VariantGrid, x: int, y: int, direction: Direction) -> bool:
    side = len(variants)
    nx, ny = direction.step((x, y))
    if not (0 <= nx < side and 0 <= ny < side):
        return False
    return accepts_connection(variants, (nx, ny), direction.opposite)


def remove_invalid_bridge_directions(variants: VariantGrid) -> Tuple[VariantGrid, int, int]:
    """Drop dangling bridge directions.

    Returns (repaired grid, bridges trimmed, bridges degraded). The input grid
    is left untouched.
    """
    snapshot = [list(row) for row in variants]
    repaired = [list(row) for row in variants]
    trimmed = degraded = 0

    for y, row in enumerate(snapshot):
        for x, tile_type in enumerate(row):
            data = tile_registry.get_tile(tile_type)
            if not data.is_bridge:
                continue

            kept = frozenset(
                d for d in data.bridge_directions
                if is_valid_bridge_direction(snapshot, x, y, d)
            )
            if kept == data.bridge_directions:
                continue

            replacement = tile_registry.bridge_variant_for(kept) if kept else None
            if replacement is None:
                repaired[y][x] = BRIDGE_FALLBACK
                degraded += 1
                logger.debug("Bridge at (%d, %d) degraded to %s", x, y, BRIDGE_FALLBACK.label)
            else:
                repaired[y][x] = replacement
                trimmed += 1
                logger.debug("Bridge at (%d, %d) trimmed to %s", x, y, replacement.label)

    return repaired, trimmed, degraded


def find_invalid_bridge_directions(level: Level) -> List[Tuple[Position, Direction]]:
    """List every bridge direction in a built level that has nothing to land on."""
    variants = [[tile.variant for tile in row] for row in level.tiles]
    problems = []
    for (x, y), tile in level.cells():
        for direction in tile_registry.get_tile(tile.variant).bridge_directions:
            if not is_valid_bridge_direction(variants, x, y, direction):
                problems.append(((x, y), direction))
    return problems


def generate_level(side_length: int = SIDE_LENGTH,
                   rng: Optional[random.Random] = None,
                   start: Optional[Position] = GHOST_START) -> Level:
    """Build a ready-to-play level. Never fails."""
    if rng is None:
        rng = random.Random()

    variants: VariantGrid = []
    decorations: List[List[DecorationType]] = []
    for _ in range(side_length):
        variant_row = []
        decoration_row = []
        for _ in range(side_length):
            tile_type = get_random_tile_type(rng)
            variant_row.append(tile_type)
            decoration_row.append(decoration_for(tile_type, rng))
        variants.append(variant_row)
        decorations.append(decoration_row)

    if start is not None:
        sx, sy = start
        variants[sy][sx] = START_VARIANT
        decorations[sy][sx] = DecorationType.NONE

    variants, trimmed, degraded = remove_invalid_bridge_directions(variants)

    level = Level.from_variants(variants, decorations)
    logger.info(
        "Generated %dx%d level: %d bridges trimmed, %d degraded, %d valued decorations worth %d",
        side_length, side_length, trimmed, degraded,
        level.valued_decoration_count(), level.remaining_value(),
    )
    return level
