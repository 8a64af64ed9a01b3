import logging
import pygame
from typing import Dict, Optional, Tuple, Union

from config import SCALE, TILE_WIDTH, TILE_HEIGHT, PLACEHOLDER_COLORS, SPRITE_SHEET_PATH, TEXT_COL
from ..core.utils import get_font
from .tile_types import TileType, DecorationType, GhostFrame
from .tile_data import SpriteRect
from .tile_registry import tile_registry

logger = logging.getLogger(__name__)

SpriteId = Union[TileType, DecorationType, GhostFrame]


class TileRenderer:
    """Draws sprites and text onto a pygame surface.

    Sprites are drawn centred on the given screen position, scaled by `scale`.
    When the sprite sheet is missing, flat-coloured placeholders are used.
    """

    def __init__(self, surface: pygame.Surface, sheet_path: Optional[str] = SPRITE_SHEET_PATH,
                 scale: float = SCALE):
        self.surface = surface
        self.scale = scale
        self.sheet: Optional[pygame.Surface] = None
        # Keyed by (kind, value): the IntEnums share integer values
        self.sprite_cache: Dict[Tuple[str, int], pygame.Surface] = {}
        if sheet_path:
            self.load_sheet(sheet_path)

    def load_sheet(self, path: str) -> bool:
        try:
            sheet = pygame.image.load(path)
            if pygame.display.get_surface() is not None:
                sheet = sheet.convert_alpha()
        except (pygame.error, FileNotFoundError) as e:
            logger.warning("Failed to load sprite sheet %s: %s", path, e)
            logger.info("Using placeholder sprites instead")
            return False
        self.sheet = sheet
        self.sprite_cache.clear()
        logger.info("Loaded sprite sheet: %s", path)
        return True

    def clear(self, color) -> None:
        self.surface.fill(color)

    def draw_sprite(self, sprite_id: SpriteId, screen_x: float, screen_y: float) -> None:
        """Blit a sprite centred on (screen_x, screen_y)."""
        if isinstance(sprite_id, DecorationType) and sprite_id == DecorationType.NONE:
            return
        rect = self._sprite_rect(sprite_id)
        sprite = self._get_sprite(sprite_id, rect)
        ox, oy = rect.offset
        cx = screen_x + ox * self.scale
        cy = screen_y + oy * self.scale
        self.surface.blit(sprite, sprite.get_rect(center=(int(cx), int(cy))))

    def draw_text(self, text: str, x: float, y: float, size: int, align: str = "topleft") -> None:
        """Draw text anchored by `align` (any pygame.Rect anchor, e.g. 'center')."""
        font = get_font(max(1, int(size * self.scale)))
        rendered = font.render(text, True, TEXT_COL)
        self.surface.blit(rendered, rendered.get_rect(**{align: (int(x), int(y))}))

    def _sprite_rect(self, sprite_id: SpriteId) -> SpriteRect:
        if isinstance(sprite_id, TileType):
            return tile_registry.get_tile(sprite_id).sprite
        if isinstance(sprite_id, DecorationType):
            return tile_registry.get_decoration(sprite_id).sprite
        return tile_registry.get_ghost_sprite(sprite_id)

    def _get_sprite(self, sprite_id: SpriteId, rect: SpriteRect) -> pygame.Surface:
        key = (type(sprite_id).__name__, int(sprite_id))
        if key in self.sprite_cache:
            return self.sprite_cache[key]

        if self.sheet is not None:
            frame = self.sheet.subsurface(pygame.Rect(rect.x, rect.y, rect.w, rect.h))
        else:
            frame = self._placeholder(sprite_id, rect)

        size = (max(1, int(rect.w * self.scale)), max(1, int(rect.h * self.scale)))
        sprite = pygame.transform.scale(frame, size)
        self.sprite_cache[key] = sprite
        return sprite

    def _placeholder(self, sprite_id: SpriteId, rect: SpriteRect) -> pygame.Surface:
        """Build a flat-coloured stand-in for a sheet frame."""
        surf = pygame.Surface((rect.w, rect.h), pygame.SRCALPHA)
        cx, cy = rect.w // 2, rect.h // 2

        if isinstance(sprite_id, TileType):
            data = tile_registry.get_tile(sprite_id)
            col = PLACEHOLDER_COLORS[data.placeholder]
            hw, hh = TILE_WIDTH // 2, TILE_HEIGHT // 2
            diamond = [(cx, cy - hh), (cx + hw, cy), (cx, cy + hh), (cx - hw, cy)]
            pygame.draw.polygon(surf, col, diamond)
            pygame.draw.polygon(surf, (0, 0, 0), diamond, 1)
            for direction in data.bridge_directions:
                # Plank from the centre toward the connected edge
                ex = cx + (direction.dx - direction.dy) * hw // 2
                ey = cy + (direction.dx + direction.dy) * hh // 2
                pygame.draw.line(surf, (90, 60, 30), (cx, cy), (ex, ey), 8)
        elif isinstance(sprite_id, DecorationType):
            pygame.draw.circle(surf, PLACEHOLDER_COLORS["decoration"], (cx, cy), rect.w // 6)
        else:
            pygame.draw.circle(surf, PLACEHOLDER_COLORS["ghost"], (cx, cy), rect.w // 4)
            for ex in (cx - rect.w // 10, cx + rect.w // 10):
                pygame.draw.circle(surf, (255, 255, 255), (ex, cy - rect.h // 12), rect.w // 20)
        return surf
