"""
Input handling for Isoghost.

`InputHandler.process_events()` drains pygame events and turns them into
plain data: the arrow-key moves to apply this frame, whether the window should
close, and a new viewport size after a resize. Everything else is ignored.
"""
import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

import pygame

from ..tiles.tile_types import Direction

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_LEFT: Direction.WEST,
    pygame.K_UP: Direction.NORTH,
    pygame.K_RIGHT: Direction.EAST,
    pygame.K_DOWN: Direction.SOUTH,
}


@dataclass
class InputFrame:
    commands: List[Direction] = field(default_factory=list)
    quit: bool = False
    resize: Optional[Tuple[int, int]] = None


class InputHandler:
    """Centralized input/event processing.

    Usage:
        handler = InputHandler()
        frame = handler.process_events()
    """

    def process_events(self, events: Optional[Iterable[pygame.event.Event]] = None) -> InputFrame:
        if events is None:
            events = pygame.event.get()

        frame = InputFrame()
        for ev in events:
            if ev.type == pygame.QUIT:
                frame.quit = True

            elif ev.type == pygame.VIDEORESIZE:
                frame.resize = (ev.w, ev.h)

            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    frame.quit = True
                    continue
                direction = KEY_DIRECTIONS.get(ev.key)
                if direction is not None:
                    frame.commands.append(direction)

        if frame.quit:
            logger.info("Quit requested")
        return frame
