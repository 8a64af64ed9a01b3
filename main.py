import sys

import pygame
import logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

from config import (
    WIDTH,
    HEIGHT,
    FPS,
    BG,
    WINDOW_TITLE,
    RUNTIME_CONFIG_PATH,
)

from isoghost.core.game_loop import new_game, tick, render
from isoghost.core.input import InputHandler
from isoghost.level.config_loader import load_runtime_config
from isoghost.tiles.tile_renderer import TileRenderer


class Game:
    def __init__(self, config_path: str = RUNTIME_CONFIG_PATH):
        pygame.init()
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()
        self.renderer = TileRenderer(self.screen)
        self.input = InputHandler()

        self.runtime = load_runtime_config(config_path)
        self.state = new_game(self.runtime, self.viewport)
        self.running = True

    @property
    def viewport(self):
        return self.screen.get_size()

    def step(self):
        """One frame: input, update, draw."""
        frame = self.input.process_events()
        if frame.quit:
            self.running = False
            return
        if frame.resize is not None:
            self.screen = pygame.display.set_mode(frame.resize, pygame.RESIZABLE)
            self.renderer.surface = self.screen
            logger.info("Viewport resized to %dx%d", *frame.resize)

        tick(self.state, frame.commands, self.viewport)
        render(self.state, self.renderer, background=BG)
        pygame.display.flip()

    def run(self):
        while self.running:
            self.clock.tick(FPS)
            try:
                self.step()
            except Exception:
                logger.exception("Frame failed")
                raise
        pygame.quit()


def main():
    Game(sys.argv[1] if len(sys.argv) > 1 else RUNTIME_CONFIG_PATH).run()


if __name__ == "__main__":
    main()
