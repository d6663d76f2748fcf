import logging

import pygame

from components.block import Block
from constants.settings import GameConfig
from systems.system import System


logger = logging.getLogger(__name__)


class RenderSystem(System):
    def __init__(self, config: GameConfig):
        self.config = config
        self.window = None

    def setup(self):
        try:
            self.window = pygame.display.set_mode(
                (self.config.window_width, self.config.window_height)
            )
        except pygame.error:
            logger.exception("Failed to build window")
            raise
        pygame.display.set_caption(self.config.title)

        self.window.fill(self.config.background_color)
        pygame.display.flip()

    def run(self, world):
        self.window.fill(self.config.background_color)

        for block in world.snake.blocks:
            self._draw_block(block, self.config.snake_color)
        self._draw_block(world.food.block, self.config.food_color)

        pygame.display.flip()

    def _draw_block(self, block: Block, color):
        pygame.draw.rect(self.window, color, (block.x, block.y, block.w, block.h))
