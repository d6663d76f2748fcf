import logging
import random

import numpy as np

from components.block import Block
from constants.settings import GameConfig
from entities.snake import Snake


logger = logging.getLogger(__name__)


class Food:
    def __init__(self, block: Block, config: GameConfig):
        self.block = block
        self.config = config

    @classmethod
    def produce(cls, config: GameConfig, rng=random, avoid: Snake = None) -> "Food":
        """
        Spawn food on a random grid cell in [0, spawn_cells) on both axes.

        When `avoid` is given the cell is drawn again until it is free of
        that snake's body, at most `spawn_cells ** 2` times. After that the
        last drawn cell is used even if the snake covers it.
        """
        size = config.block_size
        attempts_left = config.spawn_cells ** 2
        invalid_position = True

        while invalid_position:
            column = rng.randint(0, config.spawn_cells - 1)
            row = rng.randint(0, config.spawn_cells - 1)
            position = (size * column, size * row)
            invalid_position = avoid is not None and avoid.occupies(position)

            attempts_left -= 1
            if invalid_position and attempts_left <= 0:
                logger.warning(f"No free cell found for food, spawning on the snake at {position}")
                break

        logger.debug(f"Food produced at x={column}, y={row}")
        return cls(Block.square(position[0], position[1], size), config)

    @property
    def position(self) -> tuple[float, float]:
        return self.block.position

    def can_be_eaten(self, snake: Snake) -> bool:
        distance = np.abs(np.subtract(self.position, snake.head.position))
        return bool(np.all(distance <= self.config.float_tolerance))
