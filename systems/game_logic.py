import logging
import random

from entities.food import Food
from entities.snake import Snake
from systems.system import System


logger = logging.getLogger(__name__)


class GameLogicSystem(System):
    """
    Eating and food respawn.

    Wall and self collisions only end the game when `detect_collisions` is
    enabled in the config, the classic game lets the snake leave the window
    and cross itself.
    """

    def __init__(self, rng=random) -> None:
        self._rng = rng

    def setup(self):
        pass

    def run(self, world):
        config = world.config
        snake: Snake = world.snake

        # Food is only eaten right after a move, never twice for one tick
        moved, world.moved = world.moved, False
        if moved and world.food.can_be_eaten(snake):
            snake.eat(world.food.block)
            world.score += 1
            logger.info(f"Food eaten, snake length {len(snake)}, score {world.score}")

            avoid = snake if config.food_avoids_snake else None
            world.food = Food.produce(config, self._rng, avoid=avoid)

        if config.detect_collisions and self._has_collision(world):
            world.game_over = True
            logger.info(f"Game over with score {world.score}")

    def _has_collision(self, world) -> bool:
        config = world.config
        head = world.snake.head

        if not (
            0 <= head.x <= config.window_width - head.w
            and 0 <= head.y <= config.window_height - head.h
        ):
            logger.debug(f"Wall collision at {head.position}")
            return True

        if world.snake.occupies(head.position, include_head=False):
            logger.debug(f"Self collision at {head.position}")
            return True

        return False
