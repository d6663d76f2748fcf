import logging
import random

import pygame

from constants.settings import GameConfig
from entities.food import Food
from entities.snake import Snake
from systems.ecs import ECS
from systems.game_logic import GameLogicSystem
from systems.movement import MovementSystem
from systems.player_input import InputSystem
from systems.render import RenderSystem
from utils.timer import Ticker, log_func_time


logger = logging.getLogger(__name__)


class LocalLoop:
    def __init__(self, config: GameConfig, rng=random):
        self.config = config
        self.rng = rng

        self.input_system = InputSystem()
        self.movement_system = MovementSystem(
            self.input_system.input_queue, Ticker(config.move_interval_secs)
        )
        self.game_logic_system = GameLogicSystem(rng)
        self.rendering_system = RenderSystem(config)

    def setup_world(self) -> ECS:
        snake = Snake(self.config)
        food = Food.produce(
            self.config, self.rng, avoid=snake if self.config.food_avoids_snake else None
        )

        world = ECS(self.config, snake, food)
        world.add_system(self.input_system)
        world.add_system(self.movement_system)
        world.add_system(self.game_logic_system)
        world.add_system(self.rendering_system)
        return world

    @log_func_time
    def setup(self) -> ECS:
        pygame.init()

        world = self.setup_world()
        world.setup()

        self._clock = pygame.time.Clock()
        self._running = True
        return world

    def close(self):
        pygame.quit()

    def run(self):
        try:
            world = self.setup()
            logger.info(f"Starting game '{self.config.title}'")

            while self._running:
                world.update()

                if self.input_system.exit_requested():
                    self._running = False
                elif world.game_over:
                    logger.debug(world.snapshot().model_dump_json())
                    self._running = False

                self._clock.tick(self.config.tick_rate)
        finally:
            self.close()

        logger.info(f"Game closed with score {world.score}")
        return world.score
