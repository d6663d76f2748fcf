import logging

from constants.settings import GameConfig
from entities.food import Food
from entities.snake import Snake
from schemas.game import GameSnapshot, SnakeState
from systems.system import System


logger = logging.getLogger(__name__)


class ECS:
    """Game world: owns the snake, the food and the systems updating them."""

    def __init__(self, config: GameConfig, snake: Snake, food: Food):
        self.config = config
        self.snake = snake
        self.food = food
        self.score = 0
        self.game_over = False
        # Set by the movement system when the snake advanced this frame
        self.moved = False
        self._systems: list[System] = []

    def add_system(self, system: System):
        self._systems.append(system)

    def setup(self):
        for system in self._systems:
            system.setup()

    def update(self):
        for system in self._systems:
            if self.game_over:
                break
            system.run(self)

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            snake=SnakeState(direction=self.snake.direction, body=self.snake.blocks),
            food=self.food.block,
            score=self.score,
            game_over=self.game_over,
        )
