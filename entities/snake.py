import time
from typing import Callable

from components.block import Block
from components.body.snake import SnakeBody
from components.movement.snake import SnakeMovement
from constants.direction import Direction
from constants.settings import GameConfig
from utils.timer import Timer


class Snake:
    """
    Player snake: an ordered body, a heading and the time of its last move.

    Moving recycles the tail block as the new head so the body keeps its
    length, eating pushes the food block as the new head instead.
    """

    def __init__(self, config: GameConfig, clock: Callable[[], int] = time.time_ns):
        self.config = config

        size = config.block_size
        # Pushed to the front one by one, the last block ends up as the head
        self.body = SnakeBody(
            Block.square(size * i, 0.0, size) for i in range(config.initial_length)
        )
        self.movement = SnakeMovement(self.body, size, Direction.RIGHT)
        self._last_move = Timer(clock)

    @property
    def direction(self) -> Direction:
        return self.movement.direction

    @property
    def head(self) -> Block:
        return self.body.head

    @property
    def tail(self) -> Block:
        return self.body.tail

    @property
    def blocks(self) -> list[Block]:
        return list(self.body)

    def change_direction(self, direction: Direction):
        self.movement.change_direction(direction)

    def do_move(self, direction: Direction = None):
        self.movement.move(direction)
        self._last_move.reset()

    def eat(self, block: Block):
        self.movement.grow(block)

    def pass_secs(self, secs: int) -> bool:
        """Whether at least `secs` whole seconds went by since the last move."""
        return int(self._last_move.elapsed_sec()) >= secs

    def occupies(self, position: tuple[float, float], include_head: bool = True) -> bool:
        tolerance = self.config.float_tolerance
        segments = self.blocks if include_head else self.blocks[1:]
        for segment in segments:
            if (
                abs(segment.x - position[0]) <= tolerance
                and abs(segment.y - position[1]) <= tolerance
            ):
                return True
        return False

    def __len__(self) -> int:
        return len(self.body)
