import numpy as np

from components.block import Block
from components.body.snake import SnakeBody
from components.movement.component import MovementComponent
from constants.direction import Direction


class SnakeMovement(MovementComponent):
    def __init__(
        self,
        snake_body: SnakeBody,
        block_size: float,
        direction: Direction = Direction.RIGHT,
    ):
        super().__init__(direction)
        self.snake_body = snake_body
        self.block_size = block_size

    def change_direction(self, direction: Direction):
        if direction not in self.command_translator:
            raise ValueError(f"Unknown direction '{direction}'")
        self.direction = direction

    def next_head_position(self) -> tuple[float, float]:
        """Position one block away from the current head along the heading."""
        offset = np.array(self.command_translator[self.direction]).astype(float)
        np_offset = np.multiply(offset, self.block_size)

        np_head = np.array(self.snake_body.head.position).astype(float)
        new_head = np.add(np_head, np_offset)
        return float(new_head[0]), float(new_head[1])

    def move(self, direction: Direction = None):
        if direction is not None:
            self.change_direction(direction)

        # The tail block is recycled as the new head
        new_x, new_y = self.next_head_position()
        tail = self.snake_body.pop_tail()
        tail.x, tail.y = new_x, new_y
        self.snake_body.push_head(tail)

    def grow(self, block: Block):
        new_x, new_y = self.next_head_position()
        block.x, block.y = new_x, new_y
        self.snake_body.push_head(block)
