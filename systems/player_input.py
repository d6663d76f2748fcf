import logging
from queue import Queue
from typing import Optional

import pygame

from constants.direction import Direction
from systems.system import System


logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


def key_to_direction(key: int) -> Optional[Direction]:
    """Arrow keys map to a direction, every other key maps to None."""
    return KEY_DIRECTIONS.get(key)


class InputSystem(System):
    def __init__(self):
        self.input_queue = Queue(maxsize=2)
        self.command_queue = Queue()

    def setup(self):
        pass

    def run(self, world):
        snake_direction = None

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.command_queue.put_nowait("exit")
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.command_queue.put_nowait("exit")
                # Last arrow key of the frame wins, other keys are ignored
                elif key_to_direction(event.key) is not None:
                    snake_direction = key_to_direction(event.key)

        if snake_direction is not None and not self.input_queue.full():
            logger.debug(f"Input direction {snake_direction.value}")
            self.input_queue.put_nowait(snake_direction)

    def exit_requested(self) -> bool:
        return not self.command_queue.empty() and self.command_queue.get_nowait() == "exit"
