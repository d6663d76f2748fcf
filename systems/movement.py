from queue import Queue

from systems.system import System
from utils.timer import Ticker


class MovementSystem(System):
    def __init__(self, input_queue: Queue, ticker: Ticker):
        self.input_queue = input_queue
        self.ticker = ticker

    def setup(self):
        self.ticker.reset()

    def run(self, world):
        direction = None
        if not self.input_queue.empty():
            direction = self.input_queue.get_nowait()

        world.moved = False
        if direction is not None:
            world.snake.do_move(direction)
            # A manual move restarts the wait for the next automatic one
            self.ticker.reset()
            world.moved = True
        elif self.ticker.due():
            world.snake.do_move()
            world.moved = True
