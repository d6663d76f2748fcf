from .game import GameSnapshot, SnakeState
