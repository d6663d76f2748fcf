from typing import List

from pydantic import BaseModel

from components.block import Block
from constants.direction import Direction


class SnakeState(BaseModel):
    direction: Direction
    body: List[Block]


class GameSnapshot(BaseModel):
    snake: SnakeState
    food: Block
    score: int
    game_over: bool
