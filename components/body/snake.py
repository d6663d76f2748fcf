from collections import deque
from typing import Iterable

from components.block import Block


class SnakeBody:
    """Ordered snake segments, head at the front and tail at the back."""

    def __init__(self, blocks: Iterable[Block] = ()):
        self.segments: deque[Block] = deque()
        for block in blocks:
            self.push_head(block)

    @property
    def head(self) -> Block:
        if not self.segments:
            raise ValueError("Snake body is empty, there is no head")
        return self.segments[0]

    @property
    def tail(self) -> Block:
        if not self.segments:
            raise ValueError("Snake body is empty, there is no tail")
        return self.segments[-1]

    def push_head(self, block: Block):
        self.segments.appendleft(block)

    def pop_tail(self) -> Block:
        if not self.segments:
            raise ValueError("Cannot pop the tail of an empty snake body")
        return self.segments.pop()

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self):
        return iter(self.segments)
