from constants.direction import Direction


class MovementComponent:
    command_translator = {
        Direction.UP: (0, -1),
        Direction.LEFT: (-1, 0),
        Direction.DOWN: (0, 1),
        Direction.RIGHT: (1, 0),
    }

    def __init__(self, direction: Direction = Direction.RIGHT):
        if direction not in self.command_translator:
            raise ValueError(f"Unknown direction '{direction}'")
        self.direction = direction

    def move(self, direction=None):
        raise NotImplementedError(f"Child component MUST implement {self.move.__name__}")
