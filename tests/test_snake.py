import pytest

from components.block import Block
from components.body.snake import SnakeBody
from constants.direction import Direction
from constants.settings import GameConfig
from entities.snake import Snake


BLOCK_SIZE = 50.0


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


def positions(snake: Snake):
    return [block.position for block in snake.blocks]


@pytest.fixture
def config():
    return GameConfig()


def test_new_snake_starts_with_three_segments_heading_right(config):
    snake = Snake(config)

    assert len(snake) == 3
    assert snake.direction == Direction.RIGHT
    # Head is the last pushed block
    assert positions(snake) == [(100.0, 0.0), (50.0, 0.0), (0.0, 0.0)]
    assert all(block.w == BLOCK_SIZE and block.h == BLOCK_SIZE for block in snake.blocks)


def test_first_move_recycles_tail_as_new_head(config):
    snake = Snake(config)

    snake.do_move()

    assert positions(snake) == [(150.0, 0.0), (100.0, 0.0), (50.0, 0.0)]


@pytest.mark.parametrize(
    "direction, expected_head",
    [
        (Direction.UP, (100.0, -50.0)),
        (Direction.DOWN, (100.0, 50.0)),
        (Direction.LEFT, (50.0, 0.0)),
        (Direction.RIGHT, (150.0, 0.0)),
    ],
)
def test_move_keeps_length_and_changes_one_segment(config, direction, expected_head):
    snake = Snake(config)
    before = positions(snake)
    old_tail = snake.tail

    snake.do_move(direction)
    after = positions(snake)

    assert len(after) == len(before)
    assert snake.head is old_tail
    assert snake.head.position == expected_head
    assert after[1:] == before[:-1]
    assert snake.direction == direction


def test_turn_up_decreases_head_y_only(config):
    snake = Snake(config)
    snake.do_move()
    head_x, head_y = snake.head.position

    snake.change_direction(Direction.UP)
    snake.do_move()

    assert snake.head.position == (head_x, head_y - BLOCK_SIZE)


def test_change_direction_is_idempotent(config):
    once = Snake(config)
    twice = Snake(config)

    once.change_direction(Direction.DOWN)
    twice.change_direction(Direction.DOWN)
    twice.change_direction(Direction.DOWN)
    once.do_move()
    twice.do_move()

    assert positions(once) == positions(twice)
    assert once.direction == twice.direction


def test_reversal_is_allowed(config):
    snake = Snake(config)

    snake.do_move(Direction.LEFT)

    assert snake.direction == Direction.LEFT
    assert snake.head.position == (50.0, 0.0)


def test_eat_grows_by_one_and_keeps_prior_segments(config):
    snake = Snake(config)
    snake.do_move()
    before = positions(snake)
    food_block = Block.square(150.0, 0.0, BLOCK_SIZE)

    snake.eat(food_block)

    assert len(snake) == 4
    assert snake.head is food_block
    assert snake.head.position == (200.0, 0.0)
    assert positions(snake)[1:] == before


def test_eat_uses_current_heading(config):
    snake = Snake(config)
    snake.change_direction(Direction.DOWN)

    snake.eat(Block.square(0.0, 0.0, BLOCK_SIZE))

    assert snake.head.position == (100.0, 50.0)


def test_pass_secs_counts_whole_seconds_since_last_move(config):
    clock = FakeClock(0)
    snake = Snake(config, clock=clock)

    clock.now = 999_999_999
    assert not snake.pass_secs(1)
    clock.now = 1_000_000_000
    assert snake.pass_secs(1)

    snake.do_move()
    assert not snake.pass_secs(1)
    assert snake.pass_secs(0)


def test_occupies_can_skip_head(config):
    snake = Snake(config)

    assert snake.occupies((100.0, 0.0))
    assert not snake.occupies((100.0, 0.0), include_head=False)
    assert snake.occupies((0.00001, 0.0))
    assert not snake.occupies((150.0, 0.0))


def test_empty_body_raises():
    body = SnakeBody()

    with pytest.raises(ValueError):
        body.head
    with pytest.raises(ValueError):
        body.pop_tail()


def test_initial_length_comes_from_config():
    snake = Snake(GameConfig(initial_length=5, block_size=10))

    assert len(snake) == 5
    assert snake.head.position == (40.0, 0.0)


def test_base_movement_component_requires_move():
    from components.movement.component import MovementComponent

    with pytest.raises(NotImplementedError):
        MovementComponent().move()
