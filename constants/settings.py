from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


Color = tuple[int, int, int]


class GameConfig(BaseModel):
    """
    Immutable game settings shared by every component and system.

    Defaults reproduce the classic game: a 700x700 window, 50px blocks,
    food spawning on the first 13 cells of each axis and an automatic move
    every second.
    """

    model_config = ConfigDict(frozen=True)

    title: str = "layne's snake"
    window_width: int = Field(default=700, gt=0)
    window_height: int = Field(default=700, gt=0)
    tick_rate: int = Field(default=60, gt=0)

    block_size: float = Field(default=50.0, gt=0)
    initial_length: int = Field(default=3, ge=1)
    # 13 leaves the last column/row of a 700px window empty, kept on purpose
    spawn_cells: int = Field(default=13, gt=0)
    float_tolerance: float = Field(default=0.0001, ge=0)
    # None disables automatic movement, the snake only moves on key presses
    move_interval_secs: Optional[float] = Field(default=1, gt=0)

    snake_color: Color = (186, 59, 153)
    food_color: Color = (186, 59, 153)
    background_color: Color = (128, 255, 128)

    # Opt-in rules, both off in the classic game
    detect_collisions: bool = False
    food_avoids_snake: bool = False

    @classmethod
    def from_file(cls, path: str) -> "GameConfig":
        with open(path, "r", encoding="utf-8") as config_file:
            return cls.model_validate_json(config_file.read())
