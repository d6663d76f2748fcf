from pydantic import BaseModel, Field


class Block(BaseModel):
    """Square cell used for both snake segments and food."""

    x: float
    y: float
    w: float = Field(gt=0)
    h: float = Field(gt=0)

    @classmethod
    def square(cls, x: float, y: float, size: float) -> "Block":
        return cls(x=x, y=y, w=size, h=size)

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)
