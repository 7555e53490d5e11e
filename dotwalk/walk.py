import random
from dataclasses import dataclass
from enum import IntEnum


class Direction(IntEnum):
    RIGHT = 0
    LEFT  = 1
    DOWN  = 2
    UP    = 3


@dataclass(frozen=True)
class Position:
    x: float
    y: float

    def move(self, direction: Direction, step: int, max_width: float, max_height: float) -> "Position":
        """Return the position one step away in `direction`, clamped to the canvas.

        Each axis stays inside [0, max(0, max_dim - step)], so a dot drawn at
        the result never spills over the right or bottom edge.
        """
        x, y = self.x, self.y
        if direction == Direction.RIGHT:
            x = max(0, min(x + step, max_width - step))
        elif direction == Direction.LEFT:
            x = max(x - step, 0)
        elif direction == Direction.DOWN:
            y = max(0, min(y + step, max_height - step))
        elif direction == Direction.UP:
            y = max(y - step, 0)
        else:
            raise ValueError(f"unknown direction: {direction!r}")
        return Position(x, y)


@dataclass
class WalkParameters:
    step: int
    max_width: float
    max_height: float


def random_direction(rng) -> Direction:
    return Direction(rng.randrange(len(Direction)))


def next_position(position: Position, params: WalkParameters, rng) -> Position:
    direction = random_direction(rng)
    return position.move(direction, params.step, params.max_width, params.max_height)


class DotMover:
    def __init__(self, step: int, width: float, height: float, rng=None):
        self.params = WalkParameters(step, width, height)
        self.rng    = rng if rng is not None else random.Random()

    @property
    def step(self) -> int:
        return self.params.step

    def get_new_position(self, position: Position) -> Position:
        return next_position(position, self.params, self.rng)

    def change_step_size(self, step: int):
        self.params.step = step
