"""Painting robot state and the colour-driven turn rule."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterator, List, Tuple

from ..errors import AllocationError, ConfigurationError

# Moves per robot per tick before the direction is re-evaluated
BURST_LENGTH = 4

# Final tile colour -> number of quarter turns added to the direction.
# A burst always ends on freshly painted 1-4, so 5 and 6 only matter if
# paint colours are ever widened.
TURN_RULES: Dict[int, int] = {
    1: 1,
    5: 1,
    2: 2,
    6: 2,
    3: 3,
    4: 0,
}


class Direction(IntEnum):
    """Facing direction; UP/DOWN move along rows, LEFT/RIGHT along columns."""
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


def turn_for_colour(colour: int) -> int:
    """Quarter turns for a final tile colour. Unlisted colours do not turn."""
    return TURN_RULES.get(colour, 0)


@dataclass
class Robot:
    """A single painting robot. paint_colour never changes after creation."""
    robot_id: int
    x: int
    y: int
    direction: Direction
    paint_colour: int

    def step(self, rows: int, cols: int) -> None:
        """Move one tile in the facing direction, wrapping around the edges."""
        if self.direction == Direction.UP:
            self.x = (self.x - 1) % rows
        elif self.direction == Direction.RIGHT:
            self.y = (self.y + 1) % cols
        elif self.direction == Direction.DOWN:
            self.x = (self.x + 1) % rows
        else:
            self.y = (self.y - 1) % cols

    def turn(self, tile_colour: int) -> None:
        self.direction = Direction((self.direction + turn_for_colour(tile_colour)) % 4)

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def __repr__(self) -> str:
        return (f"Robot(id={self.robot_id}, pos=({self.x}, {self.y}), "
                f"dir={self.direction.name}, colour={self.paint_colour})")


class RobotSet:
    """Ordered robots; index order is the update order within a tick."""

    def __init__(self, robots: List[Robot]):
        self.robots = robots

    @classmethod
    def initialize(cls, count: int, rows: int, cols: int,
                   rng, seed: int) -> "RobotSet":
        """
        Reseed the generator and place count robots.

        Per robot, in index order, draws row, column, direction and paint
        colour (1-4) in that order. Changing the order changes every
        robot's starting state for a given seed.
        """
        if count < 1:
            raise ConfigurationError(f"Robot count must be at least 1, got {count}")

        rng.seed(seed)
        try:
            robots = []
            for i in range(count):
                x = rng.randbelow(rows)
                y = rng.randbelow(cols)
                direction = Direction(rng.randbelow(4))
                paint_colour = rng.randbelow(4) + 1
                robots.append(Robot(i, x, y, direction, paint_colour))
        except MemoryError as e:
            raise AllocationError("Array of robots could not be allocated") from e
        return cls(robots)

    def __len__(self) -> int:
        return len(self.robots)

    def __iter__(self) -> Iterator[Robot]:
        return iter(self.robots)

    def __getitem__(self, index: int) -> Robot:
        return self.robots[index]
