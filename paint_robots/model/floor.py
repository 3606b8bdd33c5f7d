"""Tile floor for the painting robots simulation."""

from enum import IntEnum
from typing import Dict, List

import numpy as np

from ..errors import AllocationError

MAGENTA = 5
WHITE = 6
TILE_COLOURS = (1, 2, 3, 4, 5, 6)

# Side length of one checkerboard block
CHECKER_BLOCK = 4


class InitPattern(IntEnum):
    """Floor initialization patterns, numbered as in the parameter file."""
    RANDOM_STRIPES = 1
    CHECKERBOARD = 2
    ALL_MAGENTA = 3


class Floor:
    """
    Fixed-size grid of tile colour codes.

    Coordinate convention: (x, y) where x is the row and y the column,
    matching the [x, y] array index. The grid is never resized.
    """

    def __init__(self, tiles: np.ndarray):
        self.tiles = tiles
        self.rows, self.cols = tiles.shape

    @classmethod
    def allocate(cls, rows: int, cols: int) -> "Floor":
        """Create an empty rows x cols floor or raise AllocationError."""
        if rows <= 0 or cols <= 0:
            raise AllocationError(
                f"Floor dimensions must be positive, got {rows}x{cols}"
            )
        try:
            tiles = np.zeros((rows, cols), dtype=np.int32)
        except (MemoryError, ValueError) as e:
            raise AllocationError(
                f"Array storage for the {rows}x{cols} floor could not be allocated"
            ) from e
        return cls(tiles)

    def initialize(self, pattern: InitPattern, rng, seed: int) -> None:
        """Fill the floor using one of the initialization patterns."""
        pattern = InitPattern(pattern)
        if pattern == InitPattern.ALL_MAGENTA:
            self.fill_all_magenta()
        elif pattern == InitPattern.CHECKERBOARD:
            self.fill_checkerboard()
        else:
            self.fill_random_stripes(rng, seed)

    def fill_all_magenta(self) -> None:
        self.tiles.fill(MAGENTA)

    def fill_checkerboard(self) -> None:
        """Alternate 4x4 blocks of white and magenta, white at the origin."""
        blocks = (np.arange(self.rows)[:, None] // CHECKER_BLOCK +
                  np.arange(self.cols)[None, :] // CHECKER_BLOCK)
        self.tiles[:, :] = np.where(blocks % 2 == 0, WHITE, MAGENTA)

    def fill_random_stripes(self, rng, seed: int) -> None:
        """
        Draw one colour per column for the first row, then copy that row
        down the whole floor, giving vertical stripes.

        The generator is reseeded here so the stripes depend only on seed.
        """
        rng.seed(seed)
        for j in range(self.cols):
            self.tiles[0, j] = rng.randbelow(6) + 1
        self.tiles[1:, :] = self.tiles[0, :]

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.rows and 0 <= y < self.cols):
            raise IndexError(
                f"Tile ({x}, {y}) outside {self.rows}x{self.cols} floor"
            )

    def get(self, x: int, y: int) -> int:
        """Return colour code at position."""
        self._check_bounds(x, y)
        return int(self.tiles[x, y])

    def paint(self, x: int, y: int, colour: int) -> None:
        """Overwrite tile at position with colour."""
        self._check_bounds(x, y)
        self.tiles[x, y] = colour

    def colour_counts(self) -> Dict[int, int]:
        """Return number of tiles holding each colour code 1..6."""
        values, counts = np.unique(self.tiles, return_counts=True)
        found = {int(v): int(c) for v, c in zip(values, counts)}
        return {colour: found.get(colour, 0) for colour in TILE_COLOURS}

    def copy_tiles(self) -> np.ndarray:
        return self.tiles.copy()

    def to_rows(self) -> List[List[int]]:
        return self.tiles.tolist()

    def __repr__(self) -> str:
        return f"Floor(rows={self.rows}, cols={self.cols})"
