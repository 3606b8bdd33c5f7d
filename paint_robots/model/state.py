"""Snapshot dataclass for the painting robots simulation."""

from dataclasses import dataclass
from typing import List

import numpy as np


@dataclass(frozen=True)
class Snapshot:
    """Copy of the floor colours at a given iteration, taken before robots move."""
    iteration: int
    tiles: np.ndarray

    def header(self) -> str:
        return f"Iteration {self.iteration}:"

    def to_lines(self) -> List[str]:
        """Header followed by one space-separated line per row, top row first."""
        lines = [self.header()]
        for row in self.tiles.tolist():
            lines.append(" ".join(str(code) for code in row))
        return lines

    def to_text(self) -> str:
        return "\n".join(self.to_lines()) + "\n"
