"""Model package for the painting robots simulation."""

from .state import Snapshot
from .floor import Floor, InitPattern
from .robot import Robot, RobotSet, Direction, turn_for_colour
from .rng import GlibcRandom, NumpyRandom, make_rng
from .engine import SimulationEngine

__all__ = [
    'Snapshot',
    'Floor',
    'InitPattern',
    'Robot',
    'RobotSet',
    'Direction',
    'turn_for_colour',
    'GlibcRandom',
    'NumpyRandom',
    'make_rng',
    'SimulationEngine',
]
