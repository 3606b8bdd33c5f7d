"""Painting robots on a wrap-around tile floor."""

from .errors import AllocationError, ConfigurationError, OutputError, PaintRobotsError
from .config import SimulationConfig, GridConfig, RobotConfig, load_any
from .model.engine import SimulationEngine

__version__ = "0.1.0"

__all__ = [
    'AllocationError',
    'ConfigurationError',
    'OutputError',
    'PaintRobotsError',
    'SimulationConfig',
    'GridConfig',
    'RobotConfig',
    'load_any',
    'SimulationEngine',
]
