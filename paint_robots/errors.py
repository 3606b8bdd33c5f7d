"""Exception types for the painting robots simulation."""


class PaintRobotsError(Exception):
    """Base class for errors that abort a simulation run."""


class AllocationError(PaintRobotsError):
    """Grid or robot storage could not be obtained."""


class ConfigurationError(PaintRobotsError, ValueError):
    """Missing, incomplete or out-of-range simulation parameters."""


class OutputError(PaintRobotsError):
    """A snapshot could not be delivered to its destination."""
