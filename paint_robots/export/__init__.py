"""I/O package for the painting robots simulation."""

from .snapshot_writer import SnapshotWriter
from .reporter import Reporter

__all__ = ['SnapshotWriter', 'Reporter']
