"""Text snapshot export for the painting robots simulation."""

import sys
from pathlib import Path
from typing import Optional, TextIO, TYPE_CHECKING

from ..errors import OutputError

if TYPE_CHECKING:
    from ..model.state import Snapshot

STDOUT = "-"


class SnapshotWriter:
    """
    Writes floor snapshots incrementally to a file or stdout.

    Output format:
        Iteration 0:
        6 6 6 6 5 5 5 5 ...
        ...
    """

    def __init__(self, destination: str = STDOUT, stream: Optional[TextIO] = None):
        self.destination = destination
        self.file: Optional[TextIO] = stream
        self._owns_file = False
        self._is_open = stream is not None
        self.snapshots_written = 0

    @property
    def to_stdout(self) -> bool:
        return self.destination == STDOUT

    def open(self) -> None:
        """Open the destination for writing."""
        if self._is_open:
            return
        if self.to_stdout:
            self.file = sys.stdout
        else:
            path = Path(self.destination)
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                self.file = open(path, 'w')
            except OSError as e:
                raise OutputError(f"Could not open output file {path}: {e}") from e
            self._owns_file = True
        self._is_open = True

    def write(self, snapshot: "Snapshot") -> None:
        """Write one snapshot: header line then one line per row."""
        if not self._is_open:
            self.open()
        try:
            self.file.write(snapshot.to_text())
            self.file.flush()
        except OSError as e:
            raise OutputError(
                f"Could not write iteration {snapshot.iteration} to "
                f"{self.destination}: {e}"
            ) from e
        self.snapshots_written += 1

    __call__ = write

    def close(self) -> None:
        """Close file handle."""
        if self.file and self._owns_file:
            try:
                self.file.close()
            except OSError as e:
                raise OutputError(f"Could not close {self.destination}: {e}") from e
        self.file = None
        self._owns_file = False
        self._is_open = False

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
