"""Summary report generation for the painting robots simulation."""

from typing import Dict, List, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from ..config import SimulationConfig
    from ..model.state import Snapshot

COLOUR_NAMES = {
    1: "colour 1",
    2: "colour 2",
    3: "colour 3",
    4: "colour 4 (blue)",
    5: "magenta",
    6: "white",
}


class Reporter:
    """Generates summary statistics and formatted text report."""

    def __init__(self, config: "SimulationConfig"):
        self.config = config
        self.snapshot_counts: List[Dict[int, int]] = []

    def update(self, snapshot: "Snapshot") -> None:
        """Accumulate colour distribution per snapshot."""
        values, counts = np.unique(snapshot.tiles, return_counts=True)
        self.snapshot_counts.append({int(v): int(c) for v, c in zip(values, counts)})

    def peak_painted(self) -> int:
        """Largest number of tiles holding a paint colour (1-4) in any snapshot."""
        return max(
            (sum(counts.get(c, 0) for c in (1, 2, 3, 4)) for counts in self.snapshot_counts),
            default=0
        )

    def generate_summary(self, summary: Dict) -> str:
        """Returns formatted text report from SimulationEngine.get_summary()."""
        config = self.config
        total_tiles = config.grid.rows * config.grid.cols

        lines = [
            "",
            "=" * 80,
            "                    PAINTING ROBOTS SIMULATION REPORT",
            "=" * 80,
            f"Configuration: {config.source}",
            f"Random Seed:   {config.seed} ({config.generator} generator)",
            f"Floor:         {config.grid.rows}x{config.grid.cols}, "
            f"{config.init_pattern.name.lower()}",
            "",
            "SIMULATION METRICS",
            "-" * 40,
            f"Iterations Run:        {summary['iterations']}",
            f"Snapshots Written:     {summary['snapshots']}",
            f"Robots:                {len(summary['robots'])}",
            f"Peak Painted Tiles:    {self.peak_painted()} / {total_tiles}",
            "",
            "FINAL TILE COLOURS",
            "-" * 40,
        ]

        for colour, count in summary['colour_counts'].items():
            pct = count / total_tiles * 100 if total_tiles > 0 else 0
            lines.append(f"{COLOUR_NAMES[colour]:<18} {count:>6} ({pct:.1f}%)")

        if summary.get('unknown_colours'):
            lines.append(f"[!] Tiles without a turn rule: {summary['unknown_colours']}")

        lines.extend(["", "FINAL ROBOT STATES", "-" * 40])
        for robot in summary['robots']:
            lines.append(
                f"Robot {robot['id']}: ({robot['x']}, {robot['y']}) "
                f"facing {robot['direction'].lower()}, paints {robot['paint_colour']}"
            )

        lines.extend([
            "",
            "OUTPUT",
            "-" * 40,
            f"Snapshots:  {'stdout' if config.output == '-' else config.output}",
            "=" * 80,
        ])

        return "\n".join(lines)
