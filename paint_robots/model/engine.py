"""Simulation engine for the painting robots."""

import logging
from typing import Any, Callable, Dict, Iterator, Set, TYPE_CHECKING

from ..errors import ConfigurationError
from .floor import Floor, InitPattern
from .robot import BURST_LENGTH, Robot, RobotSet, TURN_RULES
from .rng import make_rng
from .state import Snapshot

if TYPE_CHECKING:
    from ..config import SimulationConfig

logger = logging.getLogger(__name__)


class SimulationEngine:
    """
    Runs the fixed-iteration painting loop.

    Each tick, in order:
    1. Emit a snapshot if the tick is a multiple of the snapshot interval
    2. For every robot in index order, move BURST_LENGTH tiles, painting
       each tile landed on
    3. Turn each robot by the colour of the tile its burst ended on

    Ticks run from 0 to config.iterations inclusive.
    """

    def __init__(self, config: "SimulationConfig", rng=None):
        if config.snapshot_interval < 1:
            raise ConfigurationError(
                f"Snapshot interval must be at least 1, got {config.snapshot_interval}"
            )

        self.config = config
        self.current_iteration = 0
        self.snapshots_emitted = 0
        self.rng = rng if rng is not None else make_rng(config.generator)
        self._unknown_colours: Set[int] = set()

        # Floor and robots are seeded separately with the same seed
        self.floor = Floor.allocate(config.grid.rows, config.grid.cols)
        self.floor.initialize(config.init_pattern, self.rng, config.seed)

        self.robots = RobotSet.initialize(
            config.robots.count, config.grid.rows, config.grid.cols,
            self.rng, config.seed
        )

        logger.info("Engine initialized: %dx%d floor, %d robots, pattern=%s, seed=%d",
                    self.floor.rows, self.floor.cols, len(self.robots),
                    InitPattern(config.init_pattern).name, config.seed)

    def advance_robot(self, robot: Robot) -> None:
        """Run one robot's movement burst, then turn on the final tile."""
        for _ in range(BURST_LENGTH):
            robot.step(self.floor.rows, self.floor.cols)
            self.floor.paint(robot.x, robot.y, robot.paint_colour)

        final_colour = self.floor.get(robot.x, robot.y)
        if final_colour not in TURN_RULES and final_colour not in self._unknown_colours:
            self._unknown_colours.add(final_colour)
            logger.warning("No turn rule for tile colour %d; robot %d keeps direction %s",
                           final_colour, robot.robot_id, robot.direction.name)
        robot.turn(final_colour)

    def tick(self) -> None:
        """Advance every robot once, in index order."""
        for robot in self.robots:
            self.advance_robot(robot)
        self.current_iteration += 1

    def should_snapshot(self, iteration: int) -> bool:
        return iteration % self.config.snapshot_interval == 0

    def snapshot(self) -> Snapshot:
        """Create a snapshot of the floor at the current iteration."""
        return Snapshot(iteration=self.current_iteration,
                        tiles=self.floor.copy_tiles())

    def iter_snapshots(self) -> Iterator[Snapshot]:
        """
        Run the remaining ticks, yielding each due snapshot before that
        tick's robots move.
        """
        while not self.is_finished():
            if self.should_snapshot(self.current_iteration):
                yield self.snapshot()
                self.snapshots_emitted += 1
            self.tick()

    def run(self, sink: Callable[[Snapshot], Any]) -> int:
        """
        Run to completion, passing every snapshot to sink.

        Exceptions raised by sink propagate and end the run.
        Returns the number of snapshots emitted.
        """
        for snap in self.iter_snapshots():
            sink(snap)
        logger.info("Run complete after %d iterations, %d snapshots",
                    self.config.iterations, self.snapshots_emitted)
        return self.snapshots_emitted

    def is_finished(self) -> bool:
        """True once tick config.iterations has been processed."""
        return self.current_iteration > self.config.iterations

    def get_summary(self) -> Dict:
        """Get summary statistics for the simulation."""
        return {
            'iterations': min(self.current_iteration, self.config.iterations + 1),
            'snapshots': self.snapshots_emitted,
            'robots': [
                {
                    'id': r.robot_id,
                    'x': r.x,
                    'y': r.y,
                    'direction': r.direction.name,
                    'paint_colour': r.paint_colour,
                }
                for r in self.robots
            ],
            'colour_counts': self.floor.colour_counts(),
            'unknown_colours': sorted(self._unknown_colours),
        }
