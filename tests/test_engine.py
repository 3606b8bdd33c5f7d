"""Tests for the simulation engine (tick loop)."""

import logging

import numpy as np
import pytest

from paint_robots.errors import ConfigurationError
from paint_robots.model.engine import SimulationEngine
from paint_robots.model.floor import InitPattern
from paint_robots.model.robot import Direction, Robot, RobotSet


def single_robot_engine(make_config, robot: Robot) -> SimulationEngine:
    engine = SimulationEngine(make_config(count=1, pattern=InitPattern.ALL_MAGENTA))
    engine.robots = RobotSet([robot])
    return engine


def collect(engine: SimulationEngine):
    snapshots = []
    engine.run(snapshots.append)
    return snapshots


class TestInitialization:

    def test_builds_floor_and_robots(self, make_config):
        engine = SimulationEngine(make_config(rows=14, cols=20, count=3))
        assert engine.floor.rows == 14
        assert engine.floor.cols == 20
        assert len(engine.robots) == 3
        assert engine.current_iteration == 0

    def test_rejects_zero_interval(self, make_config):
        with pytest.raises(ConfigurationError):
            SimulationEngine(make_config(snapshot_interval=0))

    def test_floor_and_robots_use_same_seed(self, make_config):
        config = make_config(pattern=InitPattern.RANDOM_STRIPES, seed=321)
        engine = SimulationEngine(config)
        other = SimulationEngine(make_config(pattern=InitPattern.ALL_MAGENTA, seed=321))
        # Robot placement is reseeded, so the stripe draws do not shift it
        assert engine.robots.robots == other.robots.robots


class TestAdvanceRobot:

    def test_burst_paints_four_tiles(self, make_config):
        robot = Robot(0, 0, 0, Direction.RIGHT, 4)
        engine = single_robot_engine(make_config, robot)
        engine.advance_robot(robot)
        assert robot.position == (0, 4)
        assert [engine.floor.get(0, y) for y in range(6)] == [5, 4, 4, 4, 4, 5]

    def test_burst_wraps_and_stays_in_bounds(self, make_config):
        robot = Robot(0, 1, 0, Direction.UP, 4)
        engine = single_robot_engine(make_config, robot)
        engine.advance_robot(robot)
        assert robot.position == (9, 0)
        for x in (0, 11, 10, 9):
            assert engine.floor.get(x, 0) == 4

    @pytest.mark.parametrize("colour,expected", [
        (1, Direction.DOWN),
        (2, Direction.LEFT),
        (3, Direction.UP),
        (4, Direction.RIGHT),
    ])
    def test_turn_by_final_tile(self, make_config, colour, expected):
        robot = Robot(0, 0, 0, Direction.RIGHT, colour)
        engine = single_robot_engine(make_config, robot)
        engine.advance_robot(robot)
        assert robot.direction == expected

    def test_unknown_colour_keeps_direction(self, make_config, caplog):
        robot = Robot(0, 0, 0, Direction.RIGHT, 7)
        engine = single_robot_engine(make_config, robot)
        with caplog.at_level(logging.WARNING, logger="paint_robots.model.engine"):
            engine.advance_robot(robot)
            engine.advance_robot(robot)
        assert robot.direction == Direction.RIGHT
        assert engine.get_summary()['unknown_colours'] == [7]
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1

    def test_later_robot_overwrites_earlier_paint(self, make_config):
        first = Robot(0, 0, 0, Direction.RIGHT, 1)
        second = Robot(1, 1, 2, Direction.UP, 3)
        engine = SimulationEngine(make_config(count=2))
        engine.robots = RobotSet([first, second])
        engine.tick()
        # second robot's path crosses (0, 2) after the first painted it
        assert engine.floor.get(0, 2) == 3
        assert engine.floor.get(0, 1) == 1


class TestRun:

    def test_snapshot_count_and_headers(self, make_config):
        engine = SimulationEngine(make_config(iterations=10, snapshot_interval=5))
        snapshots = collect(engine)
        assert [s.header() for s in snapshots] == [
            "Iteration 0:", "Iteration 5:", "Iteration 10:"
        ]
        assert engine.snapshots_emitted == 3

    def test_runs_inclusive_tick_count(self, make_config):
        engine = SimulationEngine(make_config(iterations=7, snapshot_interval=100))
        snapshots = collect(engine)
        assert [s.iteration for s in snapshots] == [0]
        assert engine.current_iteration == 8
        assert engine.is_finished()

    def test_first_snapshot_precedes_movement(self, make_config):
        engine = SimulationEngine(make_config(pattern=InitPattern.ALL_MAGENTA))
        snapshots = collect(engine)
        assert np.all(snapshots[0].tiles == 5)
        assert not np.all(snapshots[-1].tiles == 5)

    def test_snapshot_is_a_copy(self, make_config):
        engine = SimulationEngine(make_config(pattern=InitPattern.ALL_MAGENTA))
        snapshots = collect(engine)
        assert snapshots[0].tiles is not engine.floor.tiles
        assert np.all(snapshots[0].tiles == 5)

    def test_snapshot_lines(self, make_config):
        engine = SimulationEngine(make_config(rows=12, cols=12,
                                              pattern=InitPattern.CHECKERBOARD))
        lines = engine.snapshot().to_lines()
        assert lines[0] == "Iteration 0:"
        assert len(lines) == 13
        assert lines[1] == "6 6 6 6 5 5 5 5 6 6 6 6"
        assert lines[5] == "5 5 5 5 6 6 6 6 5 5 5 5"

    @pytest.mark.parametrize("generator", ["glibc", "numpy"])
    @pytest.mark.parametrize("pattern", list(InitPattern))
    def test_deterministic(self, make_config, generator, pattern):
        config = make_config(rows=15, cols=19, count=6, pattern=pattern,
                             seed=2024, iterations=60, snapshot_interval=7,
                             generator=generator)
        a = [s.to_text() for s in collect(SimulationEngine(config))]
        b = [s.to_text() for s in collect(SimulationEngine(config))]
        assert a == b

    def test_sink_error_aborts_run(self, make_config):
        engine = SimulationEngine(make_config(iterations=20, snapshot_interval=5))
        seen = []

        def sink(snapshot):
            seen.append(snapshot.iteration)
            if snapshot.iteration == 5:
                raise OSError("disk full")

        with pytest.raises(OSError):
            engine.run(sink)
        assert seen == [0, 5]
        assert engine.current_iteration == 5
        assert engine.snapshots_emitted == 1

    def test_summary(self, make_config):
        engine = SimulationEngine(make_config(count=3, iterations=10))
        collect(engine)
        summary = engine.get_summary()
        assert summary['iterations'] == 11
        assert summary['snapshots'] == 3
        assert len(summary['robots']) == 3
        assert sum(summary['colour_counts'].values()) == 144


class TestBounds:

    def test_robots_stay_in_bounds(self, make_config):
        sizes = np.random.default_rng(5)
        for _ in range(15):
            rows = int(sizes.integers(12, 40))
            cols = int(sizes.integers(12, 40))
            seed = int(sizes.integers(10, 32768))
            pattern = InitPattern(int(sizes.integers(1, 4)))
            engine = SimulationEngine(make_config(rows=rows, cols=cols, count=10,
                                                  pattern=pattern, seed=seed,
                                                  iterations=50))
            for snapshot in engine.iter_snapshots():
                assert snapshot.tiles.shape == (rows, cols)
                for robot in engine.robots:
                    assert 0 <= robot.x < rows
                    assert 0 <= robot.y < cols
            assert engine.floor.tiles.min() >= 1
            assert engine.floor.tiles.max() <= 6
