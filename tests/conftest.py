"""Shared fixtures for the painting robots tests."""

import pytest

from paint_robots.config import GridConfig, RobotConfig, SimulationConfig
from paint_robots.model.floor import InitPattern

# First rand() values after srand(1) with the GNU C library
GLIBC_SEED_1 = [
    1804289383, 846930886, 1681692777, 1714636915, 1957747793,
    424238335, 719885386, 1649760492, 596516649, 1189641421,
]


def build_config(rows=12, cols=12, count=2, pattern=InitPattern.ALL_MAGENTA,
                 seed=42, iterations=10, snapshot_interval=5,
                 output="-", generator="glibc") -> SimulationConfig:
    return SimulationConfig(
        grid=GridConfig(rows=rows, cols=cols),
        robots=RobotConfig(count=count),
        init_pattern=pattern,
        seed=seed,
        iterations=iterations,
        snapshot_interval=snapshot_interval,
        output=output,
        generator=generator,
    )


@pytest.fixture
def glibc_seed_1():
    """First rand() outputs after srand(1)."""
    return list(GLIBC_SEED_1)


@pytest.fixture
def make_config():
    """Factory for small in-memory configs."""
    return build_config


@pytest.fixture
def config() -> SimulationConfig:
    """Small, fast config for testing."""
    return build_config()
