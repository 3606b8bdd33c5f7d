"""Configuration dataclasses and loaders for the painting robots simulation."""

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .errors import ConfigurationError
from .model.floor import InitPattern
from .model.rng import GENERATORS

MIN_ROWS, MAX_ROWS = 12, 100
MIN_COLS, MAX_COLS = 12, 100
MIN_ROBOTS, MAX_ROBOTS = 1, 10
MIN_SEED, MAX_SEED = 10, 32767
MIN_ITERATIONS, MAX_ITERATIONS = 5, 2000
MAX_OUTPUT_LENGTH = 49

PARAMETER_FIELD_COUNT = 8


@dataclass
class GridConfig:
    rows: int
    cols: int


@dataclass
class RobotConfig:
    count: int


@dataclass
class SimulationConfig:
    grid: GridConfig
    robots: RobotConfig
    init_pattern: InitPattern
    seed: int
    iterations: int
    snapshot_interval: int
    output: str = "-"
    generator: str = "glibc"
    quiet: bool = False
    source: str = field(default="<memory>", compare=False)


def parse_pattern(raw: Union[int, str, InitPattern]) -> InitPattern:
    """Accept a pattern number (1-3) or name such as 'checkerboard'."""
    if isinstance(raw, str) and not raw.strip().isdigit():
        key = raw.strip().upper().replace('-', '_').replace(' ', '_')
        try:
            return InitPattern[key]
        except KeyError:
            raise ConfigurationError(f"Unknown floor pattern: {raw!r}") from None
    try:
        return InitPattern(int(raw))
    except (TypeError, ValueError):
        raise ConfigurationError(
            f"Floor pattern must be 1, 2 or 3, got {raw!r}"
        ) from None


def _check_range(name: str, value: int, low: int, high: int) -> None:
    if not (low <= value <= high):
        raise ConfigurationError(f"{name} must be in [{low}, {high}], got {value}")


def validate(config: SimulationConfig) -> SimulationConfig:
    """Check every parameter against its allowed range."""
    _check_range("rows", config.grid.rows, MIN_ROWS, MAX_ROWS)
    _check_range("cols", config.grid.cols, MIN_COLS, MAX_COLS)
    _check_range("robot count", config.robots.count, MIN_ROBOTS, MAX_ROBOTS)
    _check_range("seed", config.seed, MIN_SEED, MAX_SEED)
    _check_range("iterations", config.iterations, MIN_ITERATIONS, MAX_ITERATIONS)
    if config.snapshot_interval < 1:
        raise ConfigurationError(
            f"snapshot interval must be at least 1, got {config.snapshot_interval}"
        )
    if not config.output or len(config.output) > MAX_OUTPUT_LENGTH:
        raise ConfigurationError(
            f"output destination must be 1-{MAX_OUTPUT_LENGTH} characters, "
            f"got {len(config.output)}"
        )
    if config.generator not in GENERATORS:
        raise ConfigurationError(f"Unknown random generator: {config.generator!r}")
    return config


def with_overrides(config: SimulationConfig, **overrides: Any) -> SimulationConfig:
    """Return a validated copy with the non-None overrides applied."""
    changes = {k: v for k, v in overrides.items() if v is not None}
    return validate(replace(config, **changes))


def _as_int(section: Dict[str, Any], key: str, where: str) -> int:
    try:
        value = section[key]
    except KeyError:
        raise ConfigurationError(f"Missing '{where}.{key}' in configuration") from None
    if isinstance(value, (bool, float)):
        raise ConfigurationError(f"'{where}.{key}' must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(
            f"'{where}.{key}' must be an integer, got {value!r}"
        ) from None


def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = raw.get(name)
    if not isinstance(section, dict):
        raise ConfigurationError(f"Missing '{name}' section in configuration")
    return section


def load_config(config_path: Path) -> SimulationConfig:
    """Load and validate YAML configuration file."""
    try:
        with open(config_path, encoding='utf-8') as f:
            raw = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Could not open input file: {config_path}") from e
    except UnicodeDecodeError as e:
        raise ConfigurationError(f"Configuration in {config_path} is not valid UTF-8") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigurationError(f"Configuration in {config_path} must be a mapping")

    grid_raw = _section(raw, 'grid')
    robots_raw = _section(raw, 'robots')
    floor_raw = _section(raw, 'floor')
    sim_raw = _section(raw, 'simulation')

    # Parse export config (optional)
    export_raw = raw.get('export')
    if export_raw is None:
        export_raw = {}
    elif not isinstance(export_raw, dict):
        raise ConfigurationError("'export' section must be a mapping")

    if 'pattern' not in floor_raw:
        raise ConfigurationError("Missing 'floor.pattern' in configuration")

    config = SimulationConfig(
        grid=GridConfig(
            rows=_as_int(grid_raw, 'rows', 'grid'),
            cols=_as_int(grid_raw, 'cols', 'grid'),
        ),
        robots=RobotConfig(count=_as_int(robots_raw, 'count', 'robots')),
        init_pattern=parse_pattern(floor_raw['pattern']),
        seed=_as_int(sim_raw, 'seed', 'simulation'),
        iterations=_as_int(sim_raw, 'iterations', 'simulation'),
        snapshot_interval=_as_int(sim_raw, 'snapshot_interval', 'simulation'),
        output=str(export_raw.get('output', '-')),
        generator=str(sim_raw.get('generator', 'glibc')).lower(),
        source=str(config_path),
    )
    return validate(config)


def load_parameter_file(path: Path) -> SimulationConfig:
    """
    Load the whitespace-separated parameter format:

        rows cols robots initType seed iterations interval outputFilename
    """
    try:
        with open(path, encoding='utf-8') as f:
            tokens = f.read().split()
    except OSError as e:
        raise ConfigurationError(f"Could not open input file: {path}") from e
    except UnicodeDecodeError:
        raise ConfigurationError("Corrupt or incomplete data in input file") from None

    if len(tokens) < PARAMETER_FIELD_COUNT:
        raise ConfigurationError("Corrupt or incomplete data in input file")
    try:
        rows, cols, count, pattern, seed, iterations, interval = (
            int(t) for t in tokens[:PARAMETER_FIELD_COUNT - 1]
        )
    except ValueError:
        raise ConfigurationError("Corrupt or incomplete data in input file") from None

    config = SimulationConfig(
        grid=GridConfig(rows=rows, cols=cols),
        robots=RobotConfig(count=count),
        init_pattern=parse_pattern(pattern),
        seed=seed,
        iterations=iterations,
        snapshot_interval=interval,
        output=tokens[PARAMETER_FIELD_COUNT - 1],
        source=str(path),
    )
    return validate(config)


def load_any(path: Path) -> SimulationConfig:
    """Pick the loader from the file extension."""
    path = Path(path)
    if path.suffix.lower() in ('.yaml', '.yml'):
        return load_config(path)
    return load_parameter_file(path)
