#!/usr/bin/env python3
"""
Painting Robots Simulation

Robots wander a wrap-around floor of coloured tiles, painting as they go
and turning according to the colour they finish each burst on.

Usage:
    python -m paint_robots.main --config robots_input.txt [options]

Examples:
    python -m paint_robots.main --config robots_input.txt
    python -m paint_robots.main --config configs/checkerboard.yaml --output out/snapshots.txt
    python -m paint_robots.main --config configs/checkerboard.yaml --seed 4242 --quiet
    python -m paint_robots.main --config robots_input.txt --generator numpy
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from paint_robots.config import load_any, with_overrides
from paint_robots.errors import PaintRobotsError
from paint_robots.export.reporter import Reporter
from paint_robots.export.snapshot_writer import SnapshotWriter
from paint_robots.model.engine import SimulationEngine
from paint_robots.model.rng import GENERATORS


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Painting Robots Simulation',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m paint_robots.main --config robots_input.txt
    python -m paint_robots.main --config configs/checkerboard.yaml --output out/snapshots.txt
    python -m paint_robots.main --config configs/checkerboard.yaml --seed 4242 --quiet
    python -m paint_robots.main --config robots_input.txt --generator numpy
        """
    )

    # Required arguments
    parser.add_argument('--config', type=Path, required=True,
                        help='YAML config (.yaml/.yml) or whitespace parameter file')

    # Optional overrides
    parser.add_argument('--iterations', type=int, default=None,
                        help='Override number of iterations')
    parser.add_argument('--interval', type=int, default=None,
                        help='Override snapshot interval')
    parser.add_argument('--seed', type=int, default=None,
                        help='Override random seed')
    parser.add_argument('--output', type=str, default=None,
                        help="Snapshot destination file, or '-' for stdout")
    parser.add_argument('--generator', choices=sorted(GENERATORS), default=None,
                        help='Random generator (default: glibc)')

    parser.add_argument('--quiet', action='store_true', default=False,
                        help='Suppress progress and summary output')
    parser.add_argument('--verbose', action='store_true', default=False,
                        help='Enable info-level logging')

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    # Load configuration and apply CLI overrides
    try:
        config = load_any(args.config)
        config = with_overrides(
            config,
            iterations=args.iterations,
            snapshot_interval=args.interval,
            seed=args.seed,
            output=args.output,
            generator=args.generator,
        )
    except PaintRobotsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Snapshots on stdout would interleave with progress text
    config.quiet = args.quiet or config.output == '-'

    if not config.quiet:
        print(f"Initializing simulation...")
        print(f"  Floor: {config.grid.rows}x{config.grid.cols} "
              f"({config.init_pattern.name.lower()})")
        print(f"  Robots: {config.robots.count}")
        print(f"  Iterations: {config.iterations} "
              f"(snapshot every {config.snapshot_interval})")

    reporter = Reporter(config)

    try:
        engine = SimulationEngine(config)

        with SnapshotWriter(config.output) as writer:
            def emit(snapshot):
                writer.write(snapshot)
                reporter.update(snapshot)

            if not config.quiet:
                print(f"\nRunning simulation...")
            engine.run(emit)

    except PaintRobotsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user.", file=sys.stderr)
        return 1

    if not config.quiet:
        print(f"Snapshots saved: {config.output}")
        print(reporter.generate_summary(engine.get_summary()))

    return 0


if __name__ == '__main__':
    sys.exit(main())
