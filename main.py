"""Command-line entry point for sector generation."""
from __future__ import annotations

import argparse
import cProfile
import io
import json
import pstats
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from galaxygen.engine.config import GenerationConfig
from galaxygen.engine.errors import ConfigurationError
from galaxygen.engine.logger import init_logger
from galaxygen.engine.registry import EntityRegistry
from galaxygen.generation.sector_generator import SectorGenerator


SETTINGS_PATH = Path("settings.json")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate star systems for galactic sectors")
    parser.add_argument("--settings", type=Path, default=SETTINGS_PATH, help="settings.json to read")
    parser.add_argument("--seed", type=int, help="Override the configured random seed")
    parser.add_argument(
        "--sector",
        type=int,
        nargs=3,
        action="append",
        metavar=("X", "Y", "Z"),
        help="Sector grid coordinate; may be repeated (default 0 0 0)",
    )
    parser.add_argument("--output", type=Path, help="Write JSON here instead of stdout")
    parser.add_argument("--profile", action="store_true", help="Print profiler results to stderr")
    return parser


def generate(config: GenerationConfig, sectors: Sequence[Sequence[int]], settings_path: Path) -> Dict[str, Any]:
    logger = init_logger(settings_path)
    registry = EntityRegistry(logger)
    generator = SectorGenerator(config, logger, registry)
    generated: List[Dict[str, Any]] = []
    for x, y, z in sectors:
        generated.append(generator.generate(x, y, z).to_dict())
    return {
        "seed": generator.resolved_seed,
        "config": config.to_dict(),
        "counts": registry.counts(),
        "sectors": generated,
    }


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = GenerationConfig.from_settings(args.settings)
    if args.seed is not None:
        config.random_seed = args.seed
    sectors = args.sector or [[0, 0, 0]]

    profiler = cProfile.Profile() if args.profile else None
    try:
        if profiler is not None:
            profiler.enable()
        document = generate(config, sectors, args.settings)
    except ConfigurationError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2
    finally:
        if profiler is not None:
            profiler.disable()
            stats_stream = io.StringIO()
            stats = pstats.Stats(profiler, stream=stats_stream)
            stats.strip_dirs().sort_stats("cumulative").print_stats(25)
            print("\nProfiler results (top 25 cumulative):", file=sys.stderr)
            print(stats_stream.getvalue(), file=sys.stderr)

    payload = json.dumps(document, indent=2)
    if args.output is not None:
        args.output.write_text(payload)
    else:
        print(payload)
    return 0


if __name__ == "__main__":
    sys.exit(main())
