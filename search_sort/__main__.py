"""Application entry point."""

import argparse
import math
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .app.app_config import AppConfig
from .app.report import bench_table, format_values, print_renderable, search_message
from .bench import BenchConfig, run_bench
from .common.logging import configure_logging, get_logger
from .registry import ORDERED_SEARCHES, SEARCHES, SORTS, get_search, get_sort

logger = get_logger(__name__)


def parse_values(tokens: Sequence[str]) -> list[Any]:
    """Parse tokens as integers, else floats, else keep them as strings.

    NaN and infinities are rejected, since the algorithms need a total order.
    """
    for kind in (int, float):
        try:
            values = [kind(token) for token in tokens]
        except ValueError:
            continue
        non_finite = [token for token, value in zip(tokens, values) if not math.isfinite(value)]
        if non_finite:
            raise ValueError(f"Values must be finite numbers, got {non_finite}")
        return values
    return list(tokens)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(prog="search-sort", description="Classic search and sort algorithms")
    parser.add_argument("--config", type=Path, help="Path of a JSON configuration file")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Override the log level")
    parser.add_argument("--log-format", choices=["console", "json"], help="Override the log format")
    commands = parser.add_subparsers(dest="command", required=True)

    sort_cmd = commands.add_parser("sort", help="Sort values")
    sort_cmd.add_argument("--algorithm", choices=sorted(SORTS), help="Sort to use")
    sort_cmd.add_argument("values", nargs="*", help="Values to sort")

    search_cmd = commands.add_parser("search", help="Search for a value")
    search_cmd.add_argument("--algorithm", choices=sorted(SEARCHES), help="Search to use")
    search_cmd.add_argument("--value", required=True, help="Value to look for")
    search_cmd.add_argument("values", nargs="*", help="Values to search in")

    bench_cmd = commands.add_parser("bench", help="Time the sorts")
    bench_cmd.add_argument("--sizes", type=int, nargs="+", help="Input lengths")
    bench_cmd.add_argument("--repeats", type=int, help="Timed runs per algorithm and size")
    bench_cmd.add_argument("--seed", type=int, help="Seed of the input generator")
    bench_cmd.add_argument("--distribution", choices=["random", "sorted", "reversed", "few_unique"])
    bench_cmd.add_argument("--algorithms", nargs="+", choices=sorted(SORTS), help="Sorts to time")
    bench_cmd.add_argument("--no-progress", action="store_true", help="Hide the progress bar")

    config_cmd = commands.add_parser("config", help="Show the effective configuration")
    config_cmd.add_argument("--save", action="store_true", help="Write it to the configuration file")
    return parser


def run_sort(args: argparse.Namespace, config: AppConfig) -> int:
    """Sort the given values and print them."""
    name = args.algorithm or config.default_sort
    values = parse_values(args.values)
    get_sort(name)(values)
    logger.debug("Sorted values", algorithm=name, count=len(values))
    print(format_values(values))
    return 0


def run_search(args: argparse.Namespace, config: AppConfig) -> int:
    """Search for a value; exit status 1 when it is absent."""
    name = args.algorithm or config.default_search
    value, *values = parse_values([args.value, *args.values])
    if name in ORDERED_SEARCHES:
        values.sort()
        print(f"sorted: {format_values(values)}")
    index = get_search(name)(values, value)
    logger.debug("Searched value", algorithm=name, count=len(values), found=index is not None)
    print_renderable(search_message(index, value))
    return 0 if index is not None else 1


def run_bench_command(args: argparse.Namespace, config: AppConfig) -> int:
    """Run the benchmark and print a table of timings."""
    overrides = {
        key: getattr(args, key)
        for key in ("sizes", "repeats", "seed", "distribution", "algorithms")
        if getattr(args, key) is not None
    }
    bench_config = BenchConfig.model_validate({**config.bench.model_dump(), **overrides})
    results = run_bench(bench_config, progress=not args.no_progress)
    print_renderable(bench_table(results))
    return 0


def run_config(args: argparse.Namespace, config: AppConfig) -> int:
    """Print the effective configuration, optionally saving it."""
    print(config.model_dump_json(indent=2))
    if args.save:
        path = config.save(args.config)
        print(f"Configuration written to {path}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = AppConfig.load(args.config)
        if args.log_level or args.log_format:
            config = AppConfig.model_validate(
                {
                    **config.model_dump(),
                    "log_level": args.log_level or config.log_level,
                    "log_format": args.log_format or config.log_format,
                }
            )
    except FileNotFoundError as e:
        parser.error(f"Configuration file not found: {e.filename}")
    except ValidationError as e:
        parser.error(f"Invalid configuration: {e}")

    configure_logging(config.log_level, config.log_format)

    handlers = {
        "sort": run_sort,
        "search": run_search,
        "bench": run_bench_command,
        "config": run_config,
    }
    try:
        return handlers[args.command](args, config)
    except ValueError as e:
        parser.error(str(e))


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
