"""Entrypoint demonstrating the 3x3 and 3x3x3 grids through their shared contract."""

from __future__ import annotations

import argparse
from pathlib import Path
import sys
from typing import Any, Dict, List, Optional

import numpy as np
import yaml

from grid_demo.src.core import GridContract, GridError, ThreeDGrid, TwoDGrid
from grid_demo.src.utils.config_loader import fill_range, load_config, load_demo_config
from grid_demo.src.utils.console import ConsoleIO
from grid_demo.src.utils.logger import get_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Demonstrate fixed-size 2D and 3D integer grids")
    parser.add_argument("--config", type=Path, default=None, help="YAML or JSON settings file")
    parser.add_argument("--min", dest="min_value", type=int, default=None, help="Lower bound for random fill")
    parser.add_argument("--max", dest="max_value", type=int, default=None, help="Upper bound for random fill")
    parser.add_argument("--seed", type=int, default=None, help="Seed a dedicated random generator")
    parser.add_argument("--no-input", action="store_true", help="Skip the console input section")
    parser.add_argument("--verbose", action="store_true", help="Log grid lifecycle events")
    return parser


def _optional_int(value: Any) -> Optional[int]:
    return None if value is None else int(value)


def resolve_settings(args: argparse.Namespace) -> Dict[str, Any]:
    """Merge the config file with command line overrides."""
    config = load_config(str(args.config)) if args.config else load_demo_config()
    low, high = fill_range(config)
    return {
        "min_value": args.min_value if args.min_value is not None else low,
        "max_value": args.max_value if args.max_value is not None else high,
        "seed": args.seed if args.seed is not None else _optional_int(config.get("seed")),
        "interactive": False if args.no_input else bool(config.get("interactive", True)),
        "log_level": "DEBUG" if args.verbose else config.get("log_level", "INFO"),
        "log_file": config.get("log_file"),
    }


def report(console: ConsoleIO, grid: GridContract, label: str) -> None:
    grid.print()
    console.write_line(f"Minimum element ({label}): {grid.min_element()}")


def run(settings: Dict[str, Any], console: Optional[ConsoleIO] = None) -> None:
    console = console or ConsoleIO()
    rng = np.random.default_rng(settings["seed"]) if settings["seed"] is not None else None
    low, high = settings["min_value"], settings["max_value"]

    console.write_line("Demonstration of the 2D and 3D grid classes (3x3, 3x3x3)")

    m2 = TwoDGrid(rng=rng, console=console)
    m2.fill_random(low, high)
    report(console, m2, "2D")
    console.write_line()

    m3: GridContract = ThreeDGrid(rng=rng, console=console)
    m3.fill_random(low, high)
    report(console, m3, "3D")
    console.write_line()

    grids: List[GridContract] = [
        TwoDGrid(fill_random=True, rng=rng, console=console),
        ThreeDGrid(fill_random=True, rng=rng, console=console),
    ]
    for grid, label in zip(grids, ["2D", "3D"]):
        console.write_line(f"--- Through the grid contract ({label}) ---")
        report(console, grid, f"contract, {label}")
    console.write_line()

    if not settings["interactive"]:
        return

    for grid, label in ((TwoDGrid(console=console), "2D"), (ThreeDGrid(console=console), "3D")):
        console.write_line(f"Console input example for the {label} grid:")
        grid.input_from_console()
        report(console, grid, f"user {label}")
        console.write_line()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = resolve_settings(args)
        logger = get_logger("grid_demo", settings["log_file"], settings["log_level"])
    except (ValueError, TypeError, OSError, yaml.YAMLError) as exc:
        print(f"[ERROR] invalid configuration: {exc}", file=sys.stderr)
        return 1
    logger.info(
        "Fill range [%d, %d], seed=%s, interactive=%s",
        settings["min_value"],
        settings["max_value"],
        settings["seed"],
        settings["interactive"],
    )
    try:
        run(settings)
    except GridError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1
    except EOFError:
        print("[ERROR] console input ended before every cell was entered", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
