"""
tilemap puzzles - Entry Point

Runs a registered puzzle solver on an input file and prints the answer.

Example:
    python main.py toboggan --input data/toboggan/input --show-maps
    python main.py expense_report -i report.txt
    python main.py --list
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import Any, Dict, List, Optional

from tilemap.map import CharTile, MapReadError, parse_map
from tilemap.map.debug import save_map_image
from tilemap.puzzles import (
    PuzzleContext,
    PuzzleInputError,
    create_puzzle,
    get_default_puzzle_name,
    get_puzzle_info,
)
from tilemap.settings import load_settings


logger = logging.getLogger(__name__)

# Fill colors for the --image rendering, keyed by input character
IMAGE_PALETTE = {
    "#": "#2e7d32",
    ".": "#e0e0e0",
}


def setup_logging(level: str, log_file: Optional[str] = None) -> None:
    """Configure logging to the console and optionally a file."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
    )


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="tilemap puzzles - Solve text puzzles built on sparse maps"
    )
    parser.add_argument(
        "puzzle",
        nargs="?",
        help="Puzzle to solve (default: puzzle_name from config.json, else toboggan)"
    )
    parser.add_argument(
        "--input", "-i",
        help="Puzzle input file (default: <data_dir>/<puzzle>/input)"
    )
    parser.add_argument(
        "--config", "-c",
        help="Settings file (default: config.json)"
    )
    parser.add_argument(
        "--show-maps", "-m",
        action="store_true",
        help="Print maps traced by the solver"
    )
    parser.add_argument(
        "--image",
        help="Save the input as a PNG map image"
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available puzzles and exit"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--log-file",
        help="Also write the log to this file"
    )
    return parser.parse_args(argv)


def resolve_input(args, settings: Dict[str, Any], puzzle_name: str) -> Path:
    """Input path from the CLI, falling back to the configured data directory."""
    if args.input:
        return Path(args.input)
    return Path(settings["data_dir"]) / puzzle_name / "input"


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run a puzzle from the command line.

    Returns:
        Exit code
    """
    args = parse_args(argv)
    settings = load_settings(args.config)

    level = "DEBUG" if args.debug else settings.get("log_level", "INFO")
    setup_logging(level, args.log_file)

    if args.list:
        for info in get_puzzle_info():
            print(f"{info['name']:<16} {info['description']}")
        return 0

    puzzle_name = args.puzzle or settings.get("puzzle_name") or get_default_puzzle_name()
    show_maps = args.show_maps or settings.get("show_maps", False)

    try:
        solver = create_puzzle(puzzle_name)
        input_path = resolve_input(args, settings, puzzle_name)
        context = PuzzleContext.from_file(input_path)

        if args.image:
            save_map_image(parse_map(context.text, CharTile), args.image, palette=IMAGE_PALETTE)
            logger.info(f"Input map image saved: {args.image}")

        answer = solver.solve(context)
    except (ValueError, MapReadError) as e:
        # PuzzleInputError and unknown puzzle names are both ValueErrors
        kind = "Input error" if isinstance(e, PuzzleInputError) else "Error"
        logger.error(f"{kind}: {e}")
        return 1

    if show_maps:
        for label, rendering in zip(answer.parts, answer.renderings):
            print(f"==== {label} ====")
            print(rendering)

    for label, part in answer.parts.items():
        print(f"{label}: {part}")

    logger.info(
        f"{puzzle_name} solved in {answer.metrics.computation_time_ms:.1f}ms "
        f"({answer.metrics.states_explored} states)"
    )
    print(f"Final answer is {answer.value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
