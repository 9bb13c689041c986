"""Command line entry point for the maze solver."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .colorize import DEFAULT_SEED
from .runner import MazeSolverConfig, check_report_path, solution_message, solve_file

PROMPT = "Enter name of maze file from {maze_dir} directory (including .PNG extension): "


def _report_path(value: str) -> Path:
    try:
        return check_report_path(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Decide whether a maze image is solvable and color its connected components."
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Maze image file, either a path or a name inside --maze-dir (prompted for when omitted)",
    )
    parser.add_argument(
        "--maze-dir",
        type=Path,
        default=Path(os.getenv("MAZE_DIR", "Mazes")),
        help="Directory searched for maze names (default: $MAZE_DIR or Mazes)",
    )
    parser.add_argument("--output", type=Path, help="Where to write the colored component image")
    parser.add_argument("--report", type=_report_path, help="Where to write the per-component table (.csv or .json)")
    parser.add_argument(
        "--seed",
        type=int,
        default=os.getenv("MAZE_SEED", str(DEFAULT_SEED)),
        help="Seed for the component color palette (default: $MAZE_SEED or 0)",
    )
    parser.add_argument("--show", action="store_true", help="Display the colored component image")
    parser.add_argument(
        "--disable-tqdm",
        action="store_true",
        help="Disable progress bars even if tqdm is installed",
    )
    parser.add_argument("--quiet", action="store_true", help="Only print the final verdict (implies --disable-tqdm)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])

    maze_name = args.input
    if not maze_name:
        try:
            maze_name = input(PROMPT.format(maze_dir=args.maze_dir)).strip()
        except EOFError:
            print("ERROR: No maze file name given.")
            return 1

    config = MazeSolverConfig(
        maze_dir=args.maze_dir,
        seed=args.seed,
        use_tqdm=not (args.disable_tqdm or args.quiet),
        verbose=not args.quiet,
    )

    result = solve_file(maze_name, args.output, args.report, config)
    if result is None:
        return 1

    if args.show:
        result.component_image.show(title="Maze Solver")
    print(solution_message(result.has_solution))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
