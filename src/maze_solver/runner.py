"""Convenience helpers for running the maze solver end-to-end."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import pandas as pd

from .colorize import DEFAULT_SEED, ComponentColorizer
from .errors import InputUnavailableError
from .image import WHITE, Color, MazeImage
from .segmentation import MazeSegmentation


SOLVED_MESSAGE = (
    "This maze has a solution. Notice that the maze path, which was originally white, "
    "is all in the same color."
)
UNSOLVED_MESSAGE = (
    "This maze has no solution. Notice that the maze path, which was originally white, "
    "is divided into different colors. This shows that each possible path reached a dead end."
)
REPORT_SUFFIXES = (".csv", ".json")


def _default_seed() -> int:
    return int(os.getenv("MAZE_SEED", DEFAULT_SEED))


@dataclass
class MazeSolverConfig:
    """Configuration parameters for :func:solve_file."""

    maze_dir: str | Path = field(default_factory=lambda: os.getenv("MAZE_DIR", "Mazes"))
    replacement_color: Color = WHITE
    seed: int = field(default_factory=_default_seed)
    use_tqdm: bool | None = None
    verbose: bool = True


@dataclass
class MazeSolverStats:
    """Summary metrics for a maze solver run."""

    width: int
    height: int
    num_components: int
    markers_found: int
    runtime_seconds: float


@dataclass
class MazeSolverResult:
    """Result bundle returned by :func:solve_file."""

    segmentation: MazeSegmentation
    component_image: MazeImage
    component_table: pd.DataFrame
    has_solution: bool
    stats: MazeSolverStats


def solution_message(has_solution: bool) -> str:
    return SOLVED_MESSAGE if has_solution else UNSOLVED_MESSAGE


def resolve_maze_path(name: str | Path, maze_dir: str | Path) -> Path:
    """Return `name` if it exists, otherwise look for it inside `maze_dir`."""

    path = Path(name)
    if path.exists() or path.is_absolute():
        return path
    return Path(maze_dir) / path


def solve_file(
    input_path: str | Path,
    output_path: str | Path | None = None,
    report_path: str | Path | None = None,
    config: Optional[MazeSolverConfig] = None,
) -> MazeSolverResult | None:
    """Segment the maze at `input_path`, colorize it and optionally save the outputs."""

    if report_path is not None:
        check_report_path(report_path)

    config = config or MazeSolverConfig()
    verbose = config.verbose
    path = resolve_maze_path(input_path, config.maze_dir)
    overall_start_time = time.time()

    t0 = time.time()
    if verbose:
        print(f"1. Loading maze image '{path}'...")
    try:
        image = MazeImage.from_file(path)
    except InputUnavailableError as exc:
        print(f"ERROR: {exc}")
        return None
    if verbose:
        print(f"   Loaded {image.width()}x{image.height()} pixels. Done in {time.time() - t0:.2f}s")

    t0 = time.time()
    if verbose:
        print("2. Decomposing image into connected components...")
    segmentation = MazeSegmentation(image, config.replacement_color, use_tqdm=config.use_tqdm)
    if verbose:
        print(f"   Found {segmentation.num_components()} components. Done in {time.time() - t0:.2f}s")
    if segmentation.markers_found < 2:
        print(
            f"WARNING: Found {segmentation.markers_found} marker pixel(s) in '{path}'; "
            "start and end must both be marked in red for the maze to be solvable."
        )

    t0 = time.time()
    if verbose:
        print("3. Coloring components...")
    colorizer = ComponentColorizer(config.seed)
    component_image = colorizer.colorize(segmentation)
    component_table = segmentation.component_table()
    component_table["color"] = component_table["component_id"].map(
        lambda root: "#{:02x}{:02x}{:02x}".format(*colorizer.palette[root])
    )
    if verbose:
        print(f"   Done in {time.time() - t0:.2f}s")

    if output_path is not None:
        component_image.save(output_path)
        if verbose:
            print(f"   Component image saved to '{output_path}'")
    if report_path is not None:
        _save_dataframe(component_table, report_path)
        if verbose:
            print(f"   Component report saved to '{report_path}'")

    elapsed = time.time() - overall_start_time
    stats = MazeSolverStats(
        width=image.width(),
        height=image.height(),
        num_components=segmentation.num_components(),
        markers_found=segmentation.markers_found,
        runtime_seconds=elapsed,
    )
    if verbose:
        print(f"\n--- Maze Solver Finished in {elapsed:.2f} seconds ---")

    return MazeSolverResult(
        segmentation=segmentation,
        component_image=component_image,
        component_table=component_table,
        has_solution=segmentation.has_solution(),
        stats=stats,
    )


def check_report_path(report_path: str | Path) -> Path:
    """Raise ValueError unless `report_path` has a suffix the report writer supports."""

    path = Path(report_path)
    if path.suffix.lower() not in REPORT_SUFFIXES:
        raise ValueError(
            f"Unsupported report file format: '{path.suffix}' (expected one of {', '.join(REPORT_SUFFIXES)})"
        )
    return path


def _save_dataframe(dataframe: pd.DataFrame, output_path: str | Path) -> None:
    path = Path(output_path)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        dataframe.to_csv(path, index=False)
        return
    if suffix == ".json":
        dataframe.to_json(path, orient="records", indent=2)
        return
    raise ValueError(f"Unsupported report file format: '{suffix}'")
