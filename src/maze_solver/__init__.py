"""Maze Solver library initialization."""

from .classification import PixelClass, classify, is_marker, is_on
from .colorize import ComponentColorizer, colorize_components
from .errors import InputUnavailableError, InvalidArgumentError, MazeSolverError, OutOfRangeError
from .image import MazeImage
from .runner import MazeSolverConfig, MazeSolverResult, MazeSolverStats, solve_file
from .segmentation import MazeSegmentation
from .structures import DisjointSet

__all__ = [
    "DisjointSet",
    "MazeImage",
    "PixelClass",
    "classify",
    "is_marker",
    "is_on",
    "MazeSegmentation",
    "ComponentColorizer",
    "colorize_components",
    "MazeSolverConfig",
    "MazeSolverResult",
    "MazeSolverStats",
    "solve_file",
    "MazeSolverError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "InputUnavailableError",
]
