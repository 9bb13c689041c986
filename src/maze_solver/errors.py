"""Exception types raised by the maze solver."""

from __future__ import annotations


class MazeSolverError(Exception):
    """Base class for maze solver errors."""


class InvalidArgumentError(MazeSolverError, ValueError):
    """Raised when a union is requested on elements that are not representatives."""


class OutOfRangeError(MazeSolverError, IndexError):
    """Raised when an element id falls outside the disjoint-set universe."""


class InputUnavailableError(MazeSolverError, OSError):
    """Raised when a maze image cannot be opened or decoded."""
