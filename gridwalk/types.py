"""Shared types and errors for gridwalk."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, NamedTuple

if TYPE_CHECKING:
    from gridwalk.cell import Cell

Coord = tuple[int, int]


@dataclass
class Pos2D:
    x: float
    y: float


@dataclass(frozen=True)
class CellDescriptor:
    """A lattice cell as supplied by the surrounding scene.

    Attributes:
        x: Integer lattice column.
        y: Integer lattice row.
        blocked: Initial blocked state of the cell.
    """

    x: int
    y: int
    blocked: bool = False


BlockingPolicy = Callable[["Cell"], bool]


class SearchResult(NamedTuple):
    reachable: bool
    path: list[Cell]


def unreachable() -> SearchResult:
    """Return a fresh failed result; the empty path is never shared."""
    return SearchResult(False, [])


class DuplicateCellError(ValueError):
    """Raised when a grid is built from cells sharing a coordinate."""

    def __init__(self, coord: Coord, message: str) -> None:
        self.coord = coord
        super().__init__(message)
