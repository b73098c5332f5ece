"""Cell - a point on the 2D integer lattice."""
from __future__ import annotations

import math
from dataclasses import dataclass

from gridwalk.types import Coord

ORTHOGONAL_STEP_COST = 1.0
# 1.4, not sqrt(2).
DIAGONAL_STEP_COST = 1.4


@dataclass(frozen=True, slots=True)
class Cell:
    """Immutable lattice cell with value equality on ``(x, y)``.

    Adjacency is not stored on the cell; ask the owning ``Grid`` for
    ``neighbors(cell)``.
    """

    x: int
    y: int

    @property
    def coord(self) -> Coord:
        return (self.x, self.y)

    def distance_to(self, other: Cell) -> float:
        """Straight-line distance, used as the search heuristic."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def is_neighbor(self, other: Cell) -> bool:
        """True if ``other`` is one of the 8 cells touching this one."""
        dx = abs(self.x - other.x)
        dy = abs(self.y - other.y)
        return max(dx, dy) == 1

    def is_diagonal_from(self, other: Cell) -> bool:
        return (
            self.is_neighbor(other)
            and self.x != other.x
            and self.y != other.y
        )


def step_cost(a: Cell, b: Cell) -> float:
    """Cost of moving between two neighboring cells."""
    if a.is_diagonal_from(b):
        return DIAGONAL_STEP_COST
    return ORTHOGONAL_STEP_COST
