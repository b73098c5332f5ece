"""gridwalk - Greedy lattice path search with per-call blocking."""
from __future__ import annotations

from gridwalk.types import (
    BlockingPolicy,
    CellDescriptor,
    Coord,
    DuplicateCellError,
    Pos2D,
    SearchResult,
    unreachable,
)
from gridwalk.cell import DIAGONAL_STEP_COST, ORTHOGONAL_STEP_COST, Cell, step_cost
from gridwalk.grid import Grid, to_lattice
from gridwalk.walk import greedy_walk, search
from gridwalk.astar import astar
from gridwalk.blockmap import BlockMap
from gridwalk.config import ALGORITHMS, SearchConfig, resolve_algorithm
from gridwalk.tracker import PathTracker

__all__ = [
    "ALGORITHMS",
    "BlockMap",
    "BlockingPolicy",
    "Cell",
    "CellDescriptor",
    "Coord",
    "DIAGONAL_STEP_COST",
    "DuplicateCellError",
    "Grid",
    "ORTHOGONAL_STEP_COST",
    "PathTracker",
    "Pos2D",
    "SearchConfig",
    "SearchResult",
    "astar",
    "greedy_walk",
    "resolve_algorithm",
    "search",
    "step_cost",
    "to_lattice",
    "unreachable",
]
