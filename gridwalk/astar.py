"""Reference A* over a Grid, for comparison with the greedy walk."""
from __future__ import annotations

import heapq
import logging
import math
from typing import TYPE_CHECKING

from gridwalk.cell import DIAGONAL_STEP_COST, ORTHOGONAL_STEP_COST, Cell, step_cost
from gridwalk.types import SearchResult, unreachable

if TYPE_CHECKING:
    from gridwalk.grid import Grid
    from gridwalk.types import BlockingPolicy

logger = logging.getLogger(__name__)


def _heuristic(a: Cell, b: Cell, allow_diagonal: bool) -> float:
    dx = abs(a.x - b.x)
    dy = abs(a.y - b.y)
    if not allow_diagonal:
        return ORTHOGONAL_STEP_COST * (dx + dy)
    # Octile distance; straight-line distance overestimates a 1.4 diagonal.
    return (
        ORTHOGONAL_STEP_COST * abs(dx - dy)
        + DIAGONAL_STEP_COST * min(dx, dy)
    )


def _walk_back(grid: Grid, came_from: dict[int, int], end: int) -> list[Cell]:
    """Follow parent links from ``end`` back to the start cell."""
    path = [grid.cell_by_id(end)]
    while end in came_from:
        end = came_from[end]
        path.append(grid.cell_by_id(end))
    path.reverse()
    return path


def astar(
    grid: Grid,
    start: Cell,
    target: Cell,
    is_blocked: BlockingPolicy,
    max_steps: int | None = None,
) -> SearchResult:
    if start not in grid or target not in grid:
        return unreachable()
    if is_blocked(start) or is_blocked(target):
        return unreachable()
    if start == target:
        return SearchResult(True, [])

    source = grid.cell_id(start)
    goal = grid.cell_id(target)

    # Entries are (f, push order, cell id); push order breaks f ties FIFO.
    frontier: list[tuple[float, int, int]] = [(0.0, 0, source)]
    parent: dict[int, int] = {}
    best_g: dict[int, float] = {source: 0.0}
    pushed = 1
    expanded: set[int] = set()

    while frontier:
        cid = heapq.heappop(frontier)[2]
        if cid in expanded:
            continue
        if cid == goal:
            path = _walk_back(grid, parent, goal)
            logger.debug("A* from %s to %s: %d cells, cost %.1f",
                         start.coord, target.coord, len(path), best_g[goal])
            return SearchResult(True, path)

        expanded.add(cid)
        if max_steps is not None and len(expanded) > max_steps:
            logger.warning(
                "A* from %s to %s stopped after expanding %d cells",
                start.coord, target.coord, max_steps,
            )
            return unreachable()

        cell = grid.cell_by_id(cid)
        for nid in grid.neighbor_ids(cid):
            if nid in expanded:
                continue
            neighbor = grid.cell_by_id(nid)
            if is_blocked(neighbor):
                continue
            g = best_g[cid] + step_cost(cell, neighbor)
            if g >= best_g.get(nid, math.inf):
                continue
            parent[nid] = cid
            best_g[nid] = g
            f = g + _heuristic(neighbor, target, grid.allow_diagonal)
            heapq.heappush(frontier, (f, pushed, nid))
            pushed += 1

    logger.debug("A* found no path from %s to %s", start.coord, target.coord)
    return unreachable()
