"""Greedy best-first walk over a Grid.

The walk is single-pass: from the current cell it always steps to the
unvisited, unblocked neighbor with the lowest ``g + step + distance`` and
never backtracks. A cell that has been stepped away from is closed for
the rest of the call. When the walk runs out of neighbors it fails,
even if a path exists elsewhere; ``gridwalk.astar`` is the complete search.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gridwalk.cell import Cell, step_cost
from gridwalk.types import SearchResult, unreachable

if TYPE_CHECKING:
    from gridwalk.grid import Grid
    from gridwalk.types import BlockingPolicy

logger = logging.getLogger(__name__)


def greedy_walk(
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

    g = 0.0
    closed: set[int] = set()
    path: list[Cell] = [start]
    steps = 0

    index = 0
    while index < len(path):
        current = path[index]
        index += 1
        cid = grid.cell_id(current)
        if cid in closed:
            continue
        if current == target:
            break

        best: Cell | None = None
        best_f = float("inf")
        for nid in grid.neighbor_ids(cid):
            if nid in closed:
                continue
            neighbor = grid.cell_by_id(nid)
            if is_blocked(neighbor):
                continue
            if neighbor == target:
                best = neighbor
                break
            f = g + step_cost(current, neighbor) + neighbor.distance_to(target)
            if f < best_f:
                best = neighbor
                best_f = f

        closed.add(cid)
        if best is None:
            continue

        if max_steps is not None and steps >= max_steps:
            logger.warning(
                "Greedy walk from %s to %s stopped after %d steps",
                start.coord, target.coord, steps,
            )
            return unreachable()
        steps += 1
        g += step_cost(current, best)
        path.append(best)

    if path[-1] != target:
        logger.debug("Greedy walk from %s to %s got stuck at %s",
                     start.coord, target.coord, path[-1].coord)
        return unreachable()
    logger.debug("Greedy walk from %s to %s: %d cells, cost %.1f",
                 start.coord, target.coord, len(path), g)
    return SearchResult(True, path)


search = greedy_walk
