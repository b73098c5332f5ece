"""PathTracker - recompute a path whenever the subject enters a new cell."""
from __future__ import annotations

import logging
from typing import Callable, Iterable

from gridwalk.blockmap import BlockMap
from gridwalk.cell import Cell
from gridwalk.config import SearchConfig, resolve_algorithm
from gridwalk.grid import Grid, to_lattice
from gridwalk.types import (
    BlockingPolicy,
    CellDescriptor,
    Coord,
    Pos2D,
    SearchResult,
)

logger = logging.getLogger(__name__)

PathHook = Callable[[SearchResult], None]


class PathTracker:
    """Drives a search from a per-tick position update.

    Call ``update`` once per tick with the subject's position. A new
    search runs only when the position falls in a different cell than
    last time, or after ``set_target``. Results go to ``on_path`` hooks.
    """

    def __init__(
        self,
        grid: Grid,
        is_blocked: BlockingPolicy,
        config: SearchConfig | None = None,
    ) -> None:
        config = config if config is not None else SearchConfig()
        if config.allow_diagonal != grid.allow_diagonal:
            raise ValueError(
                f"config.allow_diagonal={config.allow_diagonal} does not match "
                f"grid.allow_diagonal={grid.allow_diagonal}"
            )
        self._grid = grid
        self._is_blocked = is_blocked
        self._config = config
        self._search = resolve_algorithm(self._config.algorithm)
        self._hooks: list[PathHook] = []
        self._target: Cell | None = None
        self._current: Coord | None = None
        self._dirty = False
        self._last_result: SearchResult | None = None

    @classmethod
    def from_descriptors(
        cls,
        descriptors: Iterable[CellDescriptor],
        config: SearchConfig | None = None,
    ) -> PathTracker:
        """Build the grid and a BlockMap from scene descriptors."""
        config = config if config is not None else SearchConfig()
        descriptors = list(descriptors)
        grid = Grid.from_descriptors(descriptors, allow_diagonal=config.allow_diagonal)
        return cls(grid, BlockMap.from_descriptors(descriptors), config)

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def is_blocked(self) -> BlockingPolicy:
        return self._is_blocked

    @property
    def config(self) -> SearchConfig:
        return self._config

    @property
    def target(self) -> Cell | None:
        return self._target

    @property
    def current_cell(self) -> Cell | None:
        """Cell from the last update, or None if unset or off-grid."""
        if self._current is None:
            return None
        return self._grid.find_cell_at_point(*self._current)

    @property
    def last_result(self) -> SearchResult | None:
        return self._last_result

    def on_path(self, hook: PathHook) -> None:
        self._hooks.append(hook)

    def set_target(self, target: Cell | Coord) -> None:
        if not isinstance(target, Cell):
            target = Cell(target[0], target[1])
        self._target = target
        self._dirty = True

    def clear_target(self) -> None:
        self._target = None
        self._last_result = None
        self._dirty = False

    def update(self, pos: Pos2D) -> SearchResult | None:
        """Feed the subject's position; returns a result only on recompute."""
        lattice = to_lattice(pos.x, pos.y, self._config.cell_size)
        if lattice == self._current and not self._dirty:
            return None
        self._current = lattice
        return self.refresh()

    def refresh(self) -> SearchResult | None:
        """Recompute from the last known cell, e.g. after blocking changes."""
        if self._target is None or self._current is None:
            return None
        self._dirty = False

        start = Cell(*self._current)
        result = self._search(
            self._grid,
            start,
            self._target,
            self._is_blocked,
            max_steps=self._config.max_steps,
        )
        logger.debug(
            "Path %s -> %s: reachable=%s, %d cells",
            start.coord, self._target.coord, result.reachable, len(result.path),
        )
        self._last_result = result
        for hook in self._hooks:
            hook(result)
        return result

