"""Grid - immutable set of lattice cells with adjacency resolved once."""
from __future__ import annotations

import logging
import math
from typing import Iterable, Iterator

from gridwalk.cell import Cell
from gridwalk.types import CellDescriptor, Coord, DuplicateCellError

logger = logging.getLogger(__name__)

_OFFSETS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]


def to_lattice(px: float, py: float, cell_size: float) -> Coord:
    """Map a continuous position to lattice coordinates, rounding half up."""
    if not math.isfinite(cell_size) or cell_size <= 0:
        raise ValueError(f"cell_size must be finite and > 0, got {cell_size}")
    return (
        math.floor(px / cell_size + 0.5),
        math.floor(py / cell_size + 0.5),
    )


class Grid:
    """Cells stored in an arena, indexed by integer id in insertion order.

    Each cell's neighbors are listed in that same order, so the first
    neighbor found by a search is the earliest inserted one. Duplicate
    coordinates raise ``DuplicateCellError``.
    """

    def __init__(self, cells: Iterable[Cell], allow_diagonal: bool = True) -> None:
        self._allow_diagonal = allow_diagonal
        self._cells: list[Cell] = []
        self._ids: dict[Cell, int] = {}
        for cell in cells:
            if cell in self._ids:
                raise DuplicateCellError(
                    cell.coord, f"Duplicate cell at ({cell.x}, {cell.y})"
                )
            self._ids[cell] = len(self._cells)
            self._cells.append(cell)
        self._adjacency: tuple[tuple[int, ...], ...] = tuple(
            self._link(cid) for cid in range(len(self._cells))
        )
        logger.debug(
            "Built %d-cell grid (diagonal=%s)", len(self._cells), allow_diagonal
        )

    @classmethod
    def rect(cls, width: int, height: int, allow_diagonal: bool = True) -> Grid:
        """Build a full ``width`` x ``height`` grid in row-major order."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        cells = (Cell(x, y) for y in range(height) for x in range(width))
        return cls(cells, allow_diagonal=allow_diagonal)

    @classmethod
    def from_descriptors(
        cls,
        descriptors: Iterable[CellDescriptor],
        allow_diagonal: bool = True,
    ) -> Grid:
        return cls((Cell(d.x, d.y) for d in descriptors), allow_diagonal=allow_diagonal)

    def _link(self, cid: int) -> tuple[int, ...]:
        cell = self._cells[cid]
        found: list[int] = []
        for dx, dy in _OFFSETS:
            if dx and dy and not self._allow_diagonal:
                continue
            nid = self._ids.get(Cell(cell.x + dx, cell.y + dy))
            if nid is not None:
                found.append(nid)
        found.sort()
        return tuple(found)

    @property
    def allow_diagonal(self) -> bool:
        return self._allow_diagonal

    @property
    def cells(self) -> tuple[Cell, ...]:
        return tuple(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __contains__(self, cell: object) -> bool:
        return cell in self._ids

    def contains(self, cell: Cell) -> bool:
        return cell in self._ids

    def cell_id(self, cell: Cell) -> int | None:
        return self._ids.get(cell)

    def cell_by_id(self, cid: int) -> Cell:
        return self._cells[cid]

    def find_cell_at_point(self, x: int, y: int) -> Cell | None:
        cid = self._ids.get(Cell(x, y))
        if cid is None:
            return None
        return self._cells[cid]

    def cell_at_position(self, px: float, py: float, cell_size: float) -> Cell | None:
        """Return the cell under a continuous position, or None off-grid."""
        x, y = to_lattice(px, py, cell_size)
        return self.find_cell_at_point(x, y)

    def neighbors(self, cell: Cell) -> tuple[Cell, ...]:
        cid = self._ids.get(cell)
        if cid is None:
            return ()
        return tuple(self._cells[nid] for nid in self._adjacency[cid])

    def neighbor_ids(self, cid: int) -> tuple[int, ...]:
        return self._adjacency[cid]
