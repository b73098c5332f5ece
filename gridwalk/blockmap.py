"""BlockMap - live blocked-state store usable as a blocking policy."""
from __future__ import annotations

from typing import Any, Iterable

from gridwalk.cell import Cell
from gridwalk.types import CellDescriptor, Coord


def _coord_of(cell: Cell | Coord) -> Coord:
    if isinstance(cell, Cell):
        return cell.coord
    if len(cell) != 2:
        raise ValueError(f"Expected an (x, y) pair, got {cell!r}")
    return (cell[0], cell[1])


class BlockMap:
    """Set of blocked lattice coordinates.

    Every query reads the current state, so a BlockMap can be passed
    straight to a search as ``is_blocked`` and mutated between calls.
    Coordinates that were never blocked are open.
    """

    def __init__(self, blocked: Iterable[Coord] = ()) -> None:
        self._blocked: set[Coord] = {_coord_of(c) for c in blocked}

    @classmethod
    def from_descriptors(cls, descriptors: Iterable[CellDescriptor]) -> BlockMap:
        return cls((d.x, d.y) for d in descriptors if d.blocked)

    # --- Mutation ---

    def block(self, coord: Cell | Coord) -> None:
        self._blocked.add(_coord_of(coord))

    def unblock(self, coord: Cell | Coord) -> None:
        """Open a coordinate. No error if it was not blocked."""
        self._blocked.discard(_coord_of(coord))

    def toggle(self, coord: Cell | Coord) -> bool:
        """Flip a coordinate's state and return the new blocked flag."""
        key = _coord_of(coord)
        if key in self._blocked:
            self._blocked.discard(key)
            return False
        self._blocked.add(key)
        return True

    def clear_all(self) -> None:
        self._blocked.clear()

    def fill_rect(
        self,
        corner1: Coord,
        corner2: Coord,
        blocked: bool = True,
    ) -> None:
        """Block (or open) a rectangle, corners inclusive."""
        x1, y1 = min(corner1[0], corner2[0]), min(corner1[1], corner2[1])
        x2, y2 = max(corner1[0], corner2[0]), max(corner1[1], corner2[1])
        for x in range(x1, x2 + 1):
            for y in range(y1, y2 + 1):
                if blocked:
                    self._blocked.add((x, y))
                else:
                    self._blocked.discard((x, y))

    # --- Queries ---

    def is_blocked(self, cell: Cell | Coord) -> bool:
        """Matches the ``is_blocked`` signature of the search functions."""
        return _coord_of(cell) in self._blocked

    def __call__(self, cell: Cell | Coord) -> bool:
        return self.is_blocked(cell)

    def __contains__(self, cell: object) -> bool:
        if isinstance(cell, tuple) and len(cell) != 2:
            return False
        if not isinstance(cell, (Cell, tuple)):
            return False
        return self.is_blocked(cell)

    def __len__(self) -> int:
        return len(self._blocked)

    def coords(self) -> list[Coord]:
        """Blocked coordinates, sorted by (x, y)."""
        return sorted(self._blocked)

    # --- Snapshot / Restore ---

    def snapshot(self) -> dict[str, Any]:
        """Serialize as ``{"blocked": ["x,y", ...]}``."""
        return {"blocked": [f"{x},{y}" for x, y in self.coords()]}

    def restore(self, data: dict[str, Any]) -> None:
        """Replace the blocked set from snapshot data.

        Raises ValueError for keys that are not two comma-separated ints.
        """
        restored: set[Coord] = set()
        for key in data.get("blocked", []):
            if not isinstance(key, str):
                raise ValueError(f"Malformed coordinate key: {key!r}")
            parts = key.split(",")
            if len(parts) != 2:
                raise ValueError(f"Malformed coordinate key: {key!r}")
            try:
                restored.add((int(parts[0]), int(parts[1])))
            except ValueError:
                raise ValueError(f"Malformed coordinate key: {key!r}") from None
        self._blocked = restored
