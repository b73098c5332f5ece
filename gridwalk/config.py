"""Search configuration dataclass."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

from gridwalk.astar import astar
from gridwalk.walk import greedy_walk

ALGORITHMS: dict[str, Callable] = {
    "greedy": greedy_walk,
    "astar": astar,
}


def resolve_algorithm(name: str) -> Callable:
    """Look up a search function by name. Raises KeyError for unknown names."""
    try:
        return ALGORITHMS[name]
    except KeyError:
        known = ", ".join(sorted(ALGORITHMS))
        raise KeyError(f"Unknown algorithm {name!r}, expected one of: {known}") from None


@dataclass(frozen=True)
class SearchConfig:
    """Immutable configuration for path tracking.

    Attributes:
        allow_diagonal: Connectivity used when the tracker's grid is built.
        cell_size: World units per lattice cell, for position lookup.
        max_steps: Optional bound on search steps; None means unbounded.
        algorithm: Key into ALGORITHMS.
    """

    allow_diagonal: bool = True
    cell_size: float = 1.0
    max_steps: int | None = None
    algorithm: str = "greedy"

    def __post_init__(self) -> None:
        if not math.isfinite(self.cell_size) or self.cell_size <= 0:
            raise ValueError(f"cell_size must be finite and > 0, got {self.cell_size}")
        if self.max_steps is not None and self.max_steps < 1:
            raise ValueError(f"max_steps must be >= 1, got {self.max_steps}")
        if self.algorithm not in ALGORITHMS:
            raise ValueError(f"Unknown algorithm {self.algorithm!r}")
