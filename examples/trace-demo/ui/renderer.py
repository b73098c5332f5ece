"""Grid, subject, and trace rendering."""
from __future__ import annotations

import pygame

from gridwalk import BlockMap, Cell, Grid, Pos2D
from ui.constants import (
    COLOR_FLOOR,
    COLOR_GRID_LINE,
    COLOR_SUBJECT,
    COLOR_TARGET,
    COLOR_WALL,
    TILE_SIZE,
)


def cell_center(cell: Cell) -> tuple[int, int]:
    return (
        cell.x * TILE_SIZE + TILE_SIZE // 2,
        cell.y * TILE_SIZE + TILE_SIZE // 2,
    )


def draw_grid(surface: pygame.Surface, grid: Grid, blocked: BlockMap) -> None:
    """Draw floor and wall tiles."""
    for cell in grid:
        color = COLOR_WALL if blocked.is_blocked(cell) else COLOR_FLOOR
        rect = pygame.Rect(cell.x * TILE_SIZE, cell.y * TILE_SIZE, TILE_SIZE, TILE_SIZE)
        pygame.draw.rect(surface, color, rect)
        pygame.draw.rect(surface, COLOR_GRID_LINE, rect, 1)


def draw_trace(
    surface: pygame.Surface,
    path: list[Cell],
    color: tuple[int, int, int],
    width: int = 3,
) -> None:
    """Draw a path as a beam through cell centers."""
    if len(path) < 2:
        return
    points = [cell_center(cell) for cell in path]
    pygame.draw.lines(surface, color, False, points, width)
    for point in points[1:-1]:
        pygame.draw.circle(surface, color, point, width + 1)


def draw_target(surface: pygame.Surface, target: Cell | None) -> None:
    if target is None:
        return
    rect = pygame.Rect(target.x * TILE_SIZE, target.y * TILE_SIZE, TILE_SIZE, TILE_SIZE)
    pygame.draw.rect(surface, COLOR_TARGET, rect, 3)


def draw_subject(surface: pygame.Surface, pos: Pos2D) -> None:
    # Positions are in cell units with cell centers on integers.
    px = int(pos.x * TILE_SIZE + TILE_SIZE / 2)
    py = int(pos.y * TILE_SIZE + TILE_SIZE / 2)
    pygame.draw.circle(surface, COLOR_SUBJECT, (px, py), TILE_SIZE // 3)
