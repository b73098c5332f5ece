"""Trace Demo - live greedy path traces with pygame.

Controls:
    Arrows / WASD   move the subject
    Left click      toggle a wall
    Right click     set the target
    F               follow the greedy trace automatically
    C               compare with the A* trace
    R               clear all walls
    Esc             quit
"""
from __future__ import annotations

import argparse
import logging
import math
import sys

import pygame

from gridwalk import (
    BlockMap,
    Cell,
    Grid,
    PathTracker,
    Pos2D,
    SearchConfig,
    SearchResult,
    to_lattice,
)
from ui.constants import (
    COLOR_ASTAR_TRACE,
    COLOR_BG,
    COLOR_GREEDY_TRACE,
    DEFAULT_MAP_H,
    DEFAULT_MAP_W,
    FPS,
    STATUS_H,
    SUBJECT_SPEED,
    TILE_SIZE,
    TPS,
)
from ui.renderer import draw_grid, draw_subject, draw_target, draw_trace
from ui.status import StatusBar

KEY_DIRS = {
    pygame.K_LEFT: (-1, 0), pygame.K_a: (-1, 0),
    pygame.K_RIGHT: (1, 0), pygame.K_d: (1, 0),
    pygame.K_UP: (0, -1), pygame.K_w: (0, -1),
    pygame.K_DOWN: (0, 1), pygame.K_s: (0, 1),
}


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Trace Demo: gridwalk visual demo")
    p.add_argument("--width", type=int, default=DEFAULT_MAP_W, help="Grid width in cells")
    p.add_argument("--height", type=int, default=DEFAULT_MAP_H, help="Grid height in cells")
    p.add_argument("--no-diagonal", action="store_true", help="Use a 4-connected grid")
    p.add_argument("--max-steps", type=int, default=None, help="Bound on search steps")
    p.add_argument("--verbose", action="store_true", help="Log every recompute")
    args = p.parse_args()
    args.width = max(4, min(64, args.width))
    args.height = max(4, min(48, args.height))
    return args


class DemoState:
    """Holds the grid, trackers, and subject."""

    def __init__(self, args: argparse.Namespace) -> None:
        greedy_cfg = SearchConfig(
            allow_diagonal=not args.no_diagonal,
            max_steps=args.max_steps,
        )
        astar_cfg = SearchConfig(
            allow_diagonal=not args.no_diagonal,
            max_steps=args.max_steps,
            algorithm="astar",
        )
        self.width = args.width
        self.height = args.height
        self.grid = Grid.rect(args.width, args.height, allow_diagonal=greedy_cfg.allow_diagonal)
        self.blocked = BlockMap()
        self.blocked.fill_rect((args.width // 2, 2), (args.width // 2, args.height - 3))

        self.greedy = PathTracker(self.grid, self.blocked, greedy_cfg)
        self.reference = PathTracker(self.grid, self.blocked, astar_cfg)

        self.subject = Pos2D(1.0, args.height / 2)
        self.following = False
        self.compare = False
        self.status = StatusBar(args.width * TILE_SIZE, args.height * TILE_SIZE)

        self.greedy.on_path(self._report)
        self.set_target(Cell(args.width - 2, args.height // 2))

    def _report(self, result: SearchResult) -> None:
        if result.reachable:
            self.status.set(f"Trace: {len(result.path)} cells", (100, 255, 100))
        else:
            self.status.set("No trace to target", (255, 80, 80))

    def set_target(self, cell: Cell) -> None:
        self.greedy.set_target(cell)
        self.reference.set_target(cell)

    def toggle_wall(self, cell: Cell) -> None:
        if cell not in self.grid:
            return
        self.blocked.toggle(cell)
        self.greedy.refresh()
        self.reference.refresh()

    def clear_walls(self) -> None:
        self.blocked.clear_all()
        self.greedy.refresh()
        self.reference.refresh()

    def tick(self) -> None:
        self.greedy.update(self.subject)
        self.reference.update(self.subject)

    def move_subject(self, dx: float, dy: float) -> None:
        nx = min(max(self.subject.x + dx, 0.0), self.width - 1.0)
        ny = min(max(self.subject.y + dy, 0.0), self.height - 1.0)
        if self.blocked.is_blocked(to_lattice(nx, ny, 1.0)):
            return
        self.subject.x, self.subject.y = nx, ny

    def follow(self, dt: float) -> None:
        """Step the subject toward the next cell on the greedy trace."""
        result = self.greedy.last_result
        if result is None or len(result.path) < 2:
            return
        nxt = result.path[1]
        ddx, ddy = nxt.x - self.subject.x, nxt.y - self.subject.y
        dist = math.hypot(ddx, ddy)
        step = SUBJECT_SPEED * dt
        if dist <= step:
            self.move_subject(ddx, ddy)
        else:
            self.move_subject(ddx / dist * step, ddy / dist * step)


def main() -> None:
    args = parse_args()
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )

    pygame.init()
    screen_w = args.width * TILE_SIZE
    screen_h = args.height * TILE_SIZE + STATUS_H
    screen = pygame.display.set_mode((screen_w, screen_h))
    pygame.display.set_caption("Trace Demo")
    clock = pygame.time.Clock()

    state = DemoState(args)

    # Tick accumulator for fixed-rate path updates
    tick_interval = 1.0 / TPS
    accumulator = 0.0

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_f:
                    state.following = not state.following
                elif event.key == pygame.K_c:
                    state.compare = not state.compare
                elif event.key == pygame.K_r:
                    state.clear_walls()

            elif event.type == pygame.MOUSEBUTTONDOWN:
                cell = Cell(event.pos[0] // TILE_SIZE, event.pos[1] // TILE_SIZE)
                if event.button == 1:  # Left click
                    state.toggle_wall(cell)
                elif event.button == 3 and cell in state.grid:  # Right click
                    state.set_target(cell)

        # --- Movement ---
        pressed = pygame.key.get_pressed()
        for key, (kx, ky) in KEY_DIRS.items():
            if pressed[key]:
                state.following = False
                state.move_subject(kx * SUBJECT_SPEED * dt, ky * SUBJECT_SPEED * dt)
        if state.following:
            state.follow(dt)

        # --- Tick trackers at fixed rate ---
        while accumulator >= tick_interval:
            state.tick()
            accumulator -= tick_interval

        # --- Render ---
        screen.fill(COLOR_BG)
        draw_grid(screen, state.grid, state.blocked)
        if state.compare and state.reference.last_result is not None:
            draw_trace(screen, state.reference.last_result.path, COLOR_ASTAR_TRACE, width=2)
        if state.greedy.last_result is not None:
            draw_trace(screen, state.greedy.last_result.path, COLOR_GREEDY_TRACE)
        draw_target(screen, state.greedy.target)
        draw_subject(screen, state.subject)
        state.status.draw(screen)

        pygame.display.flip()

    pygame.quit()
    sys.exit(0)


if __name__ == "__main__":
    main()
