"""Layout, color, and rendering constants."""
from __future__ import annotations

# Grid defaults (overridden by CLI --width/--height)
DEFAULT_MAP_W = 32
DEFAULT_MAP_H = 24
TILE_SIZE = 24

# Layout
STATUS_H = 32
FPS = 60
TPS = 10

# Subject speed in cells per second
SUBJECT_SPEED = 4.0

# Colors
COLOR_BG = (20, 20, 30)
COLOR_FLOOR = (50, 55, 60)
COLOR_WALL = (120, 90, 60)
COLOR_GRID_LINE = (30, 30, 30)
COLOR_SUBJECT = (80, 180, 255)
COLOR_TARGET = (255, 90, 90)
COLOR_GREEDY_TRACE = (255, 220, 80)
COLOR_ASTAR_TRACE = (120, 255, 140)
COLOR_TEXT = (200, 200, 200)
COLOR_STATUS_BG = (30, 30, 40)
