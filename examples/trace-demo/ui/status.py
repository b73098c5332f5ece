"""Bottom status bar."""
from __future__ import annotations

import pygame

from ui.constants import COLOR_STATUS_BG, COLOR_TEXT, STATUS_H


class StatusBar:
    """Displays the latest search outcome under the grid."""

    def __init__(self, width: int, top: int) -> None:
        self._rect = pygame.Rect(0, top, width, STATUS_H)
        self._message = ""
        self._color = COLOR_TEXT
        self._font: pygame.font.Font | None = None

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont("monospace", 14)
        return self._font

    def set(self, message: str, color: tuple[int, int, int] = COLOR_TEXT) -> None:
        self._message = message
        self._color = color

    def draw(self, surface: pygame.Surface) -> None:
        pygame.draw.rect(surface, COLOR_STATUS_BG, self._rect)
        if self._message:
            text = self._get_font().render(self._message, True, self._color)
            surface.blit(text, (8, self._rect.top + 8))
