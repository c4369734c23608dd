"""Drawing of bodies and text overlays with pygame."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from enum import Enum
from itertools import accumulate

import pygame

from particlebox.model import App, Body

CHAR_COUNT = 150
FONT_SIZE = 32
TEXTURE_RADIUS = 32
CIRCLE_RESOLUTION = 20

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)


class Align(Enum):
    LEFT = 0
    RIGHT = 1
    CENTER = 2


def text_offsets(widths: Sequence[int], align: Align) -> list[int]:
    """Horizontal offset of each glyph relative to the anchor point."""
    if align is Align.RIGHT:
        start = -sum(widths)
    elif align is Align.CENTER:
        start = -sum(w // 2 for w in widths)
    else:
        start = 0
    return list(accumulate(widths[:-1], initial=start)) if widths else []


def _circle_texture() -> pygame.Surface:
    size = TEXTURE_RADIUS * 2
    surface = pygame.Surface((size, size), pygame.SRCALPHA)
    surface.fill((0, 0, 0, 0))
    interval = 2 * math.pi / CIRCLE_RESOLUTION
    points = [
        (
            TEXTURE_RADIUS + TEXTURE_RADIUS * math.cos(i * interval),
            TEXTURE_RADIUS + TEXTURE_RADIUS * math.sin(i * interval),
        )
        for i in range(1, CIRCLE_RESOLUTION + 1)
    ]
    pygame.draw.polygon(surface, WHITE, points)
    return surface


def _square_texture() -> pygame.Surface:
    size = TEXTURE_RADIUS * 2
    surface = pygame.Surface((size, size), pygame.SRCALPHA)
    surface.fill(WHITE)
    return surface


class Renderer:
    """Draws the scene onto a pygame surface."""

    def __init__(self, surface: pygame.Surface, font_path: str | None = None) -> None:
        self.surface = surface
        if not pygame.font.get_init():
            pygame.font.init()
        self._font = pygame.font.Font(font_path, FONT_SIZE)
        self._glyphs: dict[str, pygame.Surface] = {}
        self.textures = {"circle": _circle_texture(), "square": _square_texture()}
        self.line_height = self._glyph("a").get_height()

    def _glyph(self, char: str) -> pygame.Surface:
        if not 1 <= ord(char) < CHAR_COUNT:
            raise ValueError(f"character {char!r} has no glyph")
        glyph = self._glyphs.get(char)
        if glyph is None:
            glyph = self._font.render(char, False, WHITE)
            self._glyphs[char] = glyph
        return glyph

    def render_text(
        self,
        text: str,
        pos_x: int,
        pos_y: int,
        align: Align = Align.LEFT,
        offset_y: int = 0,
    ) -> list[pygame.Rect]:
        """Draw ``text``, lifted by ``offset_y`` lines; return the glyph rectangles."""
        glyphs = [self._glyph(c) for c in text]
        offsets = text_offsets([g.get_width() for g in glyphs], align)
        y = pos_y - offset_y * self.line_height
        rects = []
        for glyph, dx in zip(glyphs, offsets):
            rect = glyph.get_rect(topleft=(pos_x + dx, y))
            self.surface.blit(glyph, rect)
            rects.append(rect)
        return rects

    def render(self, app: App, bodies: Iterable[Body], fps: float) -> None:
        """Clear the surface and draw the overlay and all bodies."""
        self.surface.fill(BLACK)
        width = self.surface.get_width()

        self.render_text(f"{app.obj_count} objects", width, 0, Align.RIGHT, 0)
        self.render_text(f"{int(fps)} fps", width, 0, Align.RIGHT, -1)

        for body in list(bodies)[: app.obj_count]:
            size = (round(body.w), round(body.h))
            if size[0] <= 0 or size[1] <= 0:
                continue
            image = pygame.transform.scale(self.textures[body.texture], size)
            if body.rot:
                image = pygame.transform.rotate(image, -body.rot)
            self.surface.blit(image, image.get_rect(center=(body.pos.x, body.pos.y)))