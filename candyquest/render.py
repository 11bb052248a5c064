"""Drawing onto a target surface through a scrolling camera."""

from __future__ import annotations

import logging
import math
import re
import xml.etree.ElementTree as ET
from enum import IntFlag
from typing import Callable, List, Optional, Sequence, Tuple

import pygame

from .defs import Rect

log = logging.getLogger(__name__)

Color = Tuple[int, int, int, int]

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_CIRCLE_POINTS = 360


def _attr_int(element: Optional[ET.Element], name: str) -> int:
    value = element.get(name) if element is not None else None
    match = _INT_PREFIX.match(value) if value is not None else None
    return int(match.group(1)) if match else 0


def _color(r: int, g: int, b: int, a: int) -> Color:
    components = (r, g, b, a)
    if not all(0 <= c <= 255 for c in components):
        raise ValueError(f"colour components must lie in 0..255, got {components}")
    return components


class Flip(IntFlag):
    """Mirroring applied when drawing a texture."""

    NONE = 0
    HORIZONTAL = 1
    VERTICAL = 2


class Render:
    """Draws textures and primitives onto ``target``, offset by the camera.

    ``scale`` multiplies every logical coordinate and size; ``present`` is
    called at the end of each frame to show the target (for a display
    surface, ``pygame.display.flip``).
    """

    def __init__(
        self,
        target: pygame.Surface,
        scale: int = 1,
        vsync: bool = True,
        present: Optional[Callable[[], None]] = None,
    ) -> None:
        self.target = target
        self.scale = scale
        self._vsync = vsync
        self._present = present
        width, height = target.get_size()
        self.camera = Rect(0, 0, width, height)
        self.viewport = Rect(0, 0, width, height)
        self._active_viewport = Rect(0, 0, width, height)
        self.background: Color = (0, 0, 0, 0)

    @property
    def vsync(self) -> bool:
        return self._vsync

    @property
    def active_viewport(self) -> Rect:
        return Rect(
            self._active_viewport.x,
            self._active_viewport.y,
            self._active_viewport.w,
            self._active_viewport.h,
        )

    def _screen(self, x: float, y: float) -> Tuple[int, int]:
        return int(x) + self._active_viewport.x, int(y) + self._active_viewport.y

    def _paint(self, color: Color, draw: Callable[[pygame.Surface, Color], None]) -> None:
        if color[3] == 255:
            draw(self.target, color)
            return
        overlay = pygame.Surface(self.target.get_size(), pygame.SRCALPHA)
        draw(overlay, color)
        self.target.blit(overlay, (0, 0))

    def pre_update(self) -> bool:
        self.target.fill(self.background)
        return True

    def post_update(self) -> bool:
        self.set_viewport(Rect(0, 0, self.camera.w, self.camera.h))
        if self._present is not None:
            self._present()
        return True

    def set_viewport(self, rect: Rect) -> None:
        self._active_viewport = Rect(rect.x, rect.y, rect.w, rect.h)
        self.target.set_clip(pygame.Rect(rect.x, rect.y, rect.w, rect.h))

    def reset_viewport(self) -> None:
        self.set_viewport(self.viewport)

    def set_background_color(self, color: Sequence[int]) -> None:
        if len(color) != 4:
            raise ValueError("background colour needs four components")
        self.background = _color(*color)

    def draw_texture(
        self,
        texture: pygame.Surface,
        x: int,
        y: int,
        section: Optional[Rect] = None,
        speed: float = 1.0,
        flip: Flip = Flip.NONE,
        angle: float = 0.0,
        pivot_x: Optional[int] = None,
        pivot_y: Optional[int] = None,
    ) -> Rect:
        """Blit ``texture`` (or a section of it); return the destination rectangle."""
        if texture is None:
            raise ValueError("cannot draw a missing texture")
        scale = self.scale
        dest_x = int(self.camera.x * speed) + x * scale
        dest_y = int(self.camera.y * speed) + y * scale

        if section is not None:
            width, height = section.w, section.h
            area = pygame.Rect(section.x, section.y, section.w, section.h).clip(texture.get_rect())
            image = texture.subsurface(area) if area.w and area.h else None
        else:
            width, height = texture.get_size()
            image = texture

        width *= scale
        height *= scale
        dest = Rect(dest_x, dest_y, width, height)
        if image is None or width <= 0 or height <= 0:
            return dest

        if image.get_size() != (width, height):
            image = pygame.transform.scale(image, (width, height))
        if flip:
            image = pygame.transform.flip(
                image, bool(flip & Flip.HORIZONTAL), bool(flip & Flip.VERTICAL)
            )

        if angle:
            rotated = pygame.transform.rotate(image, -angle)
            if pivot_x is not None and pivot_y is not None:
                px, py = float(pivot_x), float(pivot_y)
            else:
                px, py = width / 2, height / 2
            vx, vy = width / 2 - px, height / 2 - py
            rad = math.radians(angle)
            rx = vx * math.cos(rad) - vy * math.sin(rad)
            ry = vx * math.sin(rad) + vy * math.cos(rad)
            center = self._screen(dest_x + px + rx, dest_y + py + ry)
            self.target.blit(rotated, rotated.get_rect(center=center))
        else:
            self.target.blit(image, self._screen(dest_x, dest_y))
        return dest

    def draw_rectangle(
        self,
        rect: Rect,
        r: int,
        g: int,
        b: int,
        a: int = 255,
        filled: bool = True,
        use_camera: bool = True,
    ) -> Rect:
        """Draw a filled or outlined rectangle; return it in logical coordinates."""
        color = _color(r, g, b, a)
        scale = self.scale
        if use_camera:
            drawn = Rect(
                self.camera.x + rect.x * scale,
                self.camera.y + rect.y * scale,
                rect.w * scale,
                rect.h * scale,
            )
        else:
            drawn = Rect(rect.x, rect.y, rect.w, rect.h)
        sx, sy = self._screen(drawn.x, drawn.y)
        area = pygame.Rect(sx, sy, drawn.w, drawn.h)
        self._paint(color, lambda surface, c: pygame.draw.rect(surface, c, area, 0 if filled else 1))
        return drawn

    def draw_line(
        self,
        x1: int,
        y1: int,
        x2: int,
        y2: int,
        r: int,
        g: int,
        b: int,
        a: int = 255,
        use_camera: bool = True,
    ) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        """Draw a line segment; return its end points in logical coordinates."""
        color = _color(r, g, b, a)
        scale = self.scale
        if use_camera:
            start = (self.camera.x + x1 * scale, self.camera.y + y1 * scale)
            end = (self.camera.x + x2 * scale, self.camera.y + y2 * scale)
        else:
            start = (x1 * scale, y1 * scale)
            end = (x2 * scale, y2 * scale)
        screen_start, screen_end = self._screen(*start), self._screen(*end)
        self._paint(color, lambda surface, c: pygame.draw.line(surface, c, screen_start, screen_end))
        return start, end

    def draw_circle(
        self,
        x: int,
        y: int,
        radius: int,
        r: int,
        g: int,
        b: int,
        a: int = 255,
        use_camera: bool = True,
    ) -> List[Tuple[int, int]]:
        """Plot a circle as one point per degree; return the points."""
        color = _color(r, g, b, a)
        scale = self.scale
        center_x = int(x * scale + self.camera.x)
        center_y = int(y * scale + self.camera.y)
        factor = math.pi / 180.0
        points = [
            (
                int(center_x + radius * math.cos(i * factor)),
                int(center_y + radius * math.sin(i * factor)),
            )
            for i in range(_CIRCLE_POINTS)
        ]
        screen_points = [self._screen(px, py) for px, py in points]

        def plot(surface: pygame.Surface, c: Color) -> None:
            for point in screen_points:
                surface.set_at(point, c)

        self._paint(color, plot)
        return points

    def load_state(self, node: ET.Element) -> bool:
        """Restore the camera position from ``node``'s ``camera`` child."""
        camera = node.find("camera")
        self.camera.x = _attr_int(camera, "x")
        self.camera.y = _attr_int(camera, "y")
        return True

    def save_state(self, node: ET.Element) -> bool:
        """Append a ``camera`` child holding the camera position."""
        ET.SubElement(node, "camera", {"x": str(self.camera.x), "y": str(self.camera.y)})
        return True

    def toggle_vsync(self, enabled: bool) -> None:
        self._vsync = enabled
        if enabled:
            log.debug("Using VSync")
        log.debug("vsync: %d", enabled)