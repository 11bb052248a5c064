"""The game window, configured from the window section of the config file."""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from typing import Any, Optional, Tuple

import pygame

log = logging.getLogger(__name__)

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _attr(config: ET.Element, tag: str, name: str) -> Optional[str]:
    child = config.find(tag)
    return child.get(name) if child is not None else None


def _attr_bool(config: ET.Element, tag: str, name: str) -> bool:
    value = _attr(config, tag, name)
    return bool(value) and value[0] in "1tTyY"


def _attr_int(config: ET.Element, tag: str, name: str) -> int:
    value = _attr(config, tag, name)
    match = _INT_PREFIX.match(value) if value is not None else None
    return int(match.group(1)) if match else 0


class WindowError(RuntimeError):
    """Raised when the window cannot be created or used."""


class Window:
    """Creates and manages the display window.

    ``display`` is the display backend, ``pygame.display`` by default.
    """

    def __init__(self, title: str = "", display: Optional[Any] = None) -> None:
        self.title = title
        self._display = display if display is not None else pygame.display
        self.surface: Optional[pygame.Surface] = None
        self.fullscreen = False
        self.width = 0
        self.height = 0
        self._scale = 0
        self._flags = 0

    @property
    def scale(self) -> int:
        return self._scale

    @property
    def is_fullscreen(self) -> bool:
        return bool(self._flags & pygame.FULLSCREEN)

    def awake(self, config: ET.Element) -> bool:
        """Create the window from the ``config`` node."""
        log.debug("Init window & surface")
        try:
            self._display.init()
        except pygame.error as exc:
            raise WindowError(f"video could not initialise: {exc}") from exc

        self.fullscreen = _attr_bool(config, "fullscreen", "value")
        borderless = _attr_bool(config, "bordeless", "value")
        resizable = _attr_bool(config, "resizable", "value")
        fullscreen_window = _attr_bool(config, "fullscreen_window", "value")

        self.width = _attr_int(config, "resolution", "width")
        self.height = _attr_int(config, "resolution", "height")
        self._scale = _attr_int(config, "resolution", "scale")

        flags = 0
        if self.fullscreen or fullscreen_window:
            flags |= pygame.FULLSCREEN
        if borderless:
            flags |= pygame.NOFRAME
        if resizable:
            flags |= pygame.RESIZABLE
        self._flags = flags

        try:
            self.surface = self._display.set_mode((self.width, self.height), flags)
        except pygame.error as exc:
            raise WindowError(f"window could not be created: {exc}") from exc
        self._display.set_caption(self.title)
        self.toggle_fullscreen(self.fullscreen)
        return True

    def set_title(self, title: str) -> None:
        self.title = title
        self._display.set_caption(title)

    def window_size(self) -> Tuple[int, int]:
        return self.width, self.height

    def toggle_fullscreen(self, enabled: bool) -> None:
        """Enter or leave fullscreen, restoring the saved size on leaving."""
        if self.surface is None:
            raise WindowError("window has not been created")
        if enabled:
            if not self.is_fullscreen:
                self.width, self.height = self.surface.get_size()
                self._flags |= pygame.FULLSCREEN
                self.surface = self._display.set_mode((self.width, self.height), self._flags)
        elif self.is_fullscreen:
            self._flags &= ~pygame.FULLSCREEN
            self.surface = self._display.set_mode((self.width, self.height), self._flags)

    def clean_up(self) -> bool:
        log.debug("Destroying window")
        self.surface = None
        self._display.quit()
        return True