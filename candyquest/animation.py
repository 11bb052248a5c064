"""Frame-based sprite animations loaded from the game configuration."""

from __future__ import annotations

import itertools
import re
import xml.etree.ElementTree as ET
from os import PathLike
from typing import List, Optional, Union

from .defs import Rect

MAX_FRAMES = 60

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _attr_int(element: Optional[ET.Element], name: str) -> int:
    value = element.get(name) if element is not None else None
    if value is None:
        return 0
    match = _INT_PREFIX.match(value)
    return int(match.group(1)) if match else 0


def _attr_float(element: Optional[ET.Element], name: str) -> float:
    value = element.get(name) if element is not None else None
    if value is None:
        return 0.0
    try:
        return float(value.strip())
    except ValueError:
        return 0.0


def _attr_bool(element: Optional[ET.Element], name: str) -> bool:
    value = element.get(name) if element is not None else None
    return bool(value) and value[0] in "1tTyY"


class Animation:
    """A sequence of sprite-sheet sections advanced by ``speed`` per update."""

    def __init__(self, speed: float = 1.0, loop: bool = True, pingpong: bool = False) -> None:
        self.speed = speed
        self.loop = loop
        # Lets the animation keep going back and forth.
        self.pingpong = pingpong
        self.frames: List[Rect] = []
        self._current = 0.0
        self._loop_count = 0
        self._direction = 1

    def __len__(self) -> int:
        return len(self.frames)

    def push_back(self, rect: Rect) -> None:
        if len(self.frames) >= MAX_FRAMES:
            raise OverflowError(f"an animation holds at most {MAX_FRAMES} frames")
        self.frames.append(rect)

    def reset(self) -> None:
        self._current = 0.0
        self._loop_count = 0

    def has_finished(self) -> bool:
        return not self.loop and not self.pingpong and self._loop_count > 0

    def update(self) -> None:
        total = len(self.frames)
        self._current += self.speed
        if self._current >= total:
            self._current = 0.0 if (self.loop or self.pingpong) else float(total - 1)
            self._loop_count += 1
            if self.pingpong:
                self._direction = -self._direction

    def current_frame(self) -> Rect:
        """Return the section to draw for the current frame."""
        total = len(self.frames)
        if total == 0:
            raise IndexError("animation has no frames")
        index = int(self._current)
        if self._direction == -1:
            index = min(int(total - self._current), total - 1)
        return self.frames[index]

    def load(self, config_path: Union[str, "PathLike[str]"], owner: str, name: str) -> None:
        """Append frames from ``config/scene/<owner>/animations/<name>``.

        A missing animation node leaves no frames, ``loop`` false and speed 0.
        """
        root = ET.parse(config_path).getroot()
        group = root.find(f"scene/{owner}/animations/{name}") if root.tag == "config" else None
        if group is not None:
            for anim in itertools.dropwhile(lambda child: child.tag != "anim", group):
                self.push_back(
                    Rect(
                        _attr_int(anim, "x"),
                        _attr_int(anim, "y"),
                        _attr_int(anim, "width"),
                        _attr_int(anim, "height"),
                    )
                )
        self.loop = _attr_bool(group, "loop")
        self.speed = _attr_float(group, "speed")