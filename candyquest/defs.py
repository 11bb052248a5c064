"""Shared definitions: rectangles, string size limits and small helpers."""

from __future__ import annotations

from dataclasses import dataclass

SHORT_STR = 32
MID_STR = 255
HUGE_STR = 8192


@dataclass
class Rect:
    """An axis-aligned rectangle in pixels."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


def in_range(value, minimum, maximum) -> bool:
    """Return True when ``minimum <= value <= maximum``."""
    return minimum <= value <= maximum


def join_path(folder: str, file: str) -> str:
    """Join a folder and a file name with a forward slash."""
    path = f"{folder}/{file}"
    if len(path) >= MID_STR:
        raise ValueError(f"path longer than {MID_STR - 1} characters")
    return path