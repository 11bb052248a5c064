"""A* path search over a byte walkability map."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .point import Point

log = logging.getLogger(__name__)

DEFAULT_PATH_LENGTH = 50
INVALID_WALK_CODE = 255
_MAX_SCORE = 65535


@dataclass(eq=False)
class PathNode:
    """A node of the search, linked to the node it was reached from."""

    g: int = -1
    h: int = -1
    pos: Point = field(default_factory=lambda: Point(-1, -1))
    parent: Optional[PathNode] = None

    def score(self) -> int:
        return self.g + self.h

    def calculate_f(self, destination: Point) -> int:
        """Recompute g from the parent and h as the distance to ``destination``."""
        if self.parent is None:
            raise ValueError("a node without a parent has no path cost")
        self.g = self.parent.g + 1
        self.h = self.pos.distance_to(destination)
        return self.g + self.h


class PathFinding:
    """Holds a walkability map and the last path found on it."""

    def __init__(self) -> None:
        self.width = 0
        self.height = 0
        self._map = b""
        self._last_path: List[Point] = []

    @property
    def last_path(self) -> Tuple[Point, ...]:
        return tuple(self._last_path)

    def set_navigation_map(self, width: int, height: int, data: Sequence[int]) -> None:
        cells = bytes(data)
        if len(cells) < width * height:
            raise ValueError(f"map needs {width * height} cells, got {len(cells)}")
        self.width = width
        self.height = height
        self._map = cells[: width * height]

    def check_boundaries(self, pos: Point) -> bool:
        return 0 <= pos.x <= self.width and 0 <= pos.y <= self.height

    def tile_at(self, pos: Point) -> int:
        if self.check_boundaries(pos):
            index = pos.y * self.width + pos.x
            if index < len(self._map):
                return self._map[index]
        return INVALID_WALK_CODE

    def is_walkable(self, pos: Point) -> bool:
        tile = self.tile_at(pos)
        return tile != INVALID_WALK_CODE and tile > 0

    def walkable_adjacents(self, node: PathNode) -> List[PathNode]:
        """Return the walkable neighbours of ``node`` with it as their parent."""
        x, y = node.pos.x, node.pos.y
        candidates = (Point(x, y + 1), Point(x, y - 1), Point(x + 1, y), Point(x - 1, y))
        return [PathNode(-1, -1, tile, node) for tile in candidates if self.is_walkable(tile)]

    @staticmethod
    def _pop_lowest(frontier: List[PathNode]) -> Optional[PathNode]:
        best_index = None
        best = _MAX_SCORE
        for index, node in reversed(list(enumerate(frontier))):
            if node.score() < best:
                best = node.score()
                best_index = index
        return None if best_index is None else frontier.pop(best_index)

    def create_path(self, origin: Point, destination: Point) -> int:
        """Search a path; return its number of steps or -1 when there is none."""
        if not (self.is_walkable(origin) and self.is_walkable(destination)):
            return -1

        frontier = [PathNode(0, 0, origin, None)]
        visited = set()
        iterations = 0

        while frontier:
            node = self._pop_lowest(frontier)
            if node is None:
                break

            if node.pos == destination:
                path = []
                step: Optional[PathNode] = node
                while step is not None:
                    path.append(step.pos)
                    step = step.parent
                path.reverse()
                self._last_path = path
                log.debug("Created path of %d steps in %d iterations", len(path), iterations)
                return len(path)

            for neighbour in self.walkable_adjacents(node):
                if neighbour.pos in visited:
                    continue
                visited.add(neighbour.pos)
                existing = next((n for n in frontier if n.pos == neighbour.pos), None)
                if existing is None:
                    neighbour.calculate_f(destination)
                    frontier.append(neighbour)
                elif existing.g > neighbour.g + 1:
                    existing.parent = neighbour.parent
                    existing.calculate_f(destination)
            iterations += 1

        return -1

    def clear_last_path(self) -> None:
        self._last_path.clear()

    def move(self, current_pos: Point) -> Optional[Point]:
        """Advance along the last path from ``current_pos``.

        Returns the next position, or None when there is no path, the
        position is not the head of the path, or the end was reached.
        The path keeps its length while advancing, so its last step repeats.
        """
        if not self._last_path:
            log.debug("Path unavailable")
            return None
        if current_pos != self._last_path[0]:
            log.debug("Position unavailable")
            return None
        if len(self._last_path) > 1:
            next_pos = self._last_path[1]
            self._last_path[:-1] = self._last_path[1:]
            return next_pos
        log.debug("End of path reached")
        self._last_path.clear()
        return None

    def clean_up(self) -> bool:
        log.debug("Freeing pathfinding library")
        self._last_path.clear()
        self._map = b""
        return True