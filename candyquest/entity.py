"""Base class for every game object living in a scene."""

from __future__ import annotations

import re
from enum import Enum, auto
from typing import Any, List, Optional

from .point import Point

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _parse_int(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    match = _INT_PREFIX.match(str(value))
    return int(match.group(1)) if match else None


def _set_attribute(node: Any, name: str, value: Any) -> None:
    setter = getattr(node, "set", None)
    if callable(setter):
        setter(name, str(value))
    else:
        node[name] = str(value)


class EntityType(Enum):
    PLAYER = auto()
    FLYINGENEMY = auto()
    WALKINGENEMY = auto()
    BOSS = auto()
    HEALITEM = auto()
    CANDYITEM = auto()
    WALL = auto()
    PORTAL = auto()
    TUTORIAL = auto()
    MOVINGPLATFORM = auto()
    PARTICLES = auto()
    CHECKPOINT = auto()
    UNKNOWN = auto()


class Entity:
    """A scene object with lifecycle hooks and collision callbacks.

    ``parameters`` is the entity's configuration node: anything with a
    ``get(name)`` method returning attribute strings, such as an XML element
    or a plain dict.
    """

    def __init__(self, entity_type: EntityType, name: str = "") -> None:
        self.name = name
        self.type = entity_type
        self.active = True
        self.parameters: Optional[Any] = None
        self.position = Point()
        self.position2 = Point()
        self.initialpos = Point()
        self.renderable = True
        self.contacts: List[Any] = []

    def _param(self, name: str) -> Optional[str]:
        if self.parameters is None:
            return None
        return self.parameters.get(name)

    def _param_int(self, name: str) -> int:
        value = _parse_int(self._param(name))
        return value if value is not None else 0

    def _param_bool(self, name: str) -> bool:
        value = self._param(name)
        return bool(value) and value[0] in "1tTyY"

    def _param_str(self, name: str) -> str:
        value = self._param(name)
        return value if value is not None else ""

    def awake(self) -> bool:
        return True

    def start(self) -> bool:
        return True

    def update(self, dt: float) -> bool:
        return True

    def clean_up(self) -> bool:
        return True

    def load_state(self, node: Any) -> bool:
        """Restore the position from the ``x`` and ``y`` attributes of a node."""
        x = _parse_int(node.get("x"))
        y = _parse_int(node.get("y"))
        if x is not None:
            self.position.x = x
        if y is not None:
            self.position.y = y
        return True

    def save_state(self, node: Any) -> bool:
        """Write the position as ``x`` and ``y`` attributes of a node."""
        _set_attribute(node, "x", self.position.x)
        _set_attribute(node, "y", self.position.y)
        return True

    def enable(self) -> None:
        if not self.active:
            self.active = True
            self.start()

    def disable(self) -> None:
        if self.active:
            self.active = False
            self.clean_up()

    def on_collision(self, body_a: Any, body_b: Any) -> None:
        """Record that one of this entity's bodies started touching another."""
        self.contacts.append(body_b)

    def on_exit_collision(self, body_a: Any, body_b: Any) -> None:
        """Forget a contact once the bodies stop touching."""
        if body_b in self.contacts:
            self.contacts.remove(body_b)