"""A platform that slides back and forth along one axis."""

from __future__ import annotations

from typing import Any, Optional

from .entity import Entity, EntityType
from .point import Point

_METER_PER_PIXEL = 0.02
BODY_TYPE = "kinematic"
COLLIDER_TYPE = "moving_platform"
BODY_WIDTH = 48
BODY_HEIGHT = 16


def _to_meters(pixels: float) -> float:
    return _METER_PER_PIXEL * pixels


class MovingPlatform(Entity):
    """Moves one pixel per update, turning around ``distance`` pixels from its start.

    ``textures`` needs ``load(path)``; ``physics`` needs
    ``create_rectangle(x, y, width, height, body_type)`` returning a body with
    ``set_transform(x, y, angle)`` and settable ``listener`` and ``ctype``;
    ``render`` needs ``draw_texture(texture, x, y)``. Each may be omitted.
    """

    def __init__(
        self,
        textures: Optional[Any] = None,
        physics: Optional[Any] = None,
        render: Optional[Any] = None,
    ) -> None:
        super().__init__(EntityType.MOVINGPLATFORM, "movingPlatform")
        self._textures = textures
        self._physics = physics
        self._render = render
        self.texture: Any = None
        self.texture_path = ""
        self.pbody: Any = None
        self.reversing = False
        self.initial_pos = Point()
        self.distance = 0
        self.horizontal = True

    def awake(self) -> bool:
        self.position = Point(self._param_int("x"), self._param_int("y"))
        self.texture_path = self._param_str("texturepath")
        self.reversing = self._param_bool("direction")
        self.distance = self._param_int("distance")
        self.horizontal = self._param_bool("type")
        return True

    def start(self) -> bool:
        if self._textures is not None:
            self.texture = self._textures.load(self.texture_path)
        if self._physics is not None:
            self.pbody = self._physics.create_rectangle(
                self.position.x + 16, self.position.y + 16, BODY_WIDTH, BODY_HEIGHT, BODY_TYPE
            )
            self.pbody.ctype = COLLIDER_TYPE
            self.pbody.listener = self
        self.initial_pos = self.position
        return True

    def _step(self, value: int, origin: int) -> int:
        if not self.reversing:
            value += 1
            if value >= origin + self.distance:
                self.reversing = True
        else:
            value -= 1
            if value <= origin - self.distance:
                self.reversing = False
        return value

    def update(self, dt: float) -> bool:
        x, y = self.position.x, self.position.y
        if self.horizontal:
            x = self._step(x, self.initial_pos.x)
        else:
            y = self._step(y, self.initial_pos.y)
        self.position = Point(x, y)

        if self.pbody is not None:
            self.pbody.set_transform(_to_meters(x + 0.3), _to_meters(y + 0.35), 0)
        if self._render is not None:
            self._render.draw_texture(self.texture, x - 8, y + 8)
        return True