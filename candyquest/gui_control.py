"""Base class for user-interface controls."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Optional, Protocol, Tuple

from .defs import Rect

Color = Tuple[int, int, int, int]


class GuiControlType(Enum):
    BUTTON = auto()
    TOGGLE = auto()
    CHECKBOX = auto()
    SLIDER = auto()
    SLIDERBAR = auto()
    COMBOBOX = auto()
    DROPDOWNBOX = auto()
    INPUTBOX = auto()
    VALUEBOX = auto()
    SPINNER = auto()
    POPUP = auto()


class GuiControlState(Enum):
    DISABLED = auto()
    NORMAL = auto()
    FOCUSED = auto()
    PRESSED = auto()
    SELECTED = auto()


class _GuiObserver(Protocol):
    def on_gui_mouse_click_event(self, control: GuiControl) -> Any: ...


class GuiControl:
    """A control with bounds, text, tint and an observer told about clicks."""

    def __init__(
        self,
        control_type: GuiControlType,
        id: int = 0,
        bounds: Optional[Rect] = None,
        text: str = "",
    ) -> None:
        self.id = id
        self.type = control_type
        self.state = GuiControlState.NORMAL
        self.text = text
        self.bounds = bounds if bounds is not None else Rect()
        self.color: Color = (255, 255, 255, 255)
        self.texture: Any = None
        self.section = Rect()
        self.observer: Optional[_GuiObserver] = None
        self.elapsed = 0.0

    def update(self, dt: float) -> bool:
        """Advance the control's clock by ``dt``; subclasses add their logic."""
        self.elapsed += dt
        return True

    def set_texture(self, texture: Any) -> None:
        self.texture = texture
        self.section = Rect(0, 0, 0, 0)

    def set_observer(self, observer: _GuiObserver) -> None:
        self.observer = observer

    def notify_observer(self) -> Any:
        if self.observer is None:
            raise RuntimeError("control has no observer")
        return self.observer.on_gui_mouse_click_event(self)