"""Layer-shell window properties attached to a top-level window."""

from __future__ import annotations

import enum
from typing import Any, Callable

from .signals import Signal


class Anchor(enum.IntFlag):
    """Screen edges a layer surface is anchored to."""

    NONE = 0
    TOP = 1
    BOTTOM = 2
    LEFT = 4
    RIGHT = 8


class Layer(enum.IntEnum):
    """The layer a surface is placed in, from the bottom up."""

    BACKGROUND = 0
    BOTTOM = 1
    TOP = 2
    OVERLAY = 3


class KeyboardInteractivity(enum.IntEnum):
    """How the layer surface receives keyboard focus."""

    NONE = 0
    EXCLUSIVE = 1
    ON_DEMAND = 2


class ScreenConfiguration(enum.IntEnum):
    """Where the screen for the surface comes from."""

    FROM_WINDOW = 0
    FROM_COMPOSITOR = 1


class _Notifying:
    """An attribute that emits the named signal when its value changes."""

    def __init__(
        self,
        default: Any,
        signal: str | None = None,
        convert: Callable[[Any], Any] | None = None,
    ) -> None:
        self._default = default
        self._signal = signal
        self._convert = convert
        self._attr = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self._attr = "_" + name

    def __get__(self, obj: Any, objtype: type | None = None) -> Any:
        if obj is None:
            return self
        return getattr(obj, self._attr, self._default)

    def __set__(self, obj: Any, value: Any) -> None:
        if self._convert is not None:
            value = self._convert(value)
        if value == self.__get__(obj):
            return
        setattr(obj, self._attr, value)
        if self._signal is not None:
            getattr(obj, self._signal).emit()


class LayerShellWindow:
    """Layer-shell settings of one window.

    Use :meth:`get` to obtain the single instance belonging to a window.
    """

    _registry: dict[int, tuple[Any, LayerShellWindow]] = {}

    anchors = _Notifying(Anchor.NONE, "anchors_changed", Anchor)
    exclusion_zone = _Notifying(0, "exclusion_zone_changed", int)
    left_margin = _Notifying(0, "margins_changed", int)
    right_margin = _Notifying(0, "margins_changed", int)
    top_margin = _Notifying(0, "margins_changed", int)
    bottom_margin = _Notifying(0, "margins_changed", int)
    keyboard_interactivity = _Notifying(
        KeyboardInteractivity.NONE, "keyboard_interactivity_changed", KeyboardInteractivity
    )
    layer = _Notifying(Layer.TOP, "layer_changed", Layer)
    screen_configuration = _Notifying(
        ScreenConfiguration.FROM_WINDOW, None, ScreenConfiguration
    )
    close_on_dismissed = _Notifying(True, None, bool)
    scope = _Notifying("window", "scope_changed", str)

    def __init__(self, window: Any) -> None:
        self.window = window
        self.anchors_changed = Signal()
        self.exclusion_zone_changed = Signal()
        self.margins_changed = Signal()
        self.keyboard_interactivity_changed = Signal()
        self.layer_changed = Signal()
        self.scope_changed = Signal()
        type(self)._registry[id(window)] = (window, self)

    @classmethod
    def get(cls, window: Any) -> LayerShellWindow:
        """The layer-shell settings of ``window``, created on first use."""
        if window is None:
            raise ValueError("window must not be None")
        entry = cls._registry.get(id(window))
        if entry is not None and entry[0] is window:
            return entry[1]
        return cls(window)

    def close(self) -> None:
        """Detach these settings from their window."""
        entry = self._registry.get(id(self.window))
        if entry is not None and entry[1] is self:
            del self._registry[id(self.window)]

    def __repr__(self) -> str:
        return (
            f"LayerShellWindow(scope={self.scope!r}, layer={self.layer!r}, "
            f"anchors={self.anchors!r})"
        )