"""Properties of a dock plugin's window and the events it relays."""

from __future__ import annotations

import enum
from typing import Any, Callable

from .signals import Signal


class PluginType(enum.IntEnum):
    """The role a plugin window plays in the dock."""

    TOOLTIP = 1
    POPUP = 2
    TRAY = 3
    FIXED = 4
    SYSTEM = 5
    TOOL = 6
    QUICK = 7
    SLIDING_PANEL = 8


class _Notifying:
    """An attribute that emits the named signal when its value changes."""

    def __init__(self, default: Any, signal: str, convert: Callable[[Any], Any]) -> None:
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
        value = self._convert(value)
        if value == self.__get__(obj):
            return
        setattr(obj, self._attr, value)
        getattr(obj, self._signal).emit()


class DockPlugin:
    """Dock plugin settings of one window.

    Use :meth:`get` to obtain the single instance belonging to a window.
    ``clicked`` carries ``(menu_id, checked)``; the ``dock_*_changed``
    signals carry the new dock value.
    """

    _registry: dict[int, tuple[Any, DockPlugin]] = {}

    plugin_type = _Notifying(PluginType.QUICK, "plugin_type_changed", PluginType)
    dcc_icon = _Notifying("", "dcc_icon_changed", str)
    plugin_id = _Notifying("", "plugin_id_changed", str)
    item_key = _Notifying("", "item_key_changed", str)
    context_menu = _Notifying("", "context_menu_changed", str)
    plugin_flags = _Notifying(0, "plugin_flags_changed", int)

    def __init__(self, window: Any) -> None:
        self.window = window
        self.clicked = Signal()
        self.dock_position_changed = Signal()
        self.dock_color_theme_changed = Signal()
        self.dock_display_mode_changed = Signal()
        self.plugin_type_changed = Signal()
        self.tray_icon_changed = Signal()
        self.dcc_icon_changed = Signal()
        self.plugin_id_changed = Signal()
        self.item_key_changed = Signal()
        self.context_menu_changed = Signal()
        self.plugin_flags_changed = Signal()

    @classmethod
    def get(cls, window: Any) -> DockPlugin:
        """The dock plugin settings of ``window``, created on first use."""
        if window is None:
            raise ValueError("window must not be None")
        entry = cls._registry.get(id(window))
        if entry is not None and entry[0] is window:
            return entry[1]
        plugin = cls(window)
        cls._registry[id(window)] = (window, plugin)
        return plugin

    def __repr__(self) -> str:
        return (
            f"DockPlugin(plugin_id={self.plugin_id!r}, item_key={self.item_key!r}, "
            f"plugin_type={self.plugin_type!r})"
        )