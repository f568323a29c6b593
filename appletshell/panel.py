"""Panels: top-level containments that own a window and its popups."""

from __future__ import annotations

import logging
import os
from typing import Any, Callable

from .applet import Applet
from .containment import Containment
from .signals import Signal

log = logging.getLogger(__name__)

TOOL_TIP_FLAG = "ToolTip"

WindowFactory = Callable[[dict[str, Any], Any], Any]


class Panel(Containment):
    """A containment whose root object is its window.

    When the root object is set, a popup window and a tooltip window are
    created through ``popup_window_factory``, which is called with the
    window's initial properties and its transient parent.
    """

    def __init__(self, parent: Any = None) -> None:
        super().__init__(parent)
        self.popup_window_factory: WindowFactory | None = None
        self.icon_search_paths: list[str] = []
        self._popup_window: Any = None
        self._tool_tip_window: Any = None
        self.popup_window_changed = Signal()
        self.tool_tip_window_changed = Signal()
        self.root_object_changed.connect(self._on_root_object_changed)

    @property
    def window(self) -> Any:
        return self.root_object

    @property
    def popup_window(self) -> Any:
        return self._popup_window

    @property
    def tool_tip_window(self) -> Any:
        return self._tool_tip_window

    def load(self) -> bool:
        return super().load()

    def init(self) -> bool:
        self._init_icon_search_paths()
        return super().init()

    @classmethod
    def enclosing(cls, applet: Applet | None) -> Panel | None:
        """The nearest panel among ``applet`` and its ancestors."""
        return super().enclosing(applet)

    def _init_icon_search_paths(self) -> None:
        for item in [*self.applets, self]:
            icons = os.path.join(os.path.abspath(item.plugin_meta_data.plugin_dir), "icons")
            if item.plugin_meta_data.plugin_dir and os.path.exists(icons):
                self.icon_search_paths.append(icons)

    def _on_root_object_changed(self) -> None:
        self._ensure_popup_window()
        self._ensure_tool_tip_window()

    def _create_window(self, properties: dict[str, Any], what: str) -> Any:
        if self.window is None:
            log.warning("Failed to create %s because TransientParent window is empty.", what)
            return None
        if self.popup_window_factory is None:
            return None
        window = self.popup_window_factory(properties, self.window)
        if window is not None:
            log.debug("Create %s successfully.", what)
        return window

    def _ensure_popup_window(self) -> None:
        if self._popup_window is not None:
            return
        window = self._create_window({}, "PopupWindow")
        if window is not None:
            self._popup_window = window
            self.popup_window_changed.emit()

    def _ensure_tool_tip_window(self) -> None:
        if self._tool_tip_window is not None:
            return
        window = self._create_window({"flags": TOOL_TIP_FLAG}, "ToolTipWindow")
        if window is not None:
            self._tool_tip_window = window
            self.tool_tip_window_changed.emit()