"""The base applet: one plugin instance in the applet tree."""

from __future__ import annotations

from typing import Any

from .appletdata import AppletData
from .pluginmetadata import PluginMetaData
from .signals import Signal


class Applet:
    """A single plugin instance with its metadata, instance data and root object."""

    def __init__(self, parent: Any = None) -> None:
        self.parent = parent
        self.plugin_meta_data = PluginMetaData()
        self.applet_data = AppletData()
        self._root_object: Any = None
        self.root_object_changed = Signal()

    @property
    def id(self) -> str:
        return self.applet_data.id

    @property
    def plugin_id(self) -> str:
        return self.plugin_meta_data.plugin_id

    @property
    def parent_applet(self) -> Applet | None:
        return self.parent if isinstance(self.parent, Applet) else None

    @property
    def root_object(self) -> Any:
        return self._root_object

    @root_object.setter
    def root_object(self, root: Any) -> None:
        if root is self._root_object:
            return
        self._root_object = root
        self.root_object_changed.emit()

    def load(self) -> bool:
        """Prepare the applet; return False to skip it."""
        return True

    def init(self) -> bool:
        """Initialise the applet after loading."""
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}(plugin_id={self.plugin_id!r}, id={self.id!r})"