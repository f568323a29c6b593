"""Containments: applets that create, own and expose child applets."""

from __future__ import annotations

from typing import Any, Callable

from .applet import Applet
from .appletdata import AppletData
from .appletitemmodel import AppletItemModel
from .pluginloader import PluginLoader
from .signals import Signal


class Containment(Applet):
    """An applet holding child applets created from its child plugins.

    The root objects of the children are collected in ``applet_item_model``
    as soon as each child sets one.
    """

    def __init__(self, parent: Any = None) -> None:
        super().__init__(parent)
        self._applets: list[Applet] = []
        self._model = AppletItemModel()
        self._root_slots: dict[int, Callable[[], None]] = {}
        self.plugin_loader: PluginLoader | None = None

    def _loader(self) -> PluginLoader:
        return self.plugin_loader if self.plugin_loader is not None else PluginLoader.instance()

    @property
    def applets(self) -> list[Applet]:
        return list(self._applets)

    @property
    def applet_item_model(self) -> AppletItemModel:
        return self._model

    def create_applet(self, data: AppletData) -> Applet | None:
        """Create a child applet from ``data``.

        Returns None when ``data`` does not name a child plugin of this
        containment or the applet cannot be loaded.
        """
        loader = self._loader()
        children = loader.children_plugin(self.plugin_id)
        if loader.plugin(data.plugin_id) not in children:
            return None
        applet = loader.load_applet(data)
        if applet is None:
            return None

        applet.parent = self

        def on_root_object_changed() -> None:
            root = applet.root_object
            if root is None:
                return
            self._model.append(root)
            destroyed = getattr(root, "destroyed", None)
            if isinstance(destroyed, Signal):
                destroyed.connect(lambda: self._model.remove(root))

        applet.root_object_changed.connect(on_root_object_changed)
        self._root_slots[id(applet)] = on_root_object_changed
        self._applets.append(applet)
        return applet

    def remove_applet(self, applet: Applet) -> None:
        """Detach ``applet`` and drop its root object from the model."""
        if applet is None:
            raise ValueError("applet must not be None")
        if applet in self._applets:
            self._applets.remove(applet)
        slot = self._root_slots.pop(id(applet), None)
        if slot is not None:
            applet.root_object_changed.disconnect(slot)
        root = applet.root_object
        if root is not None:
            self._model.remove(root)
        applet.parent = None

    def applet_items(self) -> list[Any]:
        """The root objects of the child applets, in creation order."""
        return self._model.root_objects

    def applet(self, applet_id: str) -> Applet | None:
        """The child applet with instance id ``applet_id``, if any."""
        return next((item for item in self._applets if item.id == applet_id), None)

    def load(self) -> bool:
        return super().load()

    def init(self) -> bool:
        return super().init()

    @classmethod
    def enclosing(cls, applet: Applet | None) -> Containment | None:
        """The nearest instance of this class among ``applet`` and its ancestors."""
        while applet is not None:
            if isinstance(applet, cls):
                return applet
            applet = applet.parent_applet
        return None