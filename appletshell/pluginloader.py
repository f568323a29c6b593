"""Discovery of plugin packages and creation of applets from them."""

from __future__ import annotations

import logging
import os
import sys
import threading
import uuid
from typing import Any, Iterable

from .applet import Applet
from .appletdata import AppletData
from .pluginfactory import AppletFactory
from .pluginmetadata import PluginMetaData

log = logging.getLogger(__name__)

METADATA_FILE_NAME = "metadata.json"
PACKAGE_PATH_ENV = "DDE_SHELL_PACKAGE_PATH"
PLUGIN_PATH_ENV = "DDE_SHELL_PLUGIN_PATH"


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    return ""


def _building_dir(subdir: str) -> str:
    if not sys.argv or not sys.argv[0]:
        return ""
    app_dir = os.path.dirname(os.path.abspath(sys.argv[0]))
    candidate = os.path.join(os.path.dirname(app_dir), subdir)
    return candidate if os.path.exists(candidate) else ""


def _generic_data_locations() -> list[str]:
    home = os.environ.get("XDG_DATA_HOME") or os.path.join(
        os.path.expanduser("~"), ".local", "share"
    )
    dirs = os.environ.get("XDG_DATA_DIRS") or "/usr/local/share:/usr/share"
    return [home, *(item for item in dirs.split(":") if item)]


def _builtin_package_paths() -> list[str]:
    result = []
    env_path = os.environ.get(PACKAGE_PATH_ENV)
    if env_path:
        result.append(env_path)
    package_dir = _building_dir("packages")
    if package_dir:
        result.append(package_dir)
    result.extend(os.path.join(item, "dde-shell") for item in _generic_data_locations())
    log.debug("Builtin package paths %s", result)
    return result


def _builtin_plugin_paths() -> list[str]:
    result = []
    env_path = os.environ.get(PLUGIN_PATH_ENV)
    if env_path:
        result.append(env_path)
    plugins_dir = _building_dir("plugins")
    if plugins_dir:
        result.append(plugins_dir)
    log.debug("Builtin plugin paths %s", result)
    return result


class PluginLoader:
    """Scans package directories for ``metadata.json`` files and loads applets.

    Plugins are kept ordered by plugin id. The scan runs lazily and is
    redone whenever the package directories or disabled applets change.
    """

    _instance: PluginLoader | None = None
    _instance_lock = threading.Lock()

    def __init__(
        self,
        package_dirs: Iterable[str] | None = None,
        plugin_dirs: Iterable[str] | None = None,
    ) -> None:
        self._package_dirs = (
            list(package_dirs) if package_dirs is not None else _builtin_package_paths()
        )
        self._plugin_dirs: list[str] = []
        self._disabled: list[str] = []
        self._factories: dict[str, AppletFactory] = {}
        self._plugins: dict[str, PluginMetaData] | None = None
        self._lock = threading.Lock()
        for directory in plugin_dirs if plugin_dirs is not None else _builtin_plugin_paths():
            self.add_plugin_dir(directory)

    @classmethod
    def instance(cls) -> PluginLoader:
        """The process-wide loader."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    @property
    def package_dirs(self) -> list[str]:
        return list(self._package_dirs)

    @property
    def plugin_dirs(self) -> list[str]:
        return list(self._plugin_dirs)

    @property
    def disabled_applets(self) -> list[str]:
        return list(self._disabled)

    def _invalidate(self) -> None:
        with self._lock:
            self._plugins = None

    def _scan(self) -> dict[str, PluginMetaData]:
        plugins: dict[str, PluginMetaData] = {}
        for root in self._package_dirs:
            for dirpath, dirnames, filenames in os.walk(root):
                dirnames.sort()
                if METADATA_FILE_NAME not in filenames:
                    continue
                info = PluginMetaData.from_json_file(os.path.join(dirpath, METADATA_FILE_NAME))
                if not info.is_valid():
                    continue
                if info.plugin_id in self._disabled:
                    log.debug("Don't load disabled applet. %s", info.plugin_id)
                    continue
                plugins.setdefault(info.plugin_id, info)
        return dict(sorted(plugins.items()))

    def _ensure_completed(self) -> dict[str, PluginMetaData]:
        with self._lock:
            if self._plugins is None:
                self._plugins = self._scan()
            return self._plugins

    def _meta_data(self, plugin_id: str) -> PluginMetaData:
        return self._ensure_completed().get(plugin_id, PluginMetaData())

    def plugins(self) -> list[PluginMetaData]:
        """All discovered plugins, ordered by plugin id."""
        return list(self._ensure_completed().values())

    def root_plugins(self) -> list[PluginMetaData]:
        """Plugins that have no valid parent plugin."""
        roots: list[PluginMetaData] = []
        for item in self.plugins():
            if self.parent_plugin(item.plugin_id).is_valid():
                continue
            if item in roots:
                continue
            roots.append(item)
        return roots

    def add_package_dir(self, directory: str) -> None:
        """Search ``directory`` first and rescan."""
        self._package_dirs.insert(0, directory)
        self._invalidate()

    def add_plugin_dir(self, directory: str) -> None:
        """Add ``directory`` to the plugin search path unless already present."""
        if directory in self._plugin_dirs:
            return
        self._plugin_dirs.append(directory)

    def set_disabled_applets(self, plugin_ids: Iterable[str]) -> None:
        """Exclude the given plugin ids from discovery and rescan."""
        plugin_ids = list(plugin_ids)
        if not plugin_ids or plugin_ids == self._disabled:
            return
        for item in plugin_ids:
            if not item or item in self._disabled:
                continue
            self._disabled.append(item)
        self._invalidate()

    def register_factory(self, plugin_id: str, factory: AppletFactory) -> None:
        """Use ``factory`` to create the applets of ``plugin_id``."""
        self._factories[plugin_id] = factory

    def load_applet(self, data: AppletData) -> Applet | None:
        """Create the applet described by ``data``, or None for unknown plugins.

        An instance id is assigned to ``data`` when it has none.
        """
        from .containment import Containment
        from .panel import Panel

        plugin_id = data.plugin_id
        meta_data = self._meta_data(plugin_id)
        if not meta_data.is_valid():
            return None

        applet: Applet | None = None
        factory = self._factories.get(plugin_id)
        if factory is not None:
            log.debug("Loading applet by factory %s", plugin_id)
            applet = factory.create()
        if applet is None:
            containment_type = meta_data.value("ContainmentType")
            if containment_type is not None:
                applet = Panel() if containment_type == "Panel" else Containment()
        if applet is None:
            applet = Applet()

        if isinstance(applet, Containment) and applet.plugin_loader is None:
            applet.plugin_loader = self
        applet.plugin_meta_data = meta_data
        if not data.id:
            data.id = "{" + str(uuid.uuid4()) + "}"
        applet.applet_data = data
        return applet

    def children_plugin(self, plugin_id: str) -> list[PluginMetaData]:
        """Plugins whose ``Parent`` is ``plugin_id``."""
        target = self._meta_data(plugin_id)
        if not target.is_valid():
            return []
        return [
            md for md in self.plugins() if _to_text(md.value("Parent")) == target.plugin_id
        ]

    def parent_plugin(self, plugin_id: str) -> PluginMetaData:
        """The parent of ``plugin_id``, or invalid metadata."""
        meta_data = self._meta_data(plugin_id)
        if not meta_data.is_valid():
            return PluginMetaData()
        return self._meta_data(_to_text(meta_data.value("Parent")))

    def plugin(self, plugin_id: str) -> PluginMetaData:
        """The metadata of ``plugin_id``, or invalid metadata."""
        return self._meta_data(plugin_id)