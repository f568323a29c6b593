"""Plugin metadata read from a package's ``metadata.json``."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Mapping

log = logging.getLogger(__name__)


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    return ""


@dataclass(frozen=True, eq=False)
class PluginMetaData:
    """Description of one plugin: its id, directory and JSON metadata.

    Two metadata objects are equal when their plugin ids are equal.
    """

    plugin_id: str = ""
    plugin_dir: str = ""
    meta_data: Mapping[str, Any] = field(default_factory=dict)

    def _root(self) -> Mapping[str, Any]:
        root = self.meta_data.get("Plugin")
        return root if isinstance(root, Mapping) else {}

    def is_valid(self) -> bool:
        """True when the metadata names a plugin id."""
        return bool(self.plugin_id)

    def value(self, key: str, default: Any = None) -> Any:
        """Return ``key`` from the ``Plugin`` section, or ``default``."""
        if not self.is_valid():
            return default
        root = self._root()
        if key not in root:
            return default
        return root[key]

    def url(self) -> str:
        """Absolute path of the plugin's ``Url`` entry, or an empty string."""
        url = _to_text(self.value("Url"))
        if not url:
            return ""
        return os.path.join(os.path.abspath(self.plugin_dir), url)

    @classmethod
    def from_json_file(cls, path: str | os.PathLike[str]) -> PluginMetaData:
        """Read metadata from a JSON file; an unreadable file gives invalid metadata."""
        try:
            with open(path, "rb") as handle:
                raw = handle.read()
        except OSError as exc:
            log.warning("Couldn't open %s: %s", path, exc)
            return cls()
        try:
            document = json.loads(raw)
        except (ValueError, UnicodeDecodeError) as exc:
            log.warning("error parsing %s: %s", path, exc)
            return cls()

        meta = document if isinstance(document, dict) else {}
        plugin_dir = os.path.dirname(os.path.abspath(path))
        root = meta.get("Plugin")
        plugin_id = ""
        if isinstance(root, dict) and "Id" in root:
            plugin_id = _to_text(root["Id"])
        return cls(plugin_id=plugin_id, plugin_dir=plugin_dir, meta_data=meta)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PluginMetaData):
            return NotImplemented
        return self.plugin_id == other.plugin_id

    def __hash__(self) -> int:
        return hash(self.plugin_id)