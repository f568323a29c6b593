"""Per-instance applet data: a mapping with an id, plugin id and child groups."""

from __future__ import annotations

from typing import Any, Iterable

from .pluginmetadata import PluginMetaData


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    return ""


class AppletData:
    """Data describing one applet instance.

    Copies made by plain assignment share the underlying mapping; use
    ``copy.copy`` for an independent instance. Equality compares ids.
    """

    __slots__ = ("_data",)
    __hash__ = None  # mutable; equality is by id

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(data) if data else {}

    @classmethod
    def for_plugin(cls, plugin_id: str) -> AppletData:
        """Data for a new instance of ``plugin_id``."""
        return cls({"PluginId": plugin_id})

    @classmethod
    def from_plugin_meta_data(cls, meta_data: PluginMetaData) -> AppletData:
        """Data for a new instance of the plugin described by ``meta_data``."""
        return cls({"PluginId": meta_data.plugin_id})

    @property
    def id(self) -> str:
        return _to_text(self._data.get("Id"))

    @id.setter
    def id(self, value: str) -> None:
        self._data["Id"] = value

    @property
    def plugin_id(self) -> str:
        return _to_text(self._data.get("PluginId"))

    @property
    def group_list(self) -> list[AppletData]:
        groups = self._data.get("Group")
        if not isinstance(groups, list):
            return []
        return [AppletData(item if isinstance(item, dict) else None) for item in groups]

    @group_list.setter
    def group_list(self, groups: Iterable[AppletData]) -> None:
        self._data["Group"] = [group.to_map() for group in groups]

    def is_valid(self) -> bool:
        """True when the data names a plugin id."""
        return bool(self.plugin_id)

    def value(self, key: str, default: Any = None) -> Any:
        """Return ``key`` from the data, or ``default`` if invalid or absent."""
        if not self.is_valid() or key not in self._data:
            return default
        return self._data[key]

    def to_map(self) -> dict[str, Any]:
        """A shallow copy of the underlying mapping."""
        return dict(self._data)

    def __copy__(self) -> AppletData:
        return AppletData(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AppletData):
            return NotImplemented
        return self.id == other.id

    def __repr__(self) -> str:
        return f"AppletData({self._data!r})"