"""A list model of applet root objects."""

from __future__ import annotations

from typing import Any

from .signals import Signal

USER_ROLE = 0x0100


class AppletItemModel:
    """An ordered list of root objects exposed through a single data role.

    ``rows_inserted`` and ``rows_removed`` are emitted with ``(first, last)``.
    """

    DATA_ROLE = USER_ROLE + 1

    def __init__(self) -> None:
        self._root_objects: list[Any] = []
        self.rows_inserted = Signal()
        self.rows_removed = Signal()

    @property
    def root_objects(self) -> list[Any]:
        return list(self._root_objects)

    def append(self, root_object: Any) -> None:
        """Add ``root_object`` as the last row."""
        index = len(self._root_objects)
        self._root_objects.append(root_object)
        self.rows_inserted.emit(index, index)

    def remove(self, root_object: Any) -> None:
        """Remove the first row holding ``root_object``; absent objects are ignored."""
        index = next(
            (i for i, item in enumerate(self._root_objects) if item is root_object),
            -1,
        )
        if index < 0:
            return
        del self._root_objects[index]
        self.rows_removed.emit(index, index)

    def row_count(self) -> int:
        return len(self._root_objects)

    def data(self, row: int, role: int) -> Any:
        """The root object at ``row`` for the data role, otherwise None."""
        if row < 0 or row >= len(self._root_objects):
            return None
        if role == self.DATA_ROLE:
            return self._root_objects[row]
        return None

    def role_names(self) -> dict[int, bytes]:
        return {self.DATA_ROLE: b"data"}

    def __len__(self) -> int:
        return len(self._root_objects)