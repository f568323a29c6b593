"""A minimal signal/slot mechanism for change notifications."""

from __future__ import annotations

from typing import Any, Callable


class Signal:
    """A list of callables that are invoked, in connection order, on emit."""

    __slots__ = ("_slots",)

    def __init__(self) -> None:
        self._slots: list[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> None:
        """Call ``slot`` every time the signal is emitted."""
        self._slots.append(slot)

    def disconnect(self, slot: Callable[..., Any]) -> None:
        """Stop calling ``slot``; raises ValueError if it was never connected."""
        try:
            self._slots.remove(slot)
        except ValueError:
            raise ValueError(f"{slot!r} is not connected") from None

    def emit(self, *args: Any) -> None:
        """Invoke every connected slot with ``args``."""
        for slot in list(self._slots):
            slot(*args)

    def __len__(self) -> int:
        return len(self._slots)

    def __repr__(self) -> str:
        return f"Signal(slots={len(self._slots)})"