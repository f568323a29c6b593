"""Registry of applet factories, one per factory class."""

from __future__ import annotations

import logging
from typing import Any, Callable

from .applet import Applet

log = logging.getLogger(__name__)

CreateAppletFunction = Callable[[Any], Applet]

_registry: dict[str, CreateAppletFunction] = {}


class AppletFactory:
    """Creates applets through the function registered for its class."""

    def _key(self) -> str:
        cls = type(self)
        return f"{cls.__module__}.{cls.__qualname__}"

    def register_instance(self, func: CreateAppletFunction) -> None:
        """Register ``func`` for this factory class; later registrations are ignored."""
        key = self._key()
        if key in _registry:
            log.warning("The applet factory has registered %s", key)
            return
        _registry[key] = func
        log.debug("Registered the applet factory %s", key)

    def create(self, parent: Any = None) -> Applet | None:
        """Create an applet with ``parent``, or None if nothing is registered."""
        func = _registry.get(self._key())
        if func is None:
            return None
        return func(parent)


def applet_factory(applet_cls: type[Applet]) -> type[AppletFactory]:
    """Build a factory class that registers ``applet_cls`` when instantiated."""

    def __init__(self: AppletFactory) -> None:
        self.register_instance(applet_cls)

    name = f"{applet_cls.__name__}AppletFactory"
    return type(
        name,
        (AppletFactory,),
        {
            "__init__": __init__,
            "__module__": applet_cls.__module__,
            "__qualname__": name,
        },
    )