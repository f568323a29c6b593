"""Applet, containment and panel framework for desktop shells, with plugin discovery and layer-shell geometry."""

__version__ = "0.1.0"
__all__ = [
    "applet",
    "appletdata",
    "appletitemmodel",
    "containment",
    "dockplugin",
    "layershell",
    "layershellgeometry",
    "panel",
    "pluginfactory",
    "pluginloader",
    "pluginmetadata",
    "signals",
]