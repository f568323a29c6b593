# appletshell

A small framework for building desktop shells out of plugins. A shell is a
tree of **applets**: plain applets sit inside **containments**, and a
**panel** is a containment that owns a top-level window. Plugins are
described by `metadata.json` files found in package directories and are
turned into applet instances by a `PluginLoader`.

## Installing

```
pip install .
```

The tests use pytest:

```
pip install ".[test]"
pytest
```

## Plugin packages

Every plugin lives in its own directory with a `metadata.json`:

```json
{
    "Plugin": {
        "Id": "org.example.clock",
        "Parent": "org.example.panel",
        "Url": "main.qml"
    }
}
```

`appletshell.pluginmetadata.PluginMetaData.from_json_file` reads such a file.
A file that cannot be opened or parsed, or that has no `Plugin.Id`, gives
metadata whose `is_valid()` is false. `value(key, default)` looks keys up in
the `Plugin` section, and `url()` resolves `Url` against the plugin's
directory.

The optional `ContainmentType` entry makes the loader build a `Containment`,
or a `Panel` when its value is `"Panel"`. `Parent` names the plugin that the
applet may be created inside.

## Using the loader

```python
from appletshell.pluginloader import PluginLoader
from appletshell.appletdata import AppletData

loader = PluginLoader.instance()
loader.add_package_dir("/path/to/packages")

for meta in loader.root_plugins():
    print(meta.plugin_id, meta.url())

panel = loader.load_applet(AppletData.for_plugin("org.example.panel"))
panel.load()
panel.init()

clock = panel.create_applet(AppletData.for_plugin("org.example.clock"))
```

`PluginLoader(package_dirs, plugin_dirs)` may also be built directly. When
no package directories are given, it searches `$DDE_SHELL_PACKAGE_PATH`, a
`packages` directory beside the running program's directory, and
`dde-shell` under each XDG data directory. Directories are scanned lazily,
plugins are kept ordered by id, and the scan is redone after
`add_package_dir` or `set_disabled_applets`. `plugins()`, `root_plugins()`,
`children_plugin(id)`, `parent_plugin(id)` and `plugin(id)` query the
result; unknown ids give invalid metadata or an empty list.

`load_applet` returns `None` for plugins it does not know. Applets whose data
has no id are given a fresh UUID. `create_applet` only accepts plugins that
are declared as children of the containment's plugin, and returns `None`
otherwise. Children are listed by `Containment.applets`, found with
`applet(id)`, and detached with `remove_applet`. Their root objects are
collected in `applet_item_model`, an `AppletItemModel`, as soon as each
child sets one. `Containment.enclosing(applet)` and `Panel.enclosing(applet)`
walk up from an applet to the nearest containment or panel.

Custom applet classes are registered with `PluginLoader.register_factory`,
which takes an `AppletFactory`; `appletshell.pluginfactory.applet_factory`
builds a factory class for an applet class.

## Panels

A panel's window is its `root_object`. When it is set, the panel asks its
`popup_window_factory` (a callable taking the initial properties and the
transient parent) for a popup window and a tooltip window, and exposes them
as `popup_window` and `tool_tip_window`. `Panel.init()` adds the `icons`
directory of the panel and of each child plugin, where one exists, to
`icon_search_paths`.

## Signals

Objects notify listeners through `appletshell.signals.Signal`:

```python
applet.root_object_changed.connect(lambda: print("root object set"))
```

## Layer shell and dock plugins

`appletshell.layershell.LayerShellWindow.get(window)` returns the single
layer-shell settings object of a window (anchors, margins, exclusion zone,
layer, keyboard interactivity, scope), emitting a change signal whenever a
property changes. `appletshell.layershellgeometry` computes, for those
settings, the requested size (`request_size`, `anchors_size_conflict`), the
placement of a window on a screen without a compositor
(`emulated_geometry`), and the `_NET_WM_STRUT_PARTIAL` values reserving the
exclusion zone (`strut_partial`). `appletshell.dockplugin.DockPlugin.get(window)`
holds the per-window properties of a dock plugin.

## What it does not do

appletshell models the applet tree and computes geometry; it draws nothing.
It does not load QML or any user interface, create windows, talk to a
Wayland compositor or an X server, or load compiled plugin libraries:
plugin directories are only recorded, and custom applets come from
factories registered in Python. There is no dock, no settings storage and
no command-line program.