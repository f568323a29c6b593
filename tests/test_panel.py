import json

import pytest

from appletshell.appletdata import AppletData
from appletshell.containment import Containment
from appletshell.panel import TOOL_TIP_FLAG, Panel
from appletshell.pluginloader import PluginLoader


def write_plugin(root, plugin_id, icons=False, **extra):
    directory = root / plugin_id
    directory.mkdir()
    (directory / "metadata.json").write_text(json.dumps({"Plugin": {"Id": plugin_id, **extra}}))
    if icons:
        (directory / "icons").mkdir()
    return directory


@pytest.fixture
def layout(tmp_path):
    panel_dir = write_plugin(tmp_path, "dockpanel", icons=True, ContainmentType="Panel")
    child_dir = write_plugin(tmp_path, "tray", icons=True, Parent="dockpanel")
    write_plugin(tmp_path, "plain", Parent="dockpanel")
    loader = PluginLoader(package_dirs=[str(tmp_path)], plugin_dirs=[])
    panel = loader.load_applet(AppletData.for_plugin("dockpanel"))
    return panel, panel_dir, child_dir


def test_loader_creates_panel(layout):
    panel, _, _ = layout
    assert isinstance(panel, Panel)
    assert isinstance(panel, Containment)
    assert panel.plugin_id == "dockpanel"


def test_init_collects_icon_dirs(layout):
    panel, panel_dir, child_dir = layout
    panel.create_applet(AppletData.for_plugin("tray"))
    panel.create_applet(AppletData.for_plugin("plain"))
    assert panel.init() is True
    assert panel.icon_search_paths == [str(child_dir / "icons"), str(panel_dir / "icons")]


def test_windows_created_when_root_set(layout):
    panel, _, _ = layout
    calls = []

    def factory(properties, parent):
        window = object()
        calls.append((properties, parent, window))
        return window

    panel.popup_window_factory = factory
    popup_events, tip_events = [], []
    panel.popup_window_changed.connect(lambda: popup_events.append(1))
    panel.tool_tip_window_changed.connect(lambda: tip_events.append(1))

    root = object()
    panel.root_object = root
    assert panel.window is root
    assert len(calls) == 2
    assert calls[0][0] == {}
    assert calls[1][0] == {"flags": TOOL_TIP_FLAG}
    assert all(parent is root for _, parent, _ in calls)
    assert panel.popup_window is calls[0][2]
    assert panel.tool_tip_window is calls[1][2]
    assert popup_events == [1] and tip_events == [1]

    panel.root_object = object()
    assert len(calls) == 2


def test_no_windows_without_root(layout):
    panel, _, _ = layout
    calls = []
    panel.popup_window_factory = lambda properties, parent: calls.append(1) or object()
    panel.root_object = object()
    panel.root_object = None
    assert len(calls) == 2
    panel2 = Panel()
    panel2.popup_window_factory = lambda properties, parent: calls.append(1) or object()
    panel2.root_object_changed.emit()
    assert panel2.popup_window is None
    assert len(calls) == 2


def test_enclosing_panel(layout):
    panel, _, _ = layout
    applet = panel.create_applet(AppletData.for_plugin("tray"))
    assert Panel.enclosing(applet) is panel
    assert Panel.enclosing(Containment()) is None


def test_load(layout):
    panel, _, _ = layout
    assert panel.load() is True