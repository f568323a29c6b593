import copy

from appletshell.appletdata import AppletData
from appletshell.pluginmetadata import PluginMetaData


def test_empty_data_is_invalid():
    data = AppletData()
    assert not data.is_valid()
    assert data.id == ""
    assert data.value("PluginId", "default") == "default"


def test_for_plugin_sets_plugin_id():
    data = AppletData.for_plugin("org.example.a")
    assert data.is_valid()
    assert data.plugin_id == "org.example.a"
    assert data.to_map() == {"PluginId": "org.example.a"}


def test_from_plugin_meta_data():
    meta = PluginMetaData(plugin_id="org.example.b")
    assert AppletData.from_plugin_meta_data(meta).plugin_id == "org.example.b"


def test_value_returns_present_key_or_default():
    data = AppletData({"PluginId": "p", "Extra": 3})
    assert data.value("Extra") == 3
    assert data.value("Missing", "d") == "d"


def test_id_setter_round_trip():
    data = AppletData.for_plugin("p")
    data.id = "instance-1"
    assert data.id == "instance-1"
    assert data.to_map()["Id"] == "instance-1"


def test_group_list_round_trip():
    parent = AppletData.for_plugin("parent")
    children = [AppletData({"PluginId": "c1", "Id": "1"}), AppletData.for_plugin("c2")]
    parent.group_list = children
    groups = parent.group_list
    assert [g.plugin_id for g in groups] == ["c1", "c2"]
    assert [g.to_map() for g in groups] == [c.to_map() for c in children]


def test_group_list_empty_without_groups():
    assert AppletData.for_plugin("p").group_list == []


def test_equality_is_by_id():
    a = AppletData({"PluginId": "x", "Id": "same"})
    b = AppletData({"PluginId": "y", "Id": "same"})
    c = AppletData({"PluginId": "x", "Id": "other"})
    assert a == b
    assert a != c


def test_assignment_shares_but_copy_does_not():
    original = AppletData.for_plugin("p")
    alias = original
    independent = copy.copy(original)
    alias.id = "shared"
    assert original.id == "shared"
    assert independent.id == ""


def test_to_map_is_a_copy():
    data = AppletData.for_plugin("p")
    mapping = data.to_map()
    mapping["PluginId"] = "changed"
    assert data.plugin_id == "p"