import pytest

from appletshell.layershell import Anchor, LayerShellWindow
from appletshell.layershellgeometry import (
    Rect,
    StrutPartial,
    anchors_size_conflict,
    emulated_geometry,
    request_size,
    strut_partial,
)

SCREEN = Rect(0, 0, 1920, 1080)


class _Window:
    pass


@pytest.fixture
def shell():
    window = _Window()
    layer_shell = LayerShellWindow.get(window)
    yield layer_shell
    layer_shell.close()


def test_rect_edges():
    rect = Rect(10, 20, 30, 40)
    assert rect.left == 10
    assert rect.top == 20
    assert rect.right == 39
    assert rect.bottom == 59


@pytest.mark.parametrize(
    "anchors, expected",
    [
        (Anchor.NONE, (100, 40)),
        (Anchor.LEFT | Anchor.RIGHT, (0, 40)),
        (Anchor.TOP | Anchor.BOTTOM, (100, 0)),
        (Anchor.LEFT | Anchor.RIGHT | Anchor.TOP | Anchor.BOTTOM, (0, 0)),
        (Anchor.LEFT | Anchor.TOP, (100, 40)),
    ],
)
def test_request_size(anchors, expected):
    assert request_size(anchors, 100, 40) == expected


def test_request_size_never_conflicts():
    for value in range(16):
        anchors = Anchor(value)
        width, height = request_size(anchors, 100, 40)
        assert not anchors_size_conflict(anchors, width, height)


def test_conflict_when_zero_width_unanchored():
    assert anchors_size_conflict(Anchor.LEFT, 0, 40)
    assert anchors_size_conflict(Anchor.TOP, 100, 0)
    assert not anchors_size_conflict(Anchor.LEFT | Anchor.RIGHT, 0, 40)


def test_top_anchor_places_at_top_margin(shell):
    shell.anchors = Anchor.TOP
    shell.top_margin = 5
    geometry = emulated_geometry(shell, SCREEN, 100, 40)
    assert geometry.y == SCREEN.top + 5
    assert (geometry.width, geometry.height) == (100, 40)


def test_bottom_anchor_keeps_margin_to_screen_bottom(shell):
    shell.anchors = Anchor.BOTTOM
    shell.bottom_margin = 8
    geometry = emulated_geometry(shell, SCREEN, 100, 40)
    assert geometry.y + geometry.height + 8 == SCREEN.bottom


def test_left_wins_over_right(shell):
    shell.anchors = Anchor.LEFT | Anchor.RIGHT
    shell.left_margin = 3
    shell.right_margin = 7
    geometry = emulated_geometry(shell, SCREEN, 100, 40)
    assert geometry.x == 3
    assert geometry.width + 3 + 7 == SCREEN.width
    assert geometry.height == 40


def test_vertical_constraint_stretches_height(shell):
    shell.anchors = Anchor.TOP | Anchor.BOTTOM | Anchor.LEFT
    shell.top_margin = 2
    shell.bottom_margin = 4
    geometry = emulated_geometry(shell, SCREEN, 60, 40)
    assert geometry.y == 2
    assert geometry.height + 2 + 4 == SCREEN.height
    assert geometry.x == SCREEN.left


def test_strut_left(shell):
    shell.anchors = Anchor.LEFT
    shell.exclusion_zone = 48
    geometry = Rect(0, 100, 48, 500)
    strut = strut_partial(shell, geometry)
    assert strut == StrutPartial(left=48, left_start_y=100, left_end_y=600)


def test_strut_bottom_stretched(shell):
    shell.anchors = Anchor.BOTTOM | Anchor.LEFT | Anchor.RIGHT
    shell.exclusion_zone = 40
    geometry = Rect(0, 1040, 1920, 40)
    strut = strut_partial(shell, geometry)
    assert strut.bottom == 40
    assert strut.bottom_start_x == geometry.x
    assert strut.bottom_end_x == geometry.x + geometry.width
    assert strut.top == 0 and strut.left == 0 and strut.right == 0


def test_strut_scaled(shell):
    shell.anchors = Anchor.TOP
    shell.exclusion_zone = 30
    strut = strut_partial(shell, Rect(0, 0, 1920, 30), 2.0)
    assert strut.top == 60


def test_strut_corner_reserves_nothing(shell):
    shell.anchors = Anchor.TOP | Anchor.LEFT
    shell.exclusion_zone = 30
    assert strut_partial(shell, Rect(0, 0, 30, 30)) == StrutPartial()