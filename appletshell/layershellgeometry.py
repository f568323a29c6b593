"""Geometry rules for layer-shell windows: requested sizes, placement and struts."""

from __future__ import annotations

from dataclasses import dataclass

from .layershell import Anchor, LayerShellWindow

_HORIZONTAL = Anchor.LEFT | Anchor.RIGHT
_VERTICAL = Anchor.TOP | Anchor.BOTTOM


def _cdiv(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


@dataclass(frozen=True)
class Rect:
    """An integer rectangle; ``right`` and ``bottom`` are the last pixel inside it."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        return self.x + self.width - 1

    @property
    def bottom(self) -> int:
        return self.y + self.height - 1


@dataclass(frozen=True)
class StrutPartial:
    """The reserved screen edges of a window, as in ``_NET_WM_STRUT_PARTIAL``."""

    left: int = 0
    right: int = 0
    top: int = 0
    bottom: int = 0
    left_start_y: int = 0
    left_end_y: int = 0
    right_start_y: int = 0
    right_end_y: int = 0
    top_start_x: int = 0
    top_end_x: int = 0
    bottom_start_x: int = 0
    bottom_end_x: int = 0


def _constraints(anchors: Anchor) -> tuple[bool, bool]:
    anchors = Anchor(anchors)
    return (anchors & _HORIZONTAL) == _HORIZONTAL, (anchors & _VERTICAL) == _VERTICAL


def request_size(anchors: Anchor, width: int, height: int) -> tuple[int, int]:
    """The size to request: a dimension stretched between two anchors becomes 0."""
    horizontal, vertical = _constraints(anchors)
    return (0 if horizontal else width, 0 if vertical else height)


def anchors_size_conflict(anchors: Anchor, width: int, height: int) -> bool:
    """True when a zero dimension is requested without anchoring both of its edges."""
    horizontal, vertical = _constraints(anchors)
    return (not horizontal and width == 0) or (not vertical and height == 0)


def emulated_geometry(shell: LayerShellWindow, screen: Rect, width: int, height: int) -> Rect:
    """Where a window of ``width`` x ``height`` goes on ``screen`` without a compositor."""
    anchors = Anchor(shell.anchors)
    x = _cdiv(screen.right - width, 2)
    y = _cdiv(screen.height - height, 2)
    if anchors & Anchor.RIGHT:
        x = screen.right - width - shell.right_margin
    if anchors & Anchor.BOTTOM:
        y = screen.bottom - height - shell.bottom_margin
    if anchors & Anchor.LEFT:
        x = screen.left + shell.left_margin
    if anchors & Anchor.TOP:
        y = screen.top + shell.top_margin

    horizontal, vertical = _constraints(anchors)
    if horizontal:
        x = screen.left + shell.left_margin
        width = screen.width - shell.left_margin - shell.right_margin
    if vertical:
        y = screen.top + shell.top_margin
        height = screen.height - shell.top_margin - shell.bottom_margin
    return Rect(x, y, width, height)


def strut_partial(shell: LayerShellWindow, geometry: Rect, scale: float = 1.0) -> StrutPartial:
    """The strut reserving ``shell.exclusion_zone`` along the anchored edge."""
    anchors = Anchor(shell.anchors)
    zone = int(shell.exclusion_zone * scale)
    if anchors == Anchor.LEFT or (anchors ^ Anchor.LEFT) == _VERTICAL:
        return StrutPartial(
            left=zone,
            left_start_y=geometry.y,
            left_end_y=geometry.y + geometry.height,
        )
    if anchors == Anchor.RIGHT or (anchors ^ Anchor.RIGHT) == _VERTICAL:
        return StrutPartial(
            right=zone,
            right_start_y=geometry.y,
            right_end_y=geometry.y + geometry.height,
        )
    if anchors == Anchor.TOP or (anchors ^ Anchor.TOP) == _HORIZONTAL:
        return StrutPartial(
            top=zone,
            top_start_x=geometry.x,
            top_end_x=geometry.x + geometry.width,
        )
    if anchors == Anchor.BOTTOM or (anchors ^ Anchor.BOTTOM) == _HORIZONTAL:
        return StrutPartial(
            bottom=zone,
            bottom_start_x=geometry.x,
            bottom_end_x=geometry.x + geometry.width,
        )
    return StrutPartial()