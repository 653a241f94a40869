from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Sequence, TypeAlias

from chartkit.colors import BLACK, RGBA, TRANSPARENT, WHITE


LineCap = Literal["butt", "round", "square"]
LineJoin = Literal["miter", "round", "bevel"]
FontSlant = Literal["normal", "italic", "oblique"]
FontWeight = Literal["normal", "bold"]


@dataclass(frozen=True)
class LineStyle:
    """Stroke settings; an empty `dashes` tuple means a solid line."""

    width: float
    color: RGBA
    dashes: tuple[float, ...] = ()
    cap: LineCap = "butt"
    join: LineJoin = "miter"


@dataclass(frozen=True)
class PointShapeCircle:
    pass


@dataclass(frozen=True)
class PointShapePolygon:
    sides: int
    upright: bool


@dataclass(frozen=True)
class PointShapePlus:
    pass


@dataclass(frozen=True)
class PointShapeCross:
    pass


@dataclass(frozen=True)
class PointShapeStar:
    pass


PointShape: TypeAlias = PointShapeCircle | PointShapePolygon | PointShapePlus | PointShapeCross | PointShapeStar


@dataclass(frozen=True)
class PointStyle:
    color: RGBA
    border_color: RGBA
    border_width: float
    radius: float
    shape: PointShape


@dataclass(frozen=True)
class SolidFill:
    color: RGBA


FillStyle: TypeAlias = SolidFill


@dataclass(frozen=True)
class FontStyle:
    name: str = "sans-serif"
    size: float = 10.0
    slant: FontSlant = "normal"
    weight: FontWeight = "normal"
    color: RGBA = BLACK


def solid_line(width: float, color: RGBA) -> LineStyle:
    return LineStyle(width=width, color=color, dashes=(), cap="butt", join="miter")


def dashed_line(width: float, dashes: Sequence[float], color: RGBA) -> LineStyle:
    """Dash lengths alternate on/off and are given in device coordinates."""
    return LineStyle(width=width, color=color, dashes=tuple(dashes), cap="butt", join="miter")


def filled_circles(radius: float, color: RGBA) -> PointStyle:
    return PointStyle(color, TRANSPARENT, 0.0, radius, PointShapeCircle())


def hollow_circles(radius: float, width: float, color: RGBA) -> PointStyle:
    return PointStyle(TRANSPARENT, color, width, radius, PointShapeCircle())


def filled_polygon(radius: float, sides: int, upright: bool, color: RGBA) -> PointStyle:
    return PointStyle(color, TRANSPARENT, 0.0, radius, PointShapePolygon(sides, upright))


def hollow_polygon(radius: float, width: float, sides: int, upright: bool, color: RGBA) -> PointStyle:
    return PointStyle(TRANSPARENT, color, width, radius, PointShapePolygon(sides, upright))


def plusses(radius: float, width: float, color: RGBA) -> PointStyle:
    return PointStyle(TRANSPARENT, color, width, radius, PointShapePlus())


def exes(radius: float, width: float, color: RGBA) -> PointStyle:
    return PointStyle(TRANSPARENT, color, width, radius, PointShapeCross())


def stars(radius: float, width: float, color: RGBA) -> PointStyle:
    return PointStyle(TRANSPARENT, color, width, radius, PointShapeStar())


def solid_fill_style(color: RGBA) -> FillStyle:
    return SolidFill(color)


def default_line_style() -> LineStyle:
    return LineStyle(width=1.0, color=BLACK, dashes=(), cap="butt", join="bevel")


def default_point_style() -> PointStyle:
    return filled_circles(1.0, BLACK)


def default_fill_style() -> FillStyle:
    return SolidFill(WHITE)


def default_font_style() -> FontStyle:
    return FontStyle()
