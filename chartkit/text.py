from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Sequence

from chartkit.geometry import Point


HTextAnchor = Literal["left", "centre", "right"]
VTextAnchor = Literal["top", "centre", "baseline", "bottom"]


@dataclass(frozen=True)
class TextSize:
    """Backend-reported extents of a string, relative to its baseline origin."""

    width: float
    ascent: float
    descent: float
    y_bearing: float

    @property
    def height(self) -> float:
        return self.ascent + self.descent


def adjust_text_x(hta: HTextAnchor, ts: TextSize) -> float:
    if hta == "left":
        return 0.0
    if hta == "centre":
        return -(ts.width / 2)
    if hta == "right":
        return -ts.width
    raise ValueError(f"unknown horizontal text anchor: {hta!r}")


def adjust_text_y(vta: VTextAnchor, ts: TextSize) -> float:
    if vta == "top":
        return ts.ascent
    if vta == "centre":
        return -ts.y_bearing / 2
    if vta == "baseline":
        return 0.0
    if vta == "bottom":
        return -ts.descent
    raise ValueError(f"unknown vertical text anchor: {vta!r}")


def adjust_text(hta: HTextAnchor, vta: VTextAnchor, ts: TextSize) -> Point:
    return Point(adjust_text_x(hta, ts), adjust_text_y(vta, ts))


def split_lines(text: str) -> list[str]:
    """Split on line feeds only; a single trailing line feed does not start a new line."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


@dataclass(frozen=True)
class MultilineLayout:
    line_height: float
    gap: float
    total_height: float
    offsets: tuple[Point, ...]


def multiline_layout(hta: HTextAnchor, vta: VTextAnchor, sizes: Sequence[TextSize]) -> MultilineLayout:
    """Place a block of two or more lines relative to the anchor point.

    Line height is the largest ascent among the lines and lines are separated
    by half a line height. The vertical start is derived from the first line's
    ascent, and every following line steps down by `gap + line_height`.
    """

    if len(sizes) < 2:
        raise ValueError("multiline layout needs at least two lines")
    num = len(sizes)
    first = sizes[0]
    line_height = max(ts.ascent for ts in sizes)
    gap = line_height / 2
    total_height = num * line_height + (num - 1) * gap
    y0 = _initial_y(vta, first, total_height)
    step = gap + line_height
    offsets = tuple(Point(adjust_text_x(hta, ts), y0 - i * step) for i, ts in enumerate(sizes))
    return MultilineLayout(line_height=line_height, gap=gap, total_height=total_height, offsets=offsets)


def multiline_offsets(hta: HTextAnchor, vta: VTextAnchor, sizes: Sequence[TextSize]) -> list[Point]:
    return list(multiline_layout(hta, vta, sizes).offsets)


def _initial_y(vta: VTextAnchor, first: TextSize, total_height: float) -> float:
    if vta == "top":
        return first.ascent
    if vta == "baseline":
        return 0.0
    if vta == "centre":
        return total_height / 2 + first.ascent
    if vta == "bottom":
        return total_height + first.ascent
    raise ValueError(f"unknown vertical text anchor: {vta!r}")
