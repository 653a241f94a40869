from __future__ import annotations

from contextlib import contextmanager
import logging
import math
from typing import Iterator, Sequence

from chartkit.backend import AlignFn, RenderContext
from chartkit.geometry import Arc, ArcNeg, LineTo, MoveTo, Path, Point, map_path, rotate, translate
from chartkit.text import HTextAnchor, VTextAnchor, adjust_text, multiline_layout, split_lines


LOGGER = logging.getLogger(__name__)


@contextmanager
def with_translation(ctx: RenderContext, p: Point) -> Iterator[None]:
    with ctx.backend.with_transform(translate(p.to_vector())):
        yield


@contextmanager
def with_rotation(ctx: RenderContext, radians: float) -> Iterator[None]:
    with ctx.backend.with_transform(rotate(radians)):
        yield


def align_path(fn: AlignFn, path: Path) -> Path:
    return map_path(fn, path)


def align_stroke_path(ctx: RenderContext, path: Path) -> Path:
    return align_path(ctx.point_align_fn(), path)


def align_fill_path(ctx: RenderContext, path: Path) -> Path:
    return align_path(ctx.coord_align_fn(), path)


def align_point(ctx: RenderContext, p: Point) -> Point:
    return ctx.point_align_fn()(p)


def align_coord(ctx: RenderContext, p: Point) -> Point:
    return ctx.coord_align_fn()(p)


def stroke_path(ctx: RenderContext, points: Sequence[Point]) -> None:
    """Draw lines between `points` using the active line style.

    Points go through the point alignment so that, on bitmap surfaces,
    1 pixel wide lines are centred on pixels.
    """

    if not points:
        return
    align = ctx.point_align_fn()
    _step_path(ctx, [align(p) for p in points])
    ctx.backend.stroke()


def fill_path(ctx: RenderContext, points: Sequence[Point]) -> None:
    """Fill the region with the given corners using the active fill style.

    Points go through the coordinate alignment so that, on bitmap surfaces,
    region edges fall between pixels.
    """

    if not points:
        return
    align = ctx.coord_align_fn()
    _step_path(ctx, [align(p) for p in points])
    ctx.backend.fill()


def move_to(ctx: RenderContext, p: Point) -> None:
    ctx.backend.move_to(align_point(ctx, p))


def line_to(ctx: RenderContext, p: Point) -> None:
    ctx.backend.line_to(align_point(ctx, p))


def stroke_aligned_path(ctx: RenderContext, path: Path) -> None:
    if not path.elements:
        return
    _replay_path(ctx, align_stroke_path(ctx, path))
    ctx.backend.stroke()


def fill_aligned_path(ctx: RenderContext, path: Path) -> None:
    if not path.elements:
        return
    _replay_path(ctx, align_fill_path(ctx, path))
    ctx.backend.fill()


def _step_path(ctx: RenderContext, points: Sequence[Point]) -> None:
    backend = ctx.backend
    head, *rest = points
    backend.new_path()
    backend.move_to(head)
    for p in rest:
        backend.line_to(p)


def _replay_path(ctx: RenderContext, path: Path) -> None:
    backend = ctx.backend
    backend.new_path()
    for element in path.elements:
        if isinstance(element, MoveTo):
            backend.move_to(element.point)
        elif isinstance(element, LineTo):
            backend.line_to(element.point)
        elif isinstance(element, Arc):
            backend.arc(element.center, element.radius, element.start_angle, element.end_angle)
        elif isinstance(element, ArcNeg):
            backend.arc_neg(element.center, element.radius, element.start_angle, element.end_angle)
        else:
            raise TypeError(f"Unsupported path element: {type(element)!r}")
    LOGGER.debug("replayed path with %d elements", len(path.elements))


def draw_text_upright(ctx: RenderContext, hta: HTextAnchor, vta: VTextAnchor, origin: Point, text: str) -> None:
    draw_text(ctx, hta, vta, 0.0, origin, text)


def draw_text(
    ctx: RenderContext,
    hta: HTextAnchor,
    vta: VTextAnchor,
    angle_degrees: float,
    origin: Point,
    text: str,
) -> None:
    """Draw a label anchored by one of its corners or edges.

    The angle is in degrees and the rotation is performed around `origin`.
    """

    backend = ctx.backend
    with with_translation(ctx, origin), with_rotation(ctx, math.radians(angle_degrees)):
        ts = backend.measure_text(text)
        backend.draw_text_at(adjust_text(hta, vta, ts), text)


def draw_text_lines(
    ctx: RenderContext,
    hta: HTextAnchor,
    vta: VTextAnchor,
    angle_degrees: float,
    origin: Point,
    text: str,
) -> None:
    """Multi-line variant of `draw_text`; all lines share one rotated frame."""

    lines = split_lines(text)
    if not lines:
        return
    if len(lines) == 1:
        draw_text(ctx, hta, vta, angle_degrees, origin, text)
        return

    backend = ctx.backend
    with with_translation(ctx, origin), with_rotation(ctx, math.radians(angle_degrees)):
        sizes = [backend.measure_text(line) for line in lines]
        layout = multiline_layout(hta, vta, sizes)
        LOGGER.debug(
            "multi-line text: lines=%d line_height=%.3f gap=%.3f",
            len(lines),
            layout.line_height,
            layout.gap,
        )
        for offset, line in zip(layout.offsets, lines, strict=True):
            backend.draw_text_at(offset, line)
