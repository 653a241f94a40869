from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator

import numpy as np

from chartkit.geometry import Point
from chartkit.styles import FillStyle, FontStyle, LineStyle
from chartkit.text import TextSize


AlignFn = Callable[[Point], Point]


def bitmap_point_align(p: Point) -> Point:
    """Snap to pixel centres so 1-unit strokes cover exactly one pixel."""
    return Point(round(p.x) + 0.5, round(p.y) + 0.5)


def bitmap_coord_align(p: Point) -> Point:
    """Snap to pixel edges so filled regions do not bleed into neighbours."""
    return Point(float(round(p.x)), float(round(p.y)))


def identity_align(p: Point) -> Point:
    return p


@dataclass(frozen=True)
class ChartBackendEnv:
    point_align_fn: AlignFn
    coord_align_fn: AlignFn


BITMAP_ENV = ChartBackendEnv(point_align_fn=bitmap_point_align, coord_align_fn=bitmap_coord_align)
VECTOR_ENV = ChartBackendEnv(point_align_fn=identity_align, coord_align_fn=identity_align)


class ChartBackend(ABC):
    """Capabilities the drawing layer needs from a rendering surface.

    Transforms and styles are kept on stacks owned by the backend. Callers go
    through the `with_*` context managers, which always pop what they pushed.
    """

    @abstractmethod
    def push_transform(self, matrix: np.ndarray, alpha_scale: float) -> None:
        raise NotImplementedError

    @abstractmethod
    def pop_transform(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def push_style(self, style: LineStyle | FillStyle | FontStyle) -> None:
        raise NotImplementedError

    @abstractmethod
    def pop_style(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def new_path(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def move_to(self, p: Point) -> None:
        raise NotImplementedError

    @abstractmethod
    def line_to(self, p: Point) -> None:
        raise NotImplementedError

    @abstractmethod
    def arc(self, center: Point, radius: float, start_angle: float, end_angle: float) -> None:
        raise NotImplementedError

    @abstractmethod
    def arc_neg(self, center: Point, radius: float, start_angle: float, end_angle: float) -> None:
        raise NotImplementedError

    @abstractmethod
    def stroke(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def fill(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def measure_text(self, text: str) -> TextSize:
        raise NotImplementedError

    @abstractmethod
    def draw_text_at(self, p: Point, text: str) -> None:
        raise NotImplementedError

    @contextmanager
    def with_transform(self, matrix: np.ndarray, alpha_scale: float = 1.0) -> Iterator[None]:
        self.push_transform(matrix, alpha_scale)
        try:
            yield
        finally:
            self.pop_transform()

    @contextmanager
    def with_line_style(self, style: LineStyle) -> Iterator[None]:
        with self._with_style(style):
            yield

    @contextmanager
    def with_fill_style(self, style: FillStyle) -> Iterator[None]:
        with self._with_style(style):
            yield

    @contextmanager
    def with_font_style(self, style: FontStyle) -> Iterator[None]:
        with self._with_style(style):
            yield

    @contextmanager
    def _with_style(self, style: LineStyle | FillStyle | FontStyle) -> Iterator[None]:
        self.push_style(style)
        try:
            yield
        finally:
            self.pop_style()


@dataclass(frozen=True)
class RenderContext:
    """Backend handle plus the alignment functions in effect for it."""

    backend: ChartBackend
    env: ChartBackendEnv = BITMAP_ENV

    def point_align_fn(self) -> AlignFn:
        return self.env.point_align_fn

    def coord_align_fn(self) -> AlignFn:
        return self.env.coord_align_fn
