from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Callable, Iterable, Iterator, Sequence, TypeAlias

import numpy as np


@dataclass(frozen=True)
class Vector:
    x: float
    y: float

    def scaled(self, k: float) -> "Vector":
        return Vector(self.x * k, self.y * k)


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def to_vector(self) -> Vector:
        return Vector(self.x, self.y)

    def __add__(self, other: Vector) -> "Point":
        if not isinstance(other, Vector):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> Vector:
        if not isinstance(other, Point):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class MoveTo:
    point: Point


@dataclass(frozen=True)
class LineTo:
    point: Point


@dataclass(frozen=True)
class Arc:
    """Clockwise arc around `center`; angles in radians."""

    center: Point
    radius: float
    start_angle: float
    end_angle: float


@dataclass(frozen=True)
class ArcNeg:
    """Counter-clockwise arc around `center`; angles in radians."""

    center: Point
    radius: float
    start_angle: float
    end_angle: float


PathElement: TypeAlias = MoveTo | LineTo | Arc | ArcNeg


@dataclass(frozen=True)
class Path:
    elements: tuple[PathElement, ...] = ()

    def __add__(self, other: "Path") -> "Path":
        if not isinstance(other, Path):
            return NotImplemented
        return Path(self.elements + other.elements)

    def __iter__(self) -> Iterator[PathElement]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)


def move_to_path(p: Point) -> Path:
    return Path((MoveTo(p),))


def line_to_path(p: Point) -> Path:
    return Path((LineTo(p),))


def arc_path(center: Point, radius: float, start_angle: float, end_angle: float) -> Path:
    return Path((Arc(center, radius, start_angle, end_angle),))


def arc_neg_path(center: Point, radius: float, start_angle: float, end_angle: float) -> Path:
    return Path((ArcNeg(center, radius, start_angle, end_angle),))


def polyline_path(points: Sequence[Point]) -> Path:
    if not points:
        return Path()
    head, *rest = points
    return Path((MoveTo(head),) + tuple(LineTo(p) for p in rest))


def map_path(fn: Callable[[Point], Point], path: Path) -> Path:
    """Apply `fn` to every point of `path`.

    Arcs only have their center mapped; radius and angles are kept as-is.
    """

    return Path(tuple(_map_element(fn, element) for element in path.elements))


def _map_element(fn: Callable[[Point], Point], element: PathElement) -> PathElement:
    if isinstance(element, MoveTo):
        return MoveTo(fn(element.point))
    if isinstance(element, LineTo):
        return LineTo(fn(element.point))
    if isinstance(element, Arc):
        return Arc(fn(element.center), element.radius, element.start_angle, element.end_angle)
    if isinstance(element, ArcNeg):
        return ArcNeg(fn(element.center), element.radius, element.start_angle, element.end_angle)
    raise TypeError(f"Unsupported path element: {type(element)!r}")


# Affine matrices are 3x3 float64 arrays acting on column vectors (x, y, 1).
# Every builder returns `matrix @ op`, so `op` applies to coordinates first.


def identity_matrix() -> np.ndarray:
    return np.eye(3, dtype=np.float64)


def translate(vector: Vector, matrix: np.ndarray | None = None) -> np.ndarray:
    op = identity_matrix()
    op[0, 2] = vector.x
    op[1, 2] = vector.y
    return _compose(matrix, op)


def rotate(radians: float, matrix: np.ndarray | None = None) -> np.ndarray:
    c = math.cos(radians)
    s = math.sin(radians)
    op = np.asarray([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]], dtype=np.float64)
    return _compose(matrix, op)


def scale(vector: Vector, matrix: np.ndarray | None = None) -> np.ndarray:
    op = np.diag([vector.x, vector.y, 1.0]).astype(np.float64)
    return _compose(matrix, op)


def transform_point(matrix: np.ndarray, p: Point) -> Point:
    x, y, _ = matrix @ np.asarray([p.x, p.y, 1.0], dtype=np.float64)
    return Point(float(x), float(y))


def transform_points(matrix: np.ndarray, points: Iterable[Point]) -> list[Point]:
    pts = list(points)
    if not pts:
        return []
    coords = np.ones((3, len(pts)), dtype=np.float64)
    coords[0] = [p.x for p in pts]
    coords[1] = [p.y for p in pts]
    out = matrix @ coords
    return [Point(float(x), float(y)) for x, y in zip(out[0].tolist(), out[1].tolist(), strict=True)]


def _compose(matrix: np.ndarray | None, op: np.ndarray) -> np.ndarray:
    if matrix is None:
        return op
    return np.asarray(matrix, dtype=np.float64) @ op
