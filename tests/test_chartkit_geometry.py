from __future__ import annotations

import math
import unittest

import numpy as np

from chartkit.geometry import (
    Arc,
    ArcNeg,
    LineTo,
    MoveTo,
    Path,
    Point,
    Vector,
    arc_neg_path,
    arc_path,
    identity_matrix,
    line_to_path,
    map_path,
    move_to_path,
    polyline_path,
    rotate,
    scale,
    transform_point,
    transform_points,
    translate,
)


def _shift(p: Point) -> Point:
    return Point(p.x + 10.0, p.y * 2.0)


class PathMappingTests(unittest.TestCase):
    def test_single_move_to_maps_its_point(self) -> None:
        path = move_to_path(Point(1.0, 2.0))
        self.assertEqual(map_path(_shift, path), Path((MoveTo(Point(11.0, 4.0)),)))

    def test_arcs_only_map_center(self) -> None:
        path = arc_path(Point(1.0, 1.0), 3.0, 0.25, 1.5) + arc_neg_path(Point(2.0, 3.0), 4.0, 2.0, 0.5)
        mapped = map_path(_shift, path)
        self.assertEqual(
            mapped.elements,
            (
                Arc(Point(11.0, 2.0), 3.0, 0.25, 1.5),
                ArcNeg(Point(12.0, 6.0), 4.0, 2.0, 0.5),
            ),
        )

    def test_mapping_keeps_element_order_and_kinds(self) -> None:
        path = move_to_path(Point(0.0, 0.0)) + line_to_path(Point(1.0, 1.0)) + line_to_path(Point(2.0, 0.0))
        mapped = map_path(_shift, path)
        self.assertEqual([type(e) for e in mapped], [MoveTo, LineTo, LineTo])
        self.assertEqual(len(mapped), 3)
        # Source path is untouched.
        self.assertEqual(path.elements[1], LineTo(Point(1.0, 1.0)))

    def test_unknown_element_is_rejected(self) -> None:
        with self.assertRaises(TypeError):
            map_path(_shift, Path(("close",)))  # type: ignore[arg-type]

    def test_polyline_path_starts_with_move(self) -> None:
        pts = [Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0)]
        path = polyline_path(pts)
        self.assertEqual(path.elements[0], MoveTo(pts[0]))
        self.assertEqual(path.elements[1:], (LineTo(pts[1]), LineTo(pts[2])))
        self.assertEqual(polyline_path([]), Path())

    def test_point_vector_arithmetic(self) -> None:
        a = Point(3.0, 4.0)
        b = Point(1.0, 1.0)
        self.assertEqual(a - b, Vector(2.0, 3.0))
        self.assertEqual(b + Vector(2.0, 3.0), a)
        self.assertEqual(a.to_vector().scaled(2.0), Vector(6.0, 8.0))


class MatrixTests(unittest.TestCase):
    def test_translate_then_rotate_rotates_about_translated_origin(self) -> None:
        m = rotate(math.pi / 2, translate(Vector(10.0, 5.0)))
        p = transform_point(m, Point(1.0, 0.0))
        self.assertAlmostEqual(p.x, 10.0, places=9)
        self.assertAlmostEqual(p.y, 6.0, places=9)

    def test_scale_applies_before_existing_matrix(self) -> None:
        m = scale(Vector(2.0, 3.0), translate(Vector(1.0, 1.0)))
        self.assertEqual(transform_point(m, Point(1.0, 1.0)), Point(3.0, 4.0))

    def test_bulk_transform_matches_single_point_transform(self) -> None:
        m = rotate(0.3, translate(Vector(-2.0, 7.0)))
        pts = [Point(0.0, 0.0), Point(1.5, -2.0), Point(4.0, 9.0)]
        bulk = transform_points(m, pts)
        for got, p in zip(bulk, pts, strict=True):
            want = transform_point(m, p)
            self.assertAlmostEqual(got.x, want.x, places=9)
            self.assertAlmostEqual(got.y, want.y, places=9)
        self.assertEqual(transform_points(m, []), [])

    def test_identity_is_float_eye(self) -> None:
        m = identity_matrix()
        self.assertEqual(m.dtype, np.float64)
        self.assertTrue(np.array_equal(m, np.eye(3)))


if __name__ == "__main__":
    unittest.main()
