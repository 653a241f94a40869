from __future__ import annotations

import itertools
import unittest

from chartkit.colors import BLUE, CYAN, GREEN, MAGENTA, RED, TRANSPARENT, YELLOW, color, default_color_seq, opaque, with_alpha
from chartkit.errors import ChartStyleError
from chartkit.styles import (
    FontStyle,
    PointShapeCircle,
    PointShapeCross,
    PointShapePlus,
    PointShapePolygon,
    PointShapeStar,
    SolidFill,
    dashed_line,
    default_fill_style,
    default_font_style,
    default_line_style,
    default_point_style,
    exes,
    filled_circles,
    filled_polygon,
    hollow_circles,
    hollow_polygon,
    plusses,
    solid_fill_style,
    solid_line,
    stars,
)


class ColorTests(unittest.TestCase):
    def test_named_and_hex_colors(self) -> None:
        self.assertEqual(color("red"), (255, 0, 0, 255))
        self.assertEqual(GREEN, (0, 128, 0, 255))
        self.assertEqual(color("#10203040"), (16, 32, 48, 64))
        self.assertEqual(color("blue", alpha=0.5), (0, 0, 255, 127))

    def test_unknown_color_raises_style_error(self) -> None:
        with self.assertRaises(ChartStyleError):
            color("not-a-color")

    def test_alpha_helpers_clamp(self) -> None:
        self.assertEqual(opaque((1, 2, 3)), (1, 2, 3, 255))
        self.assertEqual(with_alpha((1, 2, 3, 200), 2.0), (1, 2, 3, 200))
        self.assertEqual(with_alpha((1, 2, 3, 200), -1.0), (1, 2, 3, 0))

    def test_default_color_sequence_repeats(self) -> None:
        first_seven = list(itertools.islice(default_color_seq(), 7))
        self.assertEqual(first_seven, [BLUE, RED, GREEN, YELLOW, CYAN, MAGENTA, BLUE])
        self.assertTrue(all(c[3] == 255 for c in first_seven))


class LineStyleTests(unittest.TestCase):
    def test_solid_line_has_no_dashes(self) -> None:
        style = solid_line(2.0, RED)
        self.assertEqual(style.width, 2.0)
        self.assertEqual(style.color, RED)
        self.assertEqual(style.dashes, ())
        self.assertEqual((style.cap, style.join), ("butt", "miter"))

    def test_dashed_line_keeps_pattern_order(self) -> None:
        style = dashed_line(1.5, [4.0, 2.0, 1.0], BLUE)
        self.assertEqual(style.dashes, (4.0, 2.0, 1.0))
        self.assertEqual((style.cap, style.join), ("butt", "miter"))

    def test_default_line_style(self) -> None:
        style = default_line_style()
        self.assertEqual((style.width, style.join), (1.0, "bevel"))


class PointStyleTests(unittest.TestCase):
    def test_filled_circles_have_transparent_border(self) -> None:
        style = filled_circles(5.0, BLUE)
        self.assertEqual(style.color, BLUE)
        self.assertEqual(style.border_color, TRANSPARENT)
        self.assertEqual(style.border_width, 0.0)
        self.assertEqual(style.radius, 5.0)
        self.assertEqual(style.shape, PointShapeCircle())

    def test_hollow_variants_have_transparent_fill(self) -> None:
        cases = [
            (hollow_circles(3.0, 1.0, RED), PointShapeCircle()),
            (hollow_polygon(3.0, 1.0, 5, True, RED), PointShapePolygon(5, True)),
            (plusses(3.0, 1.0, RED), PointShapePlus()),
            (exes(3.0, 1.0, RED), PointShapeCross()),
            (stars(3.0, 1.0, RED), PointShapeStar()),
        ]
        for style, shape in cases:
            with self.subTest(shape=shape):
                self.assertEqual(style.color, TRANSPARENT)
                self.assertEqual(style.border_color, RED)
                self.assertEqual(style.border_width, 1.0)
                self.assertEqual(style.shape, shape)

    def test_filled_polygon(self) -> None:
        style = filled_polygon(4.0, 3, False, GREEN)
        self.assertEqual(style.shape, PointShapePolygon(sides=3, upright=False))
        self.assertEqual(style.border_color, TRANSPARENT)

    def test_values_are_not_validated(self) -> None:
        style = filled_circles(-1.0, BLUE)
        self.assertEqual(style.radius, -1.0)

    def test_default_point_style(self) -> None:
        style = default_point_style()
        self.assertEqual((style.radius, style.border_width), (1.0, 0.0))


class FillAndFontTests(unittest.TestCase):
    def test_solid_fill_wraps_color(self) -> None:
        self.assertEqual(solid_fill_style(CYAN), SolidFill(CYAN))
        self.assertEqual(default_fill_style(), SolidFill((255, 255, 255, 255)))

    def test_default_font_style(self) -> None:
        self.assertEqual(default_font_style(), FontStyle(name="sans-serif", size=10.0))


if __name__ == "__main__":
    unittest.main()
