from chartkit.backend import (
    BITMAP_ENV,
    VECTOR_ENV,
    ChartBackend,
    ChartBackendEnv,
    RenderContext,
    bitmap_coord_align,
    bitmap_point_align,
    identity_align,
)
from chartkit.colors import RGBA, color, default_color_seq, opaque, with_alpha
from chartkit.config import DEFAULT_DRAWING, DrawingDefaults, validate_drawing_defaults
from chartkit.drawing import (
    align_coord,
    align_fill_path,
    align_point,
    align_stroke_path,
    draw_text,
    draw_text_lines,
    draw_text_upright,
    fill_aligned_path,
    fill_path,
    line_to,
    move_to,
    stroke_aligned_path,
    stroke_path,
    with_rotation,
    with_translation,
)
from chartkit.errors import ChartStyleError
from chartkit.geometry import Arc, ArcNeg, LineTo, MoveTo, Path, PathElement, Point, Vector
from chartkit.styles import (
    FillStyle,
    FontStyle,
    LineStyle,
    PointStyle,
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
from chartkit.text import HTextAnchor, MultilineLayout, TextSize, VTextAnchor, multiline_layout, multiline_offsets, split_lines

__all__ = [
    "Arc",
    "ArcNeg",
    "BITMAP_ENV",
    "ChartBackend",
    "ChartBackendEnv",
    "ChartStyleError",
    "DEFAULT_DRAWING",
    "DrawingDefaults",
    "FillStyle",
    "FontStyle",
    "HTextAnchor",
    "LineStyle",
    "LineTo",
    "MoveTo",
    "MultilineLayout",
    "Path",
    "PathElement",
    "Point",
    "PointStyle",
    "RGBA",
    "RenderContext",
    "SolidFill",
    "TextSize",
    "VECTOR_ENV",
    "VTextAnchor",
    "Vector",
    "align_coord",
    "align_fill_path",
    "align_point",
    "align_stroke_path",
    "bitmap_coord_align",
    "bitmap_point_align",
    "color",
    "dashed_line",
    "default_color_seq",
    "default_fill_style",
    "default_font_style",
    "default_line_style",
    "default_point_style",
    "draw_text",
    "draw_text_lines",
    "draw_text_upright",
    "exes",
    "fill_aligned_path",
    "fill_path",
    "filled_circles",
    "filled_polygon",
    "hollow_circles",
    "hollow_polygon",
    "identity_align",
    "line_to",
    "move_to",
    "multiline_layout",
    "multiline_offsets",
    "opaque",
    "plusses",
    "solid_fill_style",
    "solid_line",
    "split_lines",
    "stars",
    "stroke_aligned_path",
    "stroke_path",
    "validate_drawing_defaults",
    "with_alpha",
    "with_rotation",
    "with_translation",
]
