from __future__ import annotations

from dataclasses import asdict, dataclass
import logging
from typing import Any, Literal, Mapping

from chartkit.backend import BITMAP_ENV, VECTOR_ENV, ChartBackendEnv
from chartkit.colors import BLACK, RGBA, WHITE, color
from chartkit.errors import ChartStyleError
from chartkit.styles import FillStyle, FontStyle, LineStyle, SolidFill, solid_line


LOGGER = logging.getLogger(__name__)

AlignmentMode = Literal["bitmap", "vector"]
_ALIGNMENT_MODES = ("bitmap", "vector")


@dataclass(frozen=True)
class DrawingDefaults:
    """Fallback styles and surface alignment for a drawing session."""

    font_name: str = "sans-serif"
    font_size: float = 10.0
    font_color: RGBA = BLACK
    line_width: float = 1.0
    line_color: RGBA = BLACK
    fill_color: RGBA = WHITE
    alignment: AlignmentMode = "bitmap"


DEFAULT_DRAWING = DrawingDefaults()


def validate_drawing_defaults(overrides: Mapping[str, Any] | None = None) -> DrawingDefaults:
    """Merge overrides into the defaults, rejecting unknown or invalid values.

    Colors may be CSS names, hex strings, or RGBA tuples.
    """

    raw: dict[str, Any] = asdict(DEFAULT_DRAWING)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ChartStyleError(f"Unknown drawing default: {key}")
            raw[key] = value

    if not isinstance(raw["font_name"], str) or not raw["font_name"].strip():
        raise ChartStyleError("Default `font_name` must be a non-empty string")
    for key in ("font_size", "line_width"):
        value = raw[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)) or float(value) <= 0:
            raise ChartStyleError(f"Default `{key}` must be a positive number")
    if raw["alignment"] not in _ALIGNMENT_MODES:
        raise ChartStyleError(f"Default `alignment` must be one of {_ALIGNMENT_MODES}, got {raw['alignment']!r}")

    return DrawingDefaults(
        font_name=raw["font_name"].strip(),
        font_size=float(raw["font_size"]),
        font_color=_coerce_color("font_color", raw["font_color"]),
        line_width=float(raw["line_width"]),
        line_color=_coerce_color("line_color", raw["line_color"]),
        fill_color=_coerce_color("fill_color", raw["fill_color"]),
        alignment=raw["alignment"],
    )


def env_for_defaults(defaults: DrawingDefaults) -> ChartBackendEnv:
    return VECTOR_ENV if defaults.alignment == "vector" else BITMAP_ENV


def font_style_for_defaults(defaults: DrawingDefaults) -> FontStyle:
    return FontStyle(name=defaults.font_name, size=defaults.font_size, color=defaults.font_color)


def line_style_for_defaults(defaults: DrawingDefaults) -> LineStyle:
    return solid_line(defaults.line_width, defaults.line_color)


def fill_style_for_defaults(defaults: DrawingDefaults) -> FillStyle:
    return SolidFill(defaults.fill_color)


def _coerce_color(key: str, value: Any) -> RGBA:
    if isinstance(value, str):
        return color(value)
    if isinstance(value, (tuple, list)) and len(value) in (3, 4):
        try:
            channels = [int(c) for c in value]
        except (TypeError, ValueError) as exc:
            raise ChartStyleError(f"Default `{key}` has non-numeric channels: {value!r}") from exc
        if len(channels) == 3:
            channels.append(255)
        if any(c < 0 or c > 255 for c in channels):
            clamped = [max(0, min(255, c)) for c in channels]
            LOGGER.warning("Default `%s` had out-of-range channels %s; clamped to %s", key, channels, clamped)
            channels = clamped
        r, g, b, a = channels
        return (r, g, b, a)
    raise ChartStyleError(f"Default `{key}` must be a color name, hex string, or RGB(A) tuple")
