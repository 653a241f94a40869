from __future__ import annotations

import itertools
from typing import Iterator

from PIL import ImageColor

from chartkit.errors import ChartStyleError


RGBA = tuple[int, int, int, int]


def color(value: str, alpha: float = 1.0) -> RGBA:
    """Resolve a CSS color name or `#RRGGBB[AA]` string to RGBA255."""

    try:
        r, g, b, a = ImageColor.getcolor(value.strip(), "RGBA")
    except (AttributeError, ValueError) as exc:
        raise ChartStyleError(f"Unknown color: {value!r}") from exc
    return (r, g, b, _scale_alpha(a, alpha))


def opaque(rgb: tuple[int, int, int]) -> RGBA:
    r, g, b = rgb
    return (r, g, b, 255)


def with_alpha(rgba: RGBA, alpha: float) -> RGBA:
    r, g, b, a = rgba
    return (r, g, b, _scale_alpha(a, alpha))


def _scale_alpha(a: int, alpha: float) -> int:
    return int(max(0.0, min(1.0, alpha)) * a)


TRANSPARENT: RGBA = (0, 0, 0, 0)
BLACK = color("black")
WHITE = color("white")
BLUE = color("blue")
RED = color("red")
GREEN = color("green")
YELLOW = color("yellow")
CYAN = color("cyan")
MAGENTA = color("magenta")

DEFAULT_COLOR_CYCLE: tuple[RGBA, ...] = (BLUE, RED, GREEN, YELLOW, CYAN, MAGENTA)


def default_color_seq() -> Iterator[RGBA]:
    """Endless palette used when a series has no explicit color."""
    return itertools.cycle(DEFAULT_COLOR_CYCLE)
