from __future__ import annotations


class ChartStyleError(ValueError):
    """Raised when a color or drawing default cannot be resolved."""
