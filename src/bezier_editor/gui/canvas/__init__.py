"""Canvas components for curve drawing and editing."""

from .curve_canvas import CurveCanvas
from .curve_items import CurveItemManager

__all__ = ["CurveCanvas", "CurveItemManager"]
