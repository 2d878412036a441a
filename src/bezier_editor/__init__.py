"""
Interactive editor for a single open Bézier curve.

The core (point store, hit testing, curve evaluation, interaction glue) is
GUI agnostic; the ``gui`` subpackage is only imported on demand so the core
can be used without Qt.
"""

from .config import EditorConfig, build_editor, load_editor_config, resolve_editor_config
from .core import (
    ControlPoint,
    CurveEditor,
    CurveEvaluator,
    HitTester,
    PointIndexError,
    PointStore,
    RenderSnapshot,
    SelectionChange,
    evaluate,
    find_nearest,
    from_coordinate_pair,
    sample_curve,
    to_coordinate_pair,
)
from .settings import get_settings, reset_settings_cache

__all__ = [
    "EditorConfig",
    "build_editor",
    "load_editor_config",
    "resolve_editor_config",
    "ControlPoint",
    "CurveEditor",
    "CurveEvaluator",
    "HitTester",
    "PointIndexError",
    "PointStore",
    "RenderSnapshot",
    "SelectionChange",
    "evaluate",
    "find_nearest",
    "from_coordinate_pair",
    "sample_curve",
    "to_coordinate_pair",
    "get_settings",
    "reset_settings_cache",
]
