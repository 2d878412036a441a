"""Curve model, hit testing, evaluation and interaction logic."""

from .curve import CurveEvaluator, evaluate, evaluate_many, sample_curve, sample_parameters
from .editor import CurveEditor, RenderSnapshot
from .geometry import (
    Coordinate,
    euclidean_distance,
    from_coordinate_pair,
    lerp,
    manhattan_distance,
    to_coordinate_pair,
)
from .hit_test import DEFAULT_SELECTION_RADIUS, HitTester, NearestPoint, SelectionChange, find_nearest
from .points import ControlPoint, PointIndexError, PointStore

__all__ = [
    "ControlPoint",
    "PointIndexError",
    "PointStore",
    "Coordinate",
    "to_coordinate_pair",
    "from_coordinate_pair",
    "manhattan_distance",
    "euclidean_distance",
    "lerp",
    "DEFAULT_SELECTION_RADIUS",
    "HitTester",
    "NearestPoint",
    "SelectionChange",
    "find_nearest",
    "CurveEvaluator",
    "evaluate",
    "evaluate_many",
    "sample_curve",
    "sample_parameters",
    "CurveEditor",
    "RenderSnapshot",
]
