"""Bézier curve evaluation with de Casteljau's algorithm.

``evaluate`` follows the recursive definition over the half-open index
range ``[i, j)``: a single point is returned as is, otherwise the curve of
``[i, j-1)`` and the curve of ``[i+1, j)`` are blended linearly at ``t``.
Each ``(i, j)`` sub-range is computed once per call, which keeps the call
count quadratic without changing the result.

``evaluate_many`` performs the same reduction iteratively (the classic
triangular table) for a whole vector of parameters at once; it is what the
display sampling uses.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Sequence, Tuple

import numpy as np

from .geometry import Coordinate, PointLike, lerp, to_coordinate_pair

logger = logging.getLogger(__name__)


DEFAULT_SAMPLE_STEPS = 100


def _as_pairs(points: Iterable[PointLike]) -> Sequence[Coordinate]:
    return [to_coordinate_pair(p) for p in points]


def evaluate(points: Iterable[PointLike], t: float) -> Coordinate:
    """Evaluate the curve defined by ``points`` at parameter ``t``.

    Raises
    ------
    ValueError
        If ``points`` is empty; the curve is undefined without points.
    """
    pairs = _as_pairs(points)
    if not pairs:
        raise ValueError("Cannot evaluate a curve without control points")

    memo: Dict[Tuple[int, int], Coordinate] = {}

    def blend(i: int, j: int) -> Coordinate:
        if i + 1 == j:
            return pairs[i]
        key = (i, j)
        cached = memo.get(key)
        if cached is not None:
            return cached
        a = blend(i, j - 1)
        b = blend(i + 1, j)
        result = lerp(a, b, t)
        memo[key] = result
        return result

    return blend(0, len(pairs))


def evaluate_many(points: Iterable[PointLike], ts: Iterable[float]) -> np.ndarray:
    """Evaluate the curve at every parameter in ``ts``.

    Returns
    -------
    np.ndarray
        Array of shape ``(len(ts), 2)``.
    """
    control = np.asarray(_as_pairs(points), dtype=np.float64)
    if control.shape[0] == 0:
        raise ValueError("Cannot evaluate a curve without control points")
    t_values = np.asarray(list(ts), dtype=np.float64)[:, None, None]

    # Level k holds the curves of every sub-range of length k + 1.
    table = np.broadcast_to(control, (t_values.shape[0],) + control.shape)
    while table.shape[1] > 1:
        table = (1.0 - t_values) * table[:, :-1, :] + t_values * table[:, 1:, :]
    return np.array(table[:, 0, :])


def sample_parameters(steps: int = DEFAULT_SAMPLE_STEPS, include_end: bool = False) -> np.ndarray:
    """Parameters sampled after the start point: ``1/steps .. (steps-1)/steps``.

    With ``include_end`` the final parameter ``1.0`` is appended.
    """
    if steps < 2:
        raise ValueError("steps must be at least 2")
    ts = np.arange(1, steps, dtype=np.float64) / steps
    if include_end:
        ts = np.append(ts, 1.0)
    return ts


def sample_curve(
    points: Iterable[PointLike],
    steps: int = DEFAULT_SAMPLE_STEPS,
    include_end: bool = False,
) -> np.ndarray:
    """Piecewise-linear approximation of the curve for display.

    The polyline starts at the first control point and continues through the
    samples at increasing ``t``. By default the last sample is at
    ``(steps - 1) / steps``, so the polyline stops just short of the last
    control point.
    """
    pairs = _as_pairs(points)
    if not pairs:
        return np.empty((0, 2), dtype=np.float64)
    start = np.asarray([pairs[0]], dtype=np.float64)
    if len(pairs) == 1:
        return start
    samples = evaluate_many(pairs, sample_parameters(steps, include_end))
    return np.vstack([start, samples])


class CurveEvaluator:
    """Samples the curve of a point sequence with fixed display settings."""

    def __init__(self, steps: int = DEFAULT_SAMPLE_STEPS, include_end: bool = False) -> None:
        if steps < 2:
            raise ValueError("steps must be at least 2")
        self.steps = int(steps)
        self.include_end = bool(include_end)

    def evaluate(self, points: Iterable[PointLike], t: float) -> Coordinate:
        return evaluate(points, t)

    def sample(self, points: Iterable[PointLike]) -> np.ndarray:
        polyline = sample_curve(points, self.steps, self.include_end)
        logger.debug("Sampled curve polyline with %d vertices", polyline.shape[0])
        return polyline
