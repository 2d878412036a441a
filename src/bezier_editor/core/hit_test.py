"""Nearest-point hit testing for cursor hover and selection.

The scan uses a two-tier check to avoid square roots for most points:
a cheap rectilinear (Manhattan) gate first, then the exact Euclidean
distance only for candidates that pass it. A point is rejected as soon
as its Manhattan distance is not strictly better than the current best,
even if its Euclidean distance would have been. The result is therefore
the nearest point among those not pruned, which matches the true nearest
point whenever both metrics rank the candidates the same way.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from .geometry import PointLike, euclidean_distance, manhattan_distance

logger = logging.getLogger(__name__)


DEFAULT_SELECTION_RADIUS = 12.0


@dataclass(frozen=True)
class NearestPoint:
    """Best candidate found by :func:`find_nearest`."""

    index: int
    manhattan: float
    distance: float


@dataclass(frozen=True)
class SelectionChange:
    """Selection before and after a hit test, by point index."""

    previous: Optional[int]
    current: Optional[int]

    @property
    def changed(self) -> bool:
        return self.previous != self.current


def find_nearest(points: Iterable[PointLike], cursor: PointLike) -> Optional[NearestPoint]:
    """Scan ``points`` in order and return the best candidate for ``cursor``.

    Returns None when ``points`` is empty. Replacement requires strictly
    smaller distances on both metrics, so ties keep the earlier point.
    """
    best: Optional[NearestPoint] = None
    for idx, point in enumerate(points):
        manhattan = manhattan_distance(cursor, point)
        if best is None:
            best = NearestPoint(idx, manhattan, euclidean_distance(cursor, point))
            continue
        if not manhattan < best.manhattan:
            continue  # fast reject, true for most points
        distance = euclidean_distance(cursor, point)
        if not distance < best.distance:
            continue  # slow reject
        best = NearestPoint(idx, manhattan, distance)
    return best


class HitTester:
    """Decides which point, if any, the cursor is close enough to select."""

    def __init__(self, selection_radius: float = DEFAULT_SELECTION_RADIUS) -> None:
        if selection_radius <= 0:
            raise ValueError("selection_radius must be positive")
        self.selection_radius = float(selection_radius)

    def hit(self, points: Iterable[PointLike], cursor: PointLike) -> Optional[int]:
        """Return the index of the selected point, or None."""
        nearest = find_nearest(points, cursor)
        if nearest is None:
            return None
        if nearest.distance < self.selection_radius:
            return nearest.index
        return None
