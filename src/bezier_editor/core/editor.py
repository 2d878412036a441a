"""Interaction glue: turns pointer events into point-store mutations.

This module is GUI agnostic. Toolkits translate their own events into the
three inputs used here: a cursor position, whether the designated modifier
key is held, and whether the primary mouse button is pressed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .curve import CurveEvaluator
from .geometry import PointLike, to_coordinate_pair
from .hit_test import HitTester, SelectionChange
from .points import ControlPoint, PointStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderSnapshot:
    """Everything a renderer needs for one redraw.

    Attributes:
        points: Control point positions, shape ``(n, 2)``
        curve: Sampled curve polyline, shape ``(m, 2)``
        selected: Index of the active point, or None
    """
    points: np.ndarray
    curve: np.ndarray
    selected: Optional[int]

    def is_selected(self, index: int) -> bool:
        return self.selected is not None and self.selected == index


class CurveEditor:
    """Owns the point store and the active selection for one curve."""

    def __init__(
        self,
        store: Optional[PointStore] = None,
        hit_tester: Optional[HitTester] = None,
        evaluator: Optional[CurveEvaluator] = None,
    ) -> None:
        self.store = store if store is not None else PointStore()
        self.hit_tester = hit_tester if hit_tester is not None else HitTester()
        self.evaluator = evaluator if evaluator is not None else CurveEvaluator()
        self._selected: Optional[int] = None

    @property
    def selected_index(self) -> Optional[int]:
        return self._selected

    @property
    def selected_point(self) -> Optional[ControlPoint]:
        if self._selected is None:
            return None
        return self.store.at(self._selected)

    # ------------------------------------------------------------------
    # Pointer events
    # ------------------------------------------------------------------
    def click(self, position: PointLike, modifier_held: bool = False) -> bool:
        """Append a point at ``position`` unless the modifier is held.

        Returns True when a point was added.
        """
        if modifier_held:
            return False
        self.store.add_point(position)
        return True

    def pointer_moved(
        self,
        position: PointLike,
        modifier_held: bool = False,
        primary_pressed: bool = False,
    ) -> bool:
        """Drag the selected point or update the hover selection.

        Returns True when the view needs a redraw.
        """
        if modifier_held and primary_pressed:
            return self.move_selected(position)
        return self.update_selection(position).changed

    def move_selected(self, position: PointLike) -> bool:
        point = self.selected_point
        if point is None:
            return False
        point.move_to(position)
        logger.debug("Moved control point %d to (%.2f, %.2f)", self._selected, point.x, point.y)
        return True

    def update_selection(self, cursor: PointLike) -> SelectionChange:
        previous = self._selected
        self._selected = self.hit_tester.hit(self.store, to_coordinate_pair(cursor))
        change = SelectionChange(previous, self._selected)
        if change.changed:
            logger.debug("Selection changed: %s -> %s", previous, self._selected)
        return change

    # ------------------------------------------------------------------
    def curve(self) -> np.ndarray:
        return self.evaluator.sample(self.store)

    def snapshot(self) -> RenderSnapshot:
        return RenderSnapshot(
            points=self.store.coordinates(),
            curve=self.curve(),
            selected=self._selected,
        )
