"""Manages the plot items that draw the control polygon, curve, and markers."""

from __future__ import annotations

from typing import List, Tuple

import pyqtgraph as pg

from ...core import RenderSnapshot


TRANSPARENT = (0, 0, 0, 0)


class CurveItemManager:
    """Owns the pyqtgraph items for one curve and refreshes them from snapshots.

    Three items are kept for the lifetime of the canvas:
    - the control polygon joining consecutive points
    - the sampled Bézier polyline
    - diamond markers, filled for the active point and outlined otherwise

    Attributes:
        plot_item: PyQtGraph plot item the curve items live on
    """

    def __init__(
        self,
        plot_item: pg.PlotItem,
        *,
        point_size: float = 4.0,
        polygon_color: Tuple[int, int, int] = (0, 0, 0),
        curve_color: Tuple[int, int, int] = (0, 160, 0),
        marker_color: Tuple[int, int, int] = (0, 0, 0),
    ):
        """Initialize the item manager.

        Args:
            plot_item: The PyQtGraph plot item to draw on
            point_size: Half-diagonal of a diamond marker in pixels
            polygon_color: RGB color of the control polygon
            curve_color: RGB color of the sampled curve
            marker_color: RGB color of the point markers
        """
        self.plot_item = plot_item
        self._marker_color = marker_color
        self._marker_size = int(round(point_size * 2))

        self._polygon = pg.PlotDataItem(pen=pg.mkPen(polygon_color, width=1))
        self._curve = pg.PlotDataItem(pen=pg.mkPen(curve_color, width=1.5))
        self._markers = pg.ScatterPlotItem(pxMode=True)
        self._polygon.setZValue(0)
        self._curve.setZValue(1)
        self._markers.setZValue(2)
        for item in (self._polygon, self._curve, self._markers):
            self.plot_item.addItem(item)

    def clear_all(self) -> None:
        """Empty every item without removing it from the plot."""
        self._polygon.setData([], [])
        self._curve.setData([], [])
        self._markers.setData([], [])

    def update(self, snapshot: RenderSnapshot) -> None:
        """Redraw all items from ``snapshot``."""
        points = snapshot.points
        if points.shape[0] == 0:
            self.clear_all()
            return

        if points.shape[0] >= 2:
            self._polygon.setData(points[:, 0], points[:, 1])
            self._curve.setData(snapshot.curve[:, 0], snapshot.curve[:, 1])
        else:
            self._polygon.setData([], [])
            self._curve.setData([], [])

        self._markers.setData(
            x=points[:, 0],
            y=points[:, 1],
            symbol="d",
            size=self._marker_size,
            pen=pg.mkPen(self._marker_color, width=1),
            brush=self.marker_brushes(snapshot),
        )

    def marker_brushes(self, snapshot: RenderSnapshot) -> List[object]:
        """Brush per marker: solid for the active point, transparent otherwise."""
        filled = pg.mkBrush(*self._marker_color)
        hollow = pg.mkBrush(*TRANSPARENT)
        count = snapshot.points.shape[0]
        return [filled if snapshot.is_selected(idx) else hollow for idx in range(count)]

