"""Interactive canvas that feeds pointer events into a CurveEditor."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import pyqtgraph as pg
from PySide6.QtCore import QPointF, Qt, Signal
from PySide6.QtWidgets import QApplication

from ...config import EditorConfig, build_editor
from ...core import CurveEditor
from .curve_items import CurveItemManager


logger = logging.getLogger(__name__)


MODIFIER_KEYS = {
    "control": Qt.KeyboardModifier.ControlModifier,
    "shift": Qt.KeyboardModifier.ShiftModifier,
    "alt": Qt.KeyboardModifier.AltModifier,
    "meta": Qt.KeyboardModifier.MetaModifier,
}


class CurveCanvas(pg.GraphicsLayoutWidget):
    """Fixed-view plot where clicks add points and modifier-drags move them.

    A plain click appends a point. Holding the drag modifier while pressing
    the left button drags the active point. Any other movement re-runs the
    hit test so the point under the cursor is highlighted.
    """

    changed = Signal()

    def __init__(self, config: Optional[EditorConfig] = None, parent=None):
        super().__init__(parent=parent)
        self.config = config or EditorConfig()
        self.editor: CurveEditor = build_editor(self.config)
        self._modifier = MODIFIER_KEYS[self.config.drag_modifier]

        self.setBackground(self.config.background_color)
        self.plot_item = self.addPlot()
        self.plot_item.hideAxis("left")
        self.plot_item.hideAxis("bottom")
        self.plot_item.setMouseEnabled(x=False, y=False)
        self.plot_item.setMenuEnabled(False)
        self.plot_item.hideButtons()
        self.plot_item.invertY(True)
        width, height = self.config.canvas_size
        self.plot_item.setRange(xRange=(0, width), yRange=(0, height), padding=0)
        self.plot_item.disableAutoRange()

        self._items = CurveItemManager(
            self.plot_item,
            point_size=self.config.point_size,
            polygon_color=self.config.polygon_color,
            curve_color=self.config.curve_color,
            marker_color=self.config.marker_color,
        )

        scene = self.scene()
        scene.sigMouseClicked.connect(self._on_mouse_clicked)  # type: ignore[attr-defined]
        scene.sigMouseMoved.connect(self._on_mouse_moved)  # type: ignore[attr-defined]

    # ------------------------------------------------------------------
    def _to_view(self, scene_pos: QPointF) -> Tuple[float, float]:
        view_pos = self.plot_item.vb.mapSceneToView(scene_pos)
        return float(view_pos.x()), float(view_pos.y())

    def _modifier_held(self, modifiers: Optional[Qt.KeyboardModifier] = None) -> bool:
        if modifiers is None:
            modifiers = QApplication.keyboardModifiers()
        return bool(modifiers & self._modifier)

    def _on_mouse_clicked(self, event) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            return
        position = self._to_view(event.scenePos())
        if self.editor.click(position, self._modifier_held(event.modifiers())):
            self.refresh()

    def _on_mouse_moved(self, scene_pos: QPointF) -> None:
        position = self._to_view(scene_pos)
        primary_pressed = bool(QApplication.mouseButtons() & Qt.MouseButton.LeftButton)
        if self.editor.pointer_moved(position, self._modifier_held(), primary_pressed):
            self.refresh()

    # ------------------------------------------------------------------
    def refresh(self) -> None:
        """Redraw from the current editor state and notify listeners."""
        self._items.update(self.editor.snapshot())
        self.changed.emit()
