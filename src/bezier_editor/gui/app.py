"""PySide6/PyQtGraph GUI for interactive Bézier curve editing."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtGui import QAction, QColor, QKeySequence, QPalette
from PySide6.QtWidgets import QApplication, QLabel, QMainWindow

from ..config import EditorConfig
from .canvas import CurveCanvas


logger = logging.getLogger(__name__)


class BezierEditorWindow(QMainWindow):
    """Main window hosting a single curve canvas."""

    def __init__(self, config: Optional[EditorConfig] = None):
        super().__init__()
        self.config = config or EditorConfig()
        self.setWindowTitle("Bézier Curve Editor")

        self.canvas = CurveCanvas(self.config, parent=self)
        self.setCentralWidget(self.canvas)
        width, height = self.config.canvas_size
        self.resize(width, height)

        self._status_label = QLabel(self)
        self.statusBar().addPermanentWidget(self._status_label)
        modifier = self.config.drag_modifier.capitalize()
        self.statusBar().showMessage(f"Click to add a point, {modifier}+drag to move it")

        quit_action = QAction("Quit", self)
        quit_action.setShortcut(QKeySequence.StandardKey.Quit)
        quit_action.triggered.connect(self.close)
        self.addAction(quit_action)

        self.canvas.changed.connect(self._update_status)
        self._update_status()

    def _update_status(self) -> None:
        editor = self.canvas.editor
        selected = editor.selected_index
        selection = "none" if selected is None else f"#{selected}"
        self._status_label.setText(f"Points: {editor.store.count()} | Active: {selection}")


def _apply_dark_palette(app: QApplication) -> None:
    app.setStyle("Fusion")
    dark_palette = QPalette()
    dark_palette.setColor(QPalette.ColorRole.Window, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.ColorRole.WindowText, QColor(255, 255, 255))
    dark_palette.setColor(QPalette.ColorRole.Base, QColor(35, 35, 35))
    dark_palette.setColor(QPalette.ColorRole.Text, QColor(255, 255, 255))
    dark_palette.setColor(QPalette.ColorRole.Button, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.ColorRole.ButtonText, QColor(255, 255, 255))
    dark_palette.setColor(QPalette.ColorRole.Highlight, QColor(42, 130, 218))
    dark_palette.setColor(QPalette.ColorRole.HighlightedText, QColor(35, 35, 35))
    app.setPalette(dark_palette)


def run(config: Optional[EditorConfig] = None) -> int:
    app = QApplication.instance() or QApplication([])
    _apply_dark_palette(app)

    window = BezierEditorWindow(config)
    window.show()
    logger.debug("Editor window shown (%dx%d)", *window.config.canvas_size)
    return app.exec()
