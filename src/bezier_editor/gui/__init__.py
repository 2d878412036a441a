"""Graphical editor built on PySide6 and pyqtgraph."""

from .app import BezierEditorWindow, run

__all__ = ["BezierEditorWindow", "run"]
