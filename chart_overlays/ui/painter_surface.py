from __future__ import annotations

import math
from typing import List, Sequence, Tuple

import pyqtgraph as pg
from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QPainter, QPainterPath

from chart_overlays.indicators.surface import DEFAULT_FILL, DEFAULT_LINE_WIDTH, DEFAULT_STROKE


class QPainterSurface:
    """DrawingSurface over an active QPainter. Colors are "#RRGGBB[AA]" strings."""

    def __init__(self, painter: QPainter) -> None:
        self.painter = painter
        self.stroke_style = DEFAULT_STROKE
        self.fill_style = DEFAULT_FILL
        self.line_width = DEFAULT_LINE_WIDTH
        self._dash: List[float] = []
        self._path = QPainterPath()
        self._stack: List[Tuple[str, str, float, List[float]]] = []

    def set_line_dash(self, segments: Sequence[float]) -> None:
        self._dash = [float(s) for s in segments]

    def get_line_dash(self) -> List[float]:
        return list(self._dash)

    def save(self) -> None:
        self._stack.append((self.stroke_style, self.fill_style, self.line_width, list(self._dash)))
        self.painter.save()

    def restore(self) -> None:
        if not self._stack:
            return
        self.stroke_style, self.fill_style, self.line_width, self._dash = self._stack.pop()
        self.painter.restore()

    def begin_path(self) -> None:
        self._path = QPainterPath()

    def move_to(self, x: float, y: float) -> None:
        self._path.moveTo(QPointF(x, y))

    def line_to(self, x: float, y: float) -> None:
        if self._path.elementCount() == 0:
            self._path.moveTo(QPointF(x, y))
            return
        self._path.lineTo(QPointF(x, y))

    def close_path(self) -> None:
        self._path.closeSubpath()

    def arc(self, x: float, y: float, radius: float, start_angle: float, end_angle: float) -> None:
        sweep = end_angle - start_angle
        if abs(sweep) >= 2 * math.pi:
            self._path.addEllipse(QPointF(x, y), radius, radius)
            return
        rect = QRectF(x - radius, y - radius, 2 * radius, 2 * radius)
        # Qt measures degrees counter-clockwise; canvas angles run clockwise in radians.
        start_deg = -math.degrees(start_angle)
        sweep_deg = -math.degrees(sweep)
        if self._path.elementCount() == 0:
            self._path.arcMoveTo(rect, start_deg)
        self._path.arcTo(rect, start_deg, sweep_deg)

    def _pen(self):
        pen = pg.mkPen(self.stroke_style, width=self.line_width)
        if self._dash:
            # Qt dash lengths are in units of the pen width.
            unit = max(self.line_width, 1.0)
            pattern = [max(seg / unit, 0.01) for seg in self._dash]
            if len(pattern) % 2:
                pattern = pattern * 2
            pen.setDashPattern(pattern)
        return pen

    def stroke(self) -> None:
        self.painter.setPen(self._pen())
        self.painter.setBrush(Qt.BrushStyle.NoBrush)
        self.painter.drawPath(self._path)

    def fill(self) -> None:
        self.painter.fillPath(self._path, pg.mkBrush(self.fill_style))

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        self.painter.fillRect(QRectF(x, y, width, height), pg.mkBrush(self.fill_style))
