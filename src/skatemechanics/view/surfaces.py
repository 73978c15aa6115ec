"""Qt-backed drawing surface for the path renderer."""
from __future__ import annotations

import logging
from typing import Sequence

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QImage, QPainter, QPainterPath, QPen

from skatemechanics.config import BACKGROUND_COLOR

logger = logging.getLogger(__name__)


class QImageSurface:
    """
    Off-screen raster surface implementing the renderer's Surface protocol.

    Text drawing needs a QGuiApplication instance; create one before calling
    `text()` (the command line entry point does).
    """

    def __init__(self, width: int, height: int, background: str = BACKGROUND_COLOR) -> None:
        self.width = int(width)
        self.height = int(height)
        self.background = QColor(background)
        self.image = QImage(self.width, self.height, QImage.Format.Format_ARGB32)
        self.image.fill(self.background)

    def _painter(self) -> QPainter:
        painter = QPainter(self.image)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        return painter

    # Surface protocol

    def clear(self) -> None:
        self.image.fill(self.background)

    def polyline(self, points: Sequence[tuple[float, float]], color: str, width: float) -> None:
        if len(points) < 2:
            return
        path = QPainterPath(QPointF(*points[0]))
        for x, y in points[1:]:
            path.lineTo(x, y)

        pen = QPen(QColor(color))
        pen.setWidthF(float(width))
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)

        painter = self._painter()
        try:
            painter.setPen(pen)
            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.drawPath(path)
        finally:
            painter.end()

    def circle(self, center: tuple[float, float], radius: float, color: str) -> None:
        painter = self._painter()
        try:
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(QBrush(QColor(color)))
            painter.drawEllipse(QPointF(*center), radius, radius)
        finally:
            painter.end()

    def text(self, position: tuple[float, float], text: str, color: str, size: float) -> None:
        font = QFont()
        font.setPixelSize(max(1, round(size)))

        painter = self._painter()
        try:
            painter.setPen(QColor(color))
            painter.setFont(font)
            painter.drawText(QPointF(*position), text)
        finally:
            painter.end()

    # Export

    def pixel(self, x: int, y: int) -> str:
        """Colour of one pixel as '#rrggbb'."""
        return self.image.pixelColor(x, y).name()

    def save(self, filename: str) -> bool:
        ok = self.image.save(filename)
        if ok:
            logger.info(f"Image saved to: {filename}")
        else:
            logger.error(f"Could not save image to: {filename}")
        return ok
