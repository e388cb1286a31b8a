"""
Swarm Canvas
Paints the swarm and feeds pointer events back to the controller.

The canvas is also the swarm's bounds provider (its own size) and owns
the "Z" outline used for patterned placement.
"""

import math
from typing import Tuple

from PyQt5.QtWidgets import QWidget
from PyQt5.QtCore import Qt, QPointF, QRectF
from PyQt5.QtGui import QPainter, QPainterPath, QBrush

from boidswarm.config import Z_PATH, Z_PATH_BBOX
from .theme import COLORS, qcolor


def _arc_to(path: QPainterPath, x1: float, y1: float,
            x2: float, y2: float, radius: float) -> None:
    """
    Rounded corner at (x1, y1) heading toward (x2, y2).

    Same tangent points as a 2D canvas arcTo; the arc itself is a
    quadratic through the corner.
    """
    start = path.currentPosition()
    ux, uy = start.x() - x1, start.y() - y1
    vx, vy = x2 - x1, y2 - y1
    ulen = math.hypot(ux, uy)
    vlen = math.hypot(vx, vy)
    if ulen == 0 or vlen == 0 or radius <= 0:
        path.lineTo(x1, y1)
        return

    ux, uy = ux / ulen, uy / ulen
    vx, vy = vx / vlen, vy / vlen
    theta = math.acos(max(-1.0, min(1.0, ux * vx + uy * vy)))
    if theta < 1e-6 or math.pi - theta < 1e-6:
        # Collinear - no corner to round
        path.lineTo(x1, y1)
        return

    t = radius / math.tan(theta / 2)
    path.lineTo(x1 + ux * t, y1 + uy * t)
    path.quadTo(x1, y1, x1 + vx * t, y1 + vy * t)


def build_z_path() -> QPainterPath:
    """Closed QPainterPath for the Z_PATH outline."""
    path = QPainterPath()
    for op, *args in Z_PATH:
        if op == 'move':
            path.moveTo(*args)
        elif op == 'line':
            path.lineTo(*args)
        elif op == 'arc':
            _arc_to(path, *args)
        else:
            raise ValueError(f"unknown path op {op!r}")
    path.closeSubpath()
    return path


class SwarmCanvas(QWidget):
    """
    Full-window drawing surface for the swarm.

    Boids are filled discs, destroy bits filled squares.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setMouseTracking(True)  # Predator follows the pointer without a button held
        self.setAttribute(Qt.WA_OpaquePaintEvent)
        self.setMinimumSize(320, 240)

        self._controller = None
        self._z_path = build_z_path()

    def set_controller(self, controller) -> None:
        """Set reference to swarm controller for painting and input."""
        self._controller = controller

        if controller:
            controller.frame_ready.connect(self.update)
            controller.set_spawn_region(self.contains_spawn_point, Z_PATH_BBOX)

    def bounds(self) -> Tuple[float, float]:
        """Current world size (the widget size)."""
        return float(self.width()), float(self.height())

    def contains_spawn_point(self, x: float, y: float) -> bool:
        return self._z_path.contains(QPointF(x, y))

    # === Painting ===

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        painter.fillRect(self.rect(), qcolor(COLORS['background']))

        if self._controller is None:
            return
        swarm = self._controller.swarm

        painter.setPen(Qt.NoPen)
        for boid in swarm.boids:
            painter.setBrush(QBrush(qcolor(boid.color)))
            painter.drawEllipse(QPointF(boid.x, boid.y), boid.radius, boid.radius)

        for bit in swarm.destroy_bits:
            painter.fillRect(QRectF(bit.x, bit.y, bit.size, bit.size), qcolor(bit.color))

    # === Pointer ===

    def mouseMoveEvent(self, event):
        if self._controller:
            self._controller.pointer_moved(event.x(), event.y())
        super().mouseMoveEvent(event)

    def mousePressEvent(self, event):
        if self._controller and event.button() == Qt.LeftButton:
            self._controller.pointer_pressed(event.x(), event.y())
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event):
        if self._controller and event.button() == Qt.LeftButton:
            self._controller.pointer_released(event.x(), event.y())
        super().mouseReleaseEvent(event)

    def leaveEvent(self, event):
        if self._controller:
            self._controller.pointer_left()
        super().leaveEvent(event)
