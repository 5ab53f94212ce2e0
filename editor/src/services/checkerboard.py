"""Checkerboard background guide builder

The checkerboard is one compound path filled with the odd-even rule over a
white rectangle. The path runs as a row of teeth along the top and bottom
edges (vertical stripes), then zig-zags across every inner row boundary
(horizontal stripes); odd-even filling the overlap leaves alternating cells.
"""

from typing import List

from PyQt5.QtCore import QPointF, QRectF, Qt
from PyQt5.QtGui import QBrush, QColor, QPainterPath, QPen
from PyQt5.QtWidgets import QGraphicsItemGroup, QGraphicsPathItem, QGraphicsRectItem

from constants import CHECKERBOARD_BACKGROUND_COLOR
from utils.guide import mark_as_guide


def checkerboard_points(width, height) -> List[QPointF]:
    """Outline points of a width x height cell checkerboard with unit cells

    Yields 2 * ceil(width) points for the teeth and 2 * (ceil(height) - 1)
    points for the row zig-zag.
    """
    points = []
    x = 0
    y = 0
    while x < width:
        points.append(QPointF(x, y))
        x += 1
        points.append(QPointF(x, y))
        y = height if y == 0 else 0

    y = height - 1
    x = width
    while y > 0:
        points.append(QPointF(x, y))
        x = width if x == 0 else 0
        points.append(QPointF(x, y))
        y -= 1
    return points


def build_checkerboard_guide(width, height, color) -> QGraphicsItemGroup:
    """Build a width x height cell checkerboard with unit-sized cells

    Args:
        width: Number of cells across
        height: Number of cells down
        color: Fill color of the dark cells (any QColor-compatible value)

    Returns:
        Locked guide group with local bounds (0, 0, width, height); the caller
        scales and positions it.
    """
    background = QGraphicsRectItem(QRectF(QPointF(0, 0), QPointF(width, height)))
    background.setBrush(QBrush(QColor(CHECKERBOARD_BACKGROUND_COLOR)))
    background.setPen(QPen(Qt.NoPen))

    path = QPainterPath()
    path.setFillRule(Qt.OddEvenFill)
    points = checkerboard_points(width, height)
    path.moveTo(points[0])
    for point in points[1:]:
        path.lineTo(point)
    path.closeSubpath()

    cells = QGraphicsPathItem(path)
    cells.setBrush(QBrush(QColor(color)))
    cells.setPen(QPen(Qt.NoPen))

    checkerboard = QGraphicsItemGroup()
    checkerboard.addToGroup(background)
    checkerboard.addToGroup(cells)
    mark_as_guide(checkerboard)
    return checkerboard
