"""Crosshair overlay builder

The crosshair is a vertical line, a horizontal line and a small ring, drawn
twice: a wide white pass underneath and a thin black pass on top so it reads
against any background. The group is scaled by 1/zoom so it always renders
CROSSHAIR_SIZE screen pixels wide.
"""

import logging

from PyQt5.QtCore import QRectF, Qt
from PyQt5.QtGui import QBrush, QColor, QPen
from PyQt5.QtWidgets import QGraphicsEllipseItem, QGraphicsItemGroup, QGraphicsLineItem

from constants import (
    CROSSHAIR_SIZE,
    CROSSHAIR_ARM_LENGTH, CROSSHAIR_RING_RADIUS,
    CROSSHAIR_OUTER_STROKE_WIDTH, CROSSHAIR_OUTER_STROKE_COLOR,
    CROSSHAIR_INNER_STROKE_WIDTH, CROSSHAIR_INNER_STROKE_COLOR,
)
from utils.guide import mark_as_guide

_logger = logging.getLogger('Crosshair')


def _add_crosshair_pass(crosshair: QGraphicsItemGroup, stroke_width: float, stroke_color: str):
    """Add one line-pair + ring pass with the given stroke"""
    line_pen = QPen(QColor(stroke_color), stroke_width, Qt.SolidLine, Qt.RoundCap)
    ring_pen = QPen(QColor(stroke_color), stroke_width)

    arm = CROSSHAIR_ARM_LENGTH
    v_line = QGraphicsLineItem(0, -arm, 0, arm)
    v_line.setPen(line_pen)
    crosshair.addToGroup(v_line)

    h_line = QGraphicsLineItem(-arm, 0, arm, 0)
    h_line.setPen(line_pen)
    crosshair.addToGroup(h_line)

    r = CROSSHAIR_RING_RADIUS
    circle = QGraphicsEllipseItem(-r, -r, 2 * r, 2 * r)
    circle.setPen(ring_pen)
    circle.setBrush(QBrush(Qt.NoBrush))
    crosshair.addToGroup(circle)


def geometry_rect(crosshair: QGraphicsItemGroup) -> QRectF:
    """Union of the children's unstroked geometry, in crosshair coordinates

    boundingRect() includes half the pen width on every side; the on-screen
    size is measured without it.
    """
    rect = QRectF()
    for child in crosshair.childItems():
        if isinstance(child, QGraphicsLineItem):
            line = child.line()
            child_rect = QRectF(line.p1(), line.p2()).normalized()
        else:
            child_rect = child.rect()
        rect = rect.united(child.mapRectToParent(child_rect))
    return rect


def build_crosshair(geometry, opacity: float, parent_layer):
    """Build a guide crosshair at the view center and attach it to parent_layer

    The group keeps its scale and position as item transforms, so later zoom
    handlers can read and adjust them. parent_layer.drag_crosshair is set to
    the new group.

    Args:
        geometry: ViewGeometry supplying view center and zoom
        opacity: Group opacity (0.0-1.0)
        parent_layer: Layer that receives the crosshair
    """
    crosshair = QGraphicsItemGroup()

    _add_crosshair_pass(crosshair, CROSSHAIR_OUTER_STROKE_WIDTH, CROSSHAIR_OUTER_STROKE_COLOR)
    _add_crosshair_pass(crosshair, CROSSHAIR_INNER_STROKE_WIDTH, CROSSHAIR_INNER_STROKE_COLOR)

    mark_as_guide(crosshair)
    crosshair.setPos(geometry.view_center())
    crosshair.setOpacity(opacity)
    crosshair.setParentItem(parent_layer)
    parent_layer.drag_crosshair = crosshair

    # Children are centered on the origin, so scaling keeps the center on pos()
    zoom = geometry.view_zoom()
    crosshair.setScale(CROSSHAIR_SIZE / geometry_rect(crosshair).width() / zoom)
    _logger.debug(f"Built crosshair at zoom {zoom}, scale {crosshair.scale():.4f}")
