"""
Project Layer Factory Mixin

Builds each role layer with its initial content. Every factory goes through
create_layer(), so the new layer lands on top of the stack and is active
until setup_layers() activates the painting layer.

Methods:
    - _make_painting_layer
    - _make_raster_layer
    - _make_drag_crosshair_layer
    - _make_guide_layer
    - _make_background_guide_layer
"""

import logging

from PyQt5.QtCore import QPointF
from PyQt5.QtGui import QTransform

from models.layer import Layer, LayerRole
from services.checkerboard import build_checkerboard_guide
from services.crosshair import build_crosshair
from utils.guide import mark_as_guide
from constants import (
    CROSSHAIR_FULL_OPACITY, BACKGROUND_CROSSHAIR_OPACITY,
    CHECKERBOARD_CELL_SIZE, CHECKERBOARD_COLOR,
)

_logger = logging.getLogger('LayerFactory')


class LayerFactoryMixin:
    """Mixin providing role layer construction for Project

    This mixin assumes the parent class has:
        - self.geometry: ViewGeometry
        - self.create_layer(role): stack primitive
        - self.reset_raster(): raster content reset
    """

    def _make_painting_layer(self) -> Layer:
        layer = self.create_layer(LayerRole.PAINTING)
        _logger.debug("Made painting layer")
        return layer

    def _make_raster_layer(self) -> Layer:
        layer = self.create_layer(LayerRole.RASTER)
        self.reset_raster()
        _logger.debug("Made raster layer")
        return layer

    def _make_drag_crosshair_layer(self) -> Layer:
        layer = self.create_layer(LayerRole.DRAG_CROSSHAIR)
        build_crosshair(self.geometry, CROSSHAIR_FULL_OPACITY, layer)
        layer.setVisible(False)
        _logger.debug("Made drag crosshair layer")
        return layer

    def _make_guide_layer(self) -> Layer:
        layer = self.create_layer(LayerRole.GUIDE)
        _logger.debug("Made guide layer")
        return layer

    def _make_background_guide_layer(self) -> Layer:
        """Locked layer with the art-board checkerboard and a faint crosshair"""
        layer = self.create_layer(LayerRole.BACKGROUND_GUIDE)
        layer.locked = True

        cell = CHECKERBOARD_CELL_SIZE
        width = self.geometry.art_board_width()
        height = self.geometry.art_board_height()
        checkerboard = build_checkerboard_guide(width / cell, height / cell, CHECKERBOARD_COLOR)
        checkerboard.setTransform(QTransform.fromScale(cell, cell))

        # Recenter the scaled board on the art board
        bounds = checkerboard.boundingRect()
        center = self.geometry.art_board_center()
        checkerboard.setPos(QPointF(center.x() - bounds.center().x() * cell,
                                    center.y() - bounds.center().y() * cell))
        mark_as_guide(checkerboard)
        checkerboard.setParentItem(layer)

        build_crosshair(self.geometry, BACKGROUND_CROSSHAIR_OPACITY, layer)
        _logger.debug(f"Made background guide layer for {width}x{height} art board")
        return layer
