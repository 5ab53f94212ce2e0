"""
Paint Layer Stack - View Geometry

Supplies the art board size and the current view center/zoom to the layer
builders. Without an attached QGraphicsView the center and zoom are plain
values (art-board center, DEFAULT_VIEW_ZOOM) that can be set directly,
which is what headless rendering and the tests use.

Usage:
    geometry = ViewGeometry(480, 360)
    geometry.set_zoom(2.0)

    # Or follow a live view
    geometry.attach_view(graphics_view)
    zoom = geometry.view_zoom()
"""

from typing import Optional

from PyQt5.QtCore import QPointF
from PyQt5.QtWidgets import QGraphicsView

from constants import ART_BOARD_WIDTH, ART_BOARD_HEIGHT, DEFAULT_VIEW_ZOOM


class ViewGeometry:
    """Art board dimensions plus view center and zoom"""

    def __init__(self, art_board_width: float = ART_BOARD_WIDTH,
                 art_board_height: float = ART_BOARD_HEIGHT,
                 zoom: float = DEFAULT_VIEW_ZOOM,
                 center: Optional[QPointF] = None):
        """Create geometry for an art board

        Args:
            art_board_width: Drawable width in scene units (> 0)
            art_board_height: Drawable height in scene units (> 0)
            zoom: Initial zoom factor (> 0)
            center: Initial view center, defaults to the art-board center

        Raises:
            ValueError: If a dimension or the zoom is not positive
        """
        if art_board_width <= 0 or art_board_height <= 0:
            raise ValueError(
                f"Art board must have positive size, got {art_board_width}x{art_board_height}")
        self._width = art_board_width
        self._height = art_board_height
        self._zoom = DEFAULT_VIEW_ZOOM
        self._center = QPointF(center) if center is not None else None
        self._view = None
        self.set_zoom(zoom)

    # ========================================
    # Art board
    # ========================================

    def art_board_width(self) -> float:
        return self._width

    def art_board_height(self) -> float:
        return self._height

    def art_board_center(self) -> QPointF:
        return QPointF(self._width / 2, self._height / 2)

    # ========================================
    # View
    # ========================================

    def attach_view(self, view: Optional[QGraphicsView]):
        """Follow a live QGraphicsView for center and zoom (None detaches)"""
        self._view = view

    def view_center(self) -> QPointF:
        """Current view center in scene coordinates"""
        if self._view is not None:
            return self._view.mapToScene(self._view.viewport().rect().center())
        if self._center is not None:
            return QPointF(self._center)
        return self.art_board_center()

    def view_zoom(self) -> float:
        """Current zoom factor (scene units to screen pixels)"""
        if self._view is not None:
            return self._view.transform().m11()
        return self._zoom

    def set_center(self, center: QPointF):
        self._center = QPointF(center)

    def set_zoom(self, zoom: float):
        """Set the detached zoom factor

        Raises:
            ValueError: If zoom is not positive
        """
        if zoom <= 0:
            raise ValueError(f"Zoom must be positive, got {zoom}")
        self._zoom = zoom
