"""Flatten the art board to an image without guides

Guide layers are detached through Project.hidden_guide_layers(). Guide-marked
items left in other layers (overlays built with mark_as_guide) are hidden for
the render too. Both are back in place however rendering ends.
"""

import logging
from contextlib import contextmanager

from PIL import Image
from PyQt5.QtCore import QRectF, Qt
from PyQt5.QtGui import QImage, QPainter
from PyQt5.QtWidgets import QGraphicsScene

from models.raster import RasterItem
from utils.canvas import canvas_to_pil
from utils.guide import is_guide
from utils.logger import loggerRaise

_logger = logging.getLogger('Export')


@contextmanager
def hidden_guide_items(scene: QGraphicsScene):
    """Hide visible guide-marked items in scene for the duration of a with block

    The raster item is guide-marked to lock it, but it is artwork and stays
    visible.
    """
    hidden = [item for item in scene.items()
              if is_guide(item) and item.isVisible() and not isinstance(item, RasterItem)]
    for item in hidden:
        item.setVisible(False)
    try:
        yield hidden
    finally:
        for item in hidden:
            item.setVisible(True)


def flatten_to_image(project, include_raster: bool = False) -> QImage:
    """Render the art board with guide layers and guide items hidden

    Args:
        project: Project to render
        include_raster: Also leave out the raster layer (vector content only)

    Returns:
        Transparent-backed ARGB image the size of the art board
    """
    width = project.geometry.art_board_width()
    height = project.geometry.art_board_height()
    art_board = QRectF(0, 0, width, height)

    image = QImage(int(round(width)), int(round(height)), QImage.Format_ARGB32_Premultiplied)
    image.fill(Qt.transparent)

    try:
        with project.hidden_guide_layers(include_raster), \
                hidden_guide_items(project.scene) as hidden:
            _logger.debug(f"Hid {len(hidden)} guide items for export")
            painter = QPainter(image)
            try:
                painter.setRenderHint(QPainter.Antialiasing)
                project.scene.render(painter, QRectF(image.rect()), art_board)
            finally:
                painter.end()
    except Exception as e:
        loggerRaise(e, "Error flattening artwork")

    _logger.debug(f"Flattened art board to {image.width()}x{image.height()}")
    return image


def flatten_to_pil(project, include_raster: bool = False) -> Image.Image:
    """flatten_to_image() handed to Pillow, for saving by the caller"""
    return canvas_to_pil(flatten_to_image(project, include_raster))
