"""
Project Raster Content Mixin

Owns the single RasterItem child of the raster layer.

Methods:
    - reset_raster
    - get_raster
"""

from models.raster import RasterItem
from utils.canvas import build_blank_canvas
from utils.guide import mark_as_guide


class RasterMixin:
    """Mixin providing raster content management for Project

    This mixin assumes the parent class has:
        - self.geometry: ViewGeometry
        - self.get_raster_layer(): role accessor
        - self._logger: logging.Logger instance
    """

    def reset_raster(self):
        """Replace the raster layer's content with one blank art-board canvas

        Raises:
            LayerNotFoundError: If there is no raster layer
        """
        layer = self.get_raster_layer()
        layer.remove_children()

        raster = RasterItem(build_blank_canvas(self.geometry))
        raster.setParentItem(layer)
        mark_as_guide(raster)
        raster.setPos(self.geometry.art_board_center())
        self._logger.debug(f"Reset raster to {raster.width()}x{raster.height()}")

    def get_raster(self) -> RasterItem:
        """Return the raster item, creating a blank one if the layer is empty

        Raises:
            LayerNotFoundError: If there is no raster layer
        """
        layer = self.get_raster_layer()
        if not layer.children():
            self.reset_raster()
        return self.get_raster_layer().children()[0]
