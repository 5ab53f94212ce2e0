"""
Paint Layer Stack - Raster Content Item

The single bitmap child of the raster layer. Owns the editable QImage and
shows it through a pixmap; bitmap tools paint into canvas() and call
mark_dirty() to refresh what is displayed.
"""

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QImage, QPixmap
from PyQt5.QtWidgets import QGraphicsPixmapItem


class RasterItem(QGraphicsPixmapItem):
    """Bitmap content centered on its pos()

    Drawn with Qt.FastTransformation so scaled pixels stay crisp.
    """

    def __init__(self, canvas: QImage):
        super().__init__()
        self.setTransformationMode(Qt.FastTransformation)
        self._canvas = canvas
        self.set_canvas(canvas)

    def canvas(self) -> QImage:
        """The editable bitmap (paint into it, then call mark_dirty)"""
        return self._canvas

    def set_canvas(self, canvas: QImage):
        """Replace the bitmap, keeping the item centered on pos()"""
        self._canvas = canvas
        self.setOffset(-canvas.width() / 2, -canvas.height() / 2)
        self.mark_dirty()

    def mark_dirty(self):
        self.setPixmap(QPixmap.fromImage(self._canvas))
        self.update()

    def width(self) -> int:
        return self._canvas.width()

    def height(self) -> int:
        return self._canvas.height()
