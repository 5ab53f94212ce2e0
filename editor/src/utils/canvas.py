"""Blank bitmap canvases and pixel access helpers"""

import numpy as np
from PIL import Image
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QImage



def build_blank_canvas(geometry, width=None, height=None) -> QImage:
	"""Create a fully transparent canvas

	Args:
		geometry: ViewGeometry supplying the art-board size
		width: Canvas width in pixels, art-board width when falsy
		height: Canvas height in pixels, art-board height when falsy

	Returns:
		Premultiplied ARGB QImage. A QImage has no smoothing state of its
		own; RasterItem draws it with Qt.FastTransformation.
	"""
	width = int(round(width if width else geometry.art_board_width()))
	height = int(round(height if height else geometry.art_board_height()))
	canvas = QImage(width, height, QImage.Format_ARGB32_Premultiplied)
	canvas.fill(Qt.transparent)
	return canvas


def canvas_to_array(canvas: QImage) -> np.ndarray:
	"""Copy a canvas into an (height, width, 4) RGBA uint8 array (straight alpha)"""
	rgba = canvas.convertToFormat(QImage.Format_RGBA8888)
	width, height = rgba.width(), rgba.height()
	ptr = rgba.constBits()
	ptr.setsize(rgba.sizeInBytes())
	# Rows may be padded past width * 4
	arr = np.frombuffer(ptr, dtype=np.uint8).reshape(height, rgba.bytesPerLine())
	return arr[:, :width * 4].reshape(height, width, 4).copy()


def canvas_to_pil(canvas: QImage) -> Image.Image:
	"""Hand a canvas to Pillow (RGBA)"""
	return Image.fromarray(canvas_to_array(canvas), 'RGBA')
