"""
Paint Layer Stack - Project

THE CONTEXT every layer operation runs against. A Project owns:
- the QGraphicsScene items are drawn in
- the ordered layer stack (back to front) and the active layer
- the ViewGeometry used to size and place layer content

Nothing here is global; independent editors use independent Projects.

Qt only orders items by z-value, so the stack primitives below keep
the stack list and mirror it onto z-values after every mutation.

Usage:
    project = Project(ViewGeometry(480, 360))
    project.setup_layers()

    with project.hidden_guide_layers():
        image = render(project.scene)

    raster = project.get_raster()
"""

import logging
from typing import List, Optional

from PyQt5.QtCore import QRectF
from PyQt5.QtWidgets import QGraphicsScene

from models.layer import Layer, LayerRole
from models.view import ViewGeometry
from .registry_mixin import LayerRegistryMixin
from .raster_mixin import RasterMixin
from .factory_mixin import LayerFactoryMixin
from .stack_mixin import LayerStackMixin


class Project(LayerStackMixin, LayerFactoryMixin, RasterMixin, LayerRegistryMixin):
    """Scene, layer stack and active layer of one editor session

    Properties:
        scene: QGraphicsScene holding every layer
        geometry: ViewGeometry for art board and view
        layers: Stack snapshot, back to front
        active_layer: Layer receiving input, or None
    """

    def __init__(self, geometry: Optional[ViewGeometry] = None,
                 scene: Optional[QGraphicsScene] = None):
        """Create an empty project

        Args:
            geometry: Art board / view geometry (defaults from constants)
            scene: Scene to draw into, a new one if omitted
        """
        self._logger = logging.getLogger('Project')
        self.geometry = geometry if geometry is not None else ViewGeometry()
        self.scene = scene if scene is not None else QGraphicsScene()
        self.scene.setSceneRect(QRectF(0, 0,
                                       self.geometry.art_board_width(),
                                       self.geometry.art_board_height()))
        self._layers: List[Layer] = []
        self._active_layer: Optional[Layer] = None

    # ========================================
    # Stack queries
    # ========================================

    @property
    def layers(self) -> List[Layer]:
        return list(self._layers)

    @property
    def active_layer(self) -> Optional[Layer]:
        return self._active_layer

    def index_of(self, layer: Layer) -> Optional[int]:
        """Stack index of layer, or None if it is not in the stack"""
        for index, candidate in enumerate(self._layers):
            if candidate is layer:
                return index
        return None

    # ========================================
    # Stack mutation
    # ========================================

    def create_layer(self, role: Optional[LayerRole] = None) -> Layer:
        """Create a layer on top of the stack and activate it"""
        layer = Layer(role)
        self.add_layer(layer)
        self.activate(layer)
        return layer

    def add_layer(self, layer: Layer) -> Layer:
        """Put layer on top of the stack

        A layer already in the stack is moved to the top. The layer becomes
        active only if no layer is active.
        """
        index = self.index_of(layer)
        if index is not None:
            del self._layers[index]
        self._layers.append(layer)
        if layer.scene() is not self.scene:
            self.scene.addItem(layer)
        if self._active_layer is None:
            self._active_layer = layer
        self._restack()
        self._logger.debug(f"Added {layer!r} at index {len(self._layers) - 1}")
        return layer

    def remove_layer(self, layer: Layer) -> bool:
        """Detach layer from the stack without destroying it

        If the layer was active, its upper neighbour (or else lower neighbour)
        becomes active.

        Returns:
            False if the layer was not in the stack
        """
        index = self.index_of(layer)
        if index is None:
            return False
        del self._layers[index]
        if layer.scene() is self.scene:
            self.scene.removeItem(layer)
        if self._active_layer is layer:
            if index < len(self._layers):
                self._active_layer = self._layers[index]
            elif self._layers:
                self._active_layer = self._layers[index - 1]
            else:
                self._active_layer = None
        self._restack()
        self._logger.debug(f"Removed {layer!r} from index {index}")
        return True

    def send_to_back(self, layer: Layer):
        """Move layer to the bottom of the stack

        Raises:
            ValueError: If layer is not in the stack
        """
        del self._layers[self._require_in_stack(layer)]
        self._layers.insert(0, layer)
        self._restack()

    def bring_to_front(self, layer: Layer):
        """Move layer to the top of the stack

        Raises:
            ValueError: If layer is not in the stack
        """
        del self._layers[self._require_in_stack(layer)]
        self._layers.append(layer)
        self._restack()

    def activate(self, layer: Layer):
        """Make layer the input target

        Raises:
            ValueError: If layer is not in the stack
        """
        self._require_in_stack(layer)
        self._active_layer = layer

    def _require_in_stack(self, layer: Layer) -> int:
        index = self.index_of(layer)
        if index is None:
            raise ValueError(f"{layer!r} is not in the layer stack")
        return index

    def _restack(self):
        for index, layer in enumerate(self._layers):
            layer.setZValue(index)
