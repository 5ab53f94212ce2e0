"""
Project Layer Registry Mixin

Role lookup over the layer stack. Callers find "the" layer of a role here
instead of holding references, so lookups stay correct across hide/show.

Methods:
    - find_layer_by_role
    - get_painting_layer
    - get_raster_layer
    - get_drag_crosshair_layer
    - get_background_guide_layer
    - get_guide_layer (creates the guide layer if missing)
"""

from typing import Optional

from models.layer import Layer, LayerNotFoundError, LayerRole


class LayerRegistryMixin:
    """Mixin providing role lookup for Project

    This mixin assumes the parent class has:
        - self._layers: stack list, back to front
        - self._logger: logging.Logger instance
        - self._make_guide_layer(): guide layer factory
    """

    def find_layer_by_role(self, role: LayerRole) -> Optional[Layer]:
        """First layer in stack order carrying role, or None"""
        for layer in self._layers:
            if layer.has_role(role):
                return layer
        return None

    def _require_layer(self, role: LayerRole) -> Layer:
        layer = self.find_layer_by_role(role)
        if layer is None:
            raise LayerNotFoundError(role)
        return layer

    def get_painting_layer(self) -> Layer:
        """Raises LayerNotFoundError if absent"""
        return self._require_layer(LayerRole.PAINTING)

    def get_raster_layer(self) -> Layer:
        """Raises LayerNotFoundError if absent"""
        return self._require_layer(LayerRole.RASTER)

    def get_drag_crosshair_layer(self) -> Layer:
        """Raises LayerNotFoundError if absent"""
        return self._require_layer(LayerRole.DRAG_CROSSHAIR)

    def get_background_guide_layer(self) -> Layer:
        """Raises LayerNotFoundError if absent"""
        return self._require_layer(LayerRole.BACKGROUND_GUIDE)

    def get_guide_layer(self) -> Layer:
        """Return the guide layer, creating it on top of the stack if missing

        Creating a layer activates it, so the painting layer is activated
        again afterwards.

        Raises:
            LayerNotFoundError: If the guide layer had to be created and there
                is no painting layer to hand activation back to
        """
        layer = self.find_layer_by_role(LayerRole.GUIDE)
        if layer is None:
            layer = self._make_guide_layer()
            self.activate(self.get_painting_layer())
            self._logger.debug("Created missing guide layer")
        return layer
