"""
Project Layer Stack Mixin

Initial stack setup and the hide/show round trip used before exporting
only real user content.

Stack order after setup_layers(), back to front:
    background guide, raster, painting, drag crosshair, guide

Methods:
    - setup_layers
    - hide_guide_layers
    - show_guide_layers
    - hidden_guide_layers (context manager pairing the two above)
"""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from models.layer import Layer, LayerRole


@dataclass
class RemovedGuideLayers:
    """Layers detached by hide_guide_layers(), consumed by show_guide_layers()

    raster_layer is None unless the raster layer was hidden too.
    """
    drag_crosshair_layer: Layer
    guide_layer: Layer
    background_guide_layer: Layer
    raster_layer: Optional[Layer] = None

    def __iter__(self) -> Iterator[Layer]:
        """Detached layers in reinsertion order"""
        if self.raster_layer is not None:
            yield self.raster_layer
        yield self.background_guide_layer
        yield self.drag_crosshair_layer
        yield self.guide_layer


class LayerStackMixin:
    """Mixin providing stack setup and guide hide/show for Project

    This mixin assumes the parent class has:
        - the stack primitives (add_layer, remove_layer, index_of,
          send_to_back, bring_to_front, activate, active_layer)
        - the role accessors and layer factories
        - self._logger: logging.Logger instance
    """

    def setup_layers(self):
        """Create all five role layers in order and activate the painting layer"""
        background_guide_layer = self._make_background_guide_layer()
        self._make_raster_layer()
        painting_layer = self._make_painting_layer()
        drag_crosshair_layer = self._make_drag_crosshair_layer()
        guide_layer = self._make_guide_layer()

        self.send_to_back(background_guide_layer)
        self.bring_to_front(drag_crosshair_layer)
        self.bring_to_front(guide_layer)
        self.activate(painting_layer)
        self._logger.info(f"Set up {len(self._layers)} layers")

    def hide_guide_layers(self, include_raster: bool = False) -> RemovedGuideLayers:
        """Detach the guide layers, e.g. for exporting the image

        Must be paired with show_guide_layers(). Prefer hidden_guide_layers(),
        which guarantees the pairing.

        Args:
            include_raster: Also detach the raster layer

        Returns:
            The detached layers, to pass to show_guide_layers()

        Raises:
            LayerNotFoundError: If a drag crosshair or background guide layer
                (or the raster layer, with include_raster) is missing
        """
        background_guide_layer = self.get_background_guide_layer()
        drag_crosshair_layer = self.get_drag_crosshair_layer()
        guide_layer = self.get_guide_layer()
        self.remove_layer(drag_crosshair_layer)
        self.remove_layer(guide_layer)
        self.remove_layer(background_guide_layer)

        raster_layer = None
        if include_raster:
            raster_layer = self.get_raster_layer()
            self.remove_layer(raster_layer)

        self._logger.debug(f"Hid guide layers (include_raster={include_raster})")
        return RemovedGuideLayers(
            drag_crosshair_layer=drag_crosshair_layer,
            guide_layer=guide_layer,
            background_guide_layer=background_guide_layer,
            raster_layer=raster_layer,
        )

    def show_guide_layers(self, removed: RemovedGuideLayers):
        """Reinsert layers detached by hide_guide_layers()

        Layers still in the stack are left alone. The active layer is checked
        but not changed: anything other than the painting layer is logged as
        an error, since the caller should not have switched layers while the
        guides were hidden.
        """
        raster_layer = removed.raster_layer
        if raster_layer is not None and self.index_of(raster_layer) is None:
            self.add_layer(raster_layer)
            self.send_to_back(raster_layer)
        if self.index_of(removed.background_guide_layer) is None:
            self.add_layer(removed.background_guide_layer)
            self.send_to_back(removed.background_guide_layer)
        if self.index_of(removed.drag_crosshair_layer) is None:
            self.add_layer(removed.drag_crosshair_layer)
            self.bring_to_front(removed.drag_crosshair_layer)
        if self.index_of(removed.guide_layer) is None:
            self.add_layer(removed.guide_layer)
            self.bring_to_front(removed.guide_layer)

        active_layer = self.active_layer
        if active_layer is None or active_layer is not self.find_layer_by_role(LayerRole.PAINTING):
            self._logger.error("Wrong active layer")
            self._logger.error(f"Active layer: {active_layer!r}")

    @contextmanager
    def hidden_guide_layers(self, include_raster: bool = False) -> Iterator[RemovedGuideLayers]:
        """Hide guide layers for the duration of a with block

        The layers are shown again on every exit path, including exceptions.

        Usage:
            with project.hidden_guide_layers(include_raster=True):
                project.scene.render(painter)
        """
        removed = self.hide_guide_layers(include_raster)
        try:
            yield removed
        finally:
            self.show_guide_layers(removed)
