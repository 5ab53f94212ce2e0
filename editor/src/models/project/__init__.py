"""Project model mixins package"""

from .registry_mixin import LayerRegistryMixin
from .raster_mixin import RasterMixin
from .factory_mixin import LayerFactoryMixin
from .stack_mixin import LayerStackMixin, RemovedGuideLayers
from .core import Project

__all__ = [
    'Project',
    'RemovedGuideLayers',
    'LayerRegistryMixin',
    'RasterMixin',
    'LayerFactoryMixin',
    'LayerStackMixin',
]
