"""
Paint Layer Stack - Data Models

Public API: import Project, Layer, LayerRole and friends from models.
"""

from .layer import Layer, LayerRole, LayerNotFoundError
from .raster import RasterItem
from .view import ViewGeometry
from .project import Project, RemovedGuideLayers

__all__ = [
    'Project',
    'Layer',
    'LayerRole',
    'LayerNotFoundError',
    'RasterItem',
    'RemovedGuideLayers',
    'ViewGeometry',
]
