"""
Paint Layer Stack - Layer Scene Item

A Layer is a content-less QGraphicsItem that parents the drawable items of
one stack slot. Qt has no layer concept of its own, so the stack order and
the active layer live on Project; the Layer itself only carries:
- its role (one of the five LayerRole values, or None for plain layers)
- a locked flag (locked layers pass no input to their children)
- a non-owning back-reference to the crosshair it hosts, if any

Usage:
    layer = Layer(LayerRole.PAINTING)
    item.setParentItem(layer)
    layer.remove_children()
"""

import enum
import logging
from typing import List, Optional

from PyQt5.QtCore import QRectF
from PyQt5.QtWidgets import QGraphicsItem

from utils.guide import is_locked, set_locked


class LayerRole(enum.Enum):
    """The five mutually exclusive layer purposes"""
    PAINTING = 'painting'
    RASTER = 'raster'
    DRAG_CROSSHAIR = 'drag_crosshair'
    GUIDE = 'guide'
    BACKGROUND_GUIDE = 'background_guide'


class LayerNotFoundError(LookupError):
    """No layer in the stack carries the requested role

    Raised by the role accessors when they are used before setup_layers()
    or while the layer is detached by an unpaired hide_guide_layers().
    """

    def __init__(self, role: LayerRole):
        super().__init__(f"No layer with role '{role.value}' in the stack")
        self.role = role


class Layer(QGraphicsItem):
    """Stack slot holding drawable items

    Properties:
        role: LayerRole tag, or None
        locked: When True the layer and its children ignore input
        drag_crosshair: Crosshair group hosted by this layer (non-owning)
    """

    _logger = logging.getLogger('Layer')

    def __init__(self, role: Optional[LayerRole] = None):
        super().__init__()
        self.setFlag(QGraphicsItem.ItemHasNoContents, True)
        self._role = role
        self.drag_crosshair = None

    def __repr__(self) -> str:
        role = self._role.value if self._role else None
        return f"Layer(role={role!r}, visible={self.isVisible()}, locked={self.locked})"

    @property
    def role(self) -> Optional[LayerRole]:
        return self._role

    def has_role(self, role: LayerRole) -> bool:
        return self._role is role

    @property
    def locked(self) -> bool:
        return is_locked(self)

    @locked.setter
    def locked(self, value: bool):
        set_locked(self, value)

    def children(self) -> List[QGraphicsItem]:
        """Direct child items in stacking order"""
        return self.childItems()

    def add_child(self, item: QGraphicsItem):
        item.setParentItem(self)

    def remove_children(self):
        """Detach and drop every child item"""
        scene = self.scene()
        for child in self.childItems():
            child.setParentItem(None)
            if scene is not None:
                scene.removeItem(child)
        if self.drag_crosshair is not None and self.drag_crosshair.parentItem() is not self:
            self.drag_crosshair = None
        self._logger.debug(f"Cleared children of {self!r}")

    # ========================================
    # QGraphicsItem interface
    # ========================================

    def boundingRect(self) -> QRectF:
        return QRectF()

    def paint(self, painter, option, widget=None):
        pass
