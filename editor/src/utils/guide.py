"""Guide and lock marking for scene items

A guide item is decorative: it is locked, never receives input and is left
out of anything exported. Marking a group marks every descendant. Tools
looking for items under the cursor use content_items_at(), which skips guides.
"""

from typing import List

from PyQt5.QtCore import QPointF, Qt
from PyQt5.QtWidgets import QGraphicsItem, QGraphicsScene

from constants import ITEM_DATA_GUIDE, ITEM_DATA_LOCKED


def set_locked(item: QGraphicsItem, locked: bool = True):
	"""Lock or unlock an item. Disabled items pass no input to their children."""
	item.setData(ITEM_DATA_LOCKED, bool(locked))
	item.setEnabled(not locked)


def is_locked(item: QGraphicsItem) -> bool:
	return bool(item.data(ITEM_DATA_LOCKED))


def is_guide(item: QGraphicsItem) -> bool:
	return bool(item.data(ITEM_DATA_GUIDE))


def mark_as_guide(item: QGraphicsItem):
	"""Mark item and all of its descendants as locked guides"""
	set_locked(item, True)
	item.setData(ITEM_DATA_GUIDE, True)
	item.setAcceptedMouseButtons(Qt.NoButton)
	item.setAcceptHoverEvents(False)
	item.setFlag(QGraphicsItem.ItemIsSelectable, False)
	item.setFlag(QGraphicsItem.ItemIsMovable, False)
	item.setFlag(QGraphicsItem.ItemIsFocusable, False)
	for child in item.childItems():
		mark_as_guide(child)


def content_items_at(scene: QGraphicsScene, pos: QPointF) -> List[QGraphicsItem]:
	"""scene.items(pos) without guides, topmost first

	Guides refuse mouse buttons but Qt still reports them from items(), so
	editing tools hit-test through this instead.
	"""
	return [item for item in scene.items(pos) if not is_guide(item)]
