"""
Tests for guide and lock marking on scene items.
"""
import pytest
from PyQt5.QtCore import QPointF, Qt
from PyQt5.QtWidgets import QGraphicsItem, QGraphicsRectItem

from models.layer import Layer
from utils.guide import content_items_at, is_guide, is_locked, mark_as_guide, set_locked


def nested_items(depth):
    """Chain of rect items, each parenting the next"""
    root = QGraphicsRectItem(0, 0, 10, 10)
    items = [root]
    for _ in range(depth):
        child = QGraphicsRectItem(0, 0, 10, 10, items[-1])
        items.append(child)
    return items


class TestMarkAsGuide:

    def test_defaults_are_unmarked(self, qapp):
        item = QGraphicsRectItem(0, 0, 10, 10)
        assert not is_guide(item)
        assert not is_locked(item)

    @pytest.mark.parametrize("depth", [0, 1, 4])
    def test_marks_item_and_descendants(self, qapp, depth):
        items = nested_items(depth)
        mark_as_guide(items[0])
        assert sum(1 for item in items if is_guide(item)) == depth + 1
        assert all(is_locked(item) for item in items)

    def test_marks_siblings(self, qapp):
        root = QGraphicsRectItem(0, 0, 10, 10)
        children = [QGraphicsRectItem(0, 0, 1, 1, root) for _ in range(3)]
        mark_as_guide(root)
        assert all(is_guide(child) for child in children)

    def test_guides_ignore_input(self, qapp):
        item = QGraphicsRectItem(0, 0, 10, 10)
        item.setFlag(QGraphicsItem.ItemIsSelectable, True)
        item.setFlag(QGraphicsItem.ItemIsMovable, True)
        mark_as_guide(item)
        assert item.acceptedMouseButtons() == Qt.NoButton
        assert not item.acceptHoverEvents()
        assert not item.flags() & QGraphicsItem.ItemIsSelectable
        assert not item.flags() & QGraphicsItem.ItemIsMovable
        assert not item.isEnabled()

    def test_does_not_mark_parent(self, qapp):
        parent, child = nested_items(1)
        mark_as_guide(child)
        assert not is_guide(parent)


class TestLocking:

    def test_set_locked(self, qapp):
        item = QGraphicsRectItem(0, 0, 10, 10)
        set_locked(item)
        assert is_locked(item)
        assert not item.isEnabled()

    def test_unlock(self, qapp):
        item = QGraphicsRectItem(0, 0, 10, 10)
        set_locked(item, True)
        set_locked(item, False)
        assert not is_locked(item)
        assert item.isEnabled()

    def test_locking_is_not_guide_marking(self, qapp):
        item = QGraphicsRectItem(0, 0, 10, 10)
        set_locked(item)
        assert not is_guide(item)

    def test_locked_layer_disables_children(self, qapp):
        layer = Layer()
        child = QGraphicsRectItem(0, 0, 10, 10)
        layer.add_child(child)
        layer.locked = True
        assert layer.locked
        assert not child.isEnabled()
        layer.locked = False
        assert child.isEnabled()


class TestContentItemsAt:

    def test_guides_reported_by_scene(self, setup_project):
        items = setup_project.scene.items(QPointF(105, 105))
        assert any(is_guide(item) for item in items)

    def test_skips_guides(self, setup_project):
        rect = QGraphicsRectItem(100, 100, 10, 10)
        setup_project.get_painting_layer().add_child(rect)
        assert content_items_at(setup_project.scene, QPointF(105, 105)) == [rect]

    def test_nothing_but_guides(self, setup_project):
        assert content_items_at(setup_project.scene, QPointF(5, 5)) == []

    def test_marked_overlay_skipped(self, setup_project):
        overlay = QGraphicsRectItem(0, 0, 50, 50)
        setup_project.get_painting_layer().add_child(overlay)
        mark_as_guide(overlay)
        assert overlay not in content_items_at(setup_project.scene, QPointF(5, 5))
