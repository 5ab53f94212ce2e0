"""
Tests for the checkerboard background guide.

Verifies the outline point count, that odd-even filling yields alternating
cells, and the placement of the scaled board on the art board.
"""
import pytest
from PyQt5.QtCore import QPointF, QRectF, Qt
from PyQt5.QtWidgets import QGraphicsPathItem, QGraphicsRectItem

from constants import CHECKERBOARD_CELL_SIZE, CHECKERBOARD_COLOR
from services.checkerboard import build_checkerboard_guide, checkerboard_points
from utils.guide import is_guide, is_locked


def cells_item(checkerboard):
    return next(c for c in checkerboard.childItems() if isinstance(c, QGraphicsPathItem))


# ══════════════════════════════════════════════════════════════════════════
# Outline points
# ══════════════════════════════════════════════════════════════════════════

class TestCheckerboardPoints:

    def test_point_count_8x8(self):
        # 16 teeth points + 14 zig-zag points
        assert len(checkerboard_points(8, 8)) == 30

    @pytest.mark.parametrize("width, height", [(1, 1), (3, 2), (60, 45)])
    def test_point_count(self, width, height):
        assert len(checkerboard_points(width, height)) == 2 * width + 2 * (height - 1)

    def test_fractional_size_rounds_up(self):
        assert len(checkerboard_points(2.5, 1)) == 6

    def test_starts_at_origin(self):
        assert checkerboard_points(4, 4)[0] == QPointF(0, 0)

    def test_points_stay_in_bounds(self):
        for point in checkerboard_points(5, 3):
            assert 0 <= point.x() <= 5
            assert 0 <= point.y() <= 3


# ══════════════════════════════════════════════════════════════════════════
# Cell pattern
# ══════════════════════════════════════════════════════════════════════════

class TestCellPattern:

    @pytest.fixture
    def checkerboard(self, qapp):
        return build_checkerboard_guide(8, 8, CHECKERBOARD_COLOR)

    def test_uses_odd_even_fill(self, checkerboard):
        assert cells_item(checkerboard).path().fillRule() == Qt.OddEvenFill

    def test_alternating_cells(self, checkerboard):
        path = cells_item(checkerboard).path()
        for row in range(8):
            for col in range(8):
                filled = path.contains(QPointF(col + 0.5, row + 0.5))
                assert filled == ((col + row) % 2 == 0), (col, row)

    def test_cell_color(self, checkerboard):
        color = cells_item(checkerboard).brush().color()
        assert color.name() == CHECKERBOARD_COLOR.lower()

    def test_white_background_under_cells(self, checkerboard):
        background, cells = checkerboard.childItems()
        assert isinstance(background, QGraphicsRectItem)
        assert background.rect() == QRectF(0, 0, 8, 8)
        assert background.brush().color().name() == '#ffffff'
        assert cells is cells_item(checkerboard)

    def test_no_outlines(self, checkerboard):
        for child in checkerboard.childItems():
            assert child.pen().style() == Qt.NoPen

    def test_bounds_are_cell_grid(self, checkerboard):
        assert checkerboard.boundingRect() == QRectF(0, 0, 8, 8)

    def test_marked_as_guide(self, checkerboard):
        assert is_guide(checkerboard)
        assert is_locked(checkerboard)
        for child in checkerboard.childItems():
            assert is_guide(child)
            assert is_locked(child)


# ══════════════════════════════════════════════════════════════════════════
# Background guide placement
# ══════════════════════════════════════════════════════════════════════════

class TestBackgroundPlacement:

    def background_checkerboard(self, project):
        layer = project.get_background_guide_layer()
        return next(c for c in layer.children() if c is not layer.drag_crosshair)

    def test_covers_small_art_board(self, small_project):
        checkerboard = self.background_checkerboard(small_project)
        assert checkerboard.sceneBoundingRect() == QRectF(0, 0, 64, 64)

    def test_covers_art_board(self, setup_project):
        checkerboard = self.background_checkerboard(setup_project)
        assert checkerboard.sceneBoundingRect() == QRectF(0, 0, 480, 360)

    def test_scaled_by_cell_size(self, small_project):
        checkerboard = self.background_checkerboard(small_project)
        assert checkerboard.transform().m11() == CHECKERBOARD_CELL_SIZE
        assert checkerboard.transform().m22() == CHECKERBOARD_CELL_SIZE

    def test_one_checker_per_cell_size(self, small_project):
        checkerboard = self.background_checkerboard(small_project)
        assert checkerboard.boundingRect() == QRectF(0, 0, 8, 8)
