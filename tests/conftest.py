"""
Shared fixtures for Paint Layer Stack tests.

Provides view geometries, empty projects and fully set-up projects.
"""
import sys
import os
import pytest

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))

# Render without a display
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')


# ── Art board sizes ─────────────────────────────────────────────────────

BOARD_WIDTH = 480
BOARD_HEIGHT = 360

# 8 x 8 checker cells of 8 units
SMALL_BOARD = 64


@pytest.fixture
def geometry():
    """480 x 360 art board at zoom 1"""
    from models.view import ViewGeometry
    return ViewGeometry(BOARD_WIDTH, BOARD_HEIGHT)


@pytest.fixture
def small_geometry():
    """64 x 64 art board at zoom 1"""
    from models.view import ViewGeometry
    return ViewGeometry(SMALL_BOARD, SMALL_BOARD)


@pytest.fixture
def project(qapp, geometry):
    """Empty project (no layers)"""
    from models.project import Project
    return Project(geometry)


@pytest.fixture
def setup_project(project):
    """Project after setup_layers()"""
    project.setup_layers()
    return project


@pytest.fixture
def small_project(qapp, small_geometry):
    """64 x 64 project after setup_layers()"""
    from models.project import Project
    project = Project(small_geometry)
    project.setup_layers()
    return project
