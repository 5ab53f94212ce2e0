"""
Paint Layer Stack - Constants and Configuration

This module contains all constant values used by the layer stack:
- Art board defaults
- Crosshair overlay geometry and opacities
- Checkerboard background guide settings
- Raster canvas format

Values are in art-board (scene) units unless noted as screen pixels.
"""

# ======================================================================
# ART BOARD
# ======================================================================

# Default drawable area (scene units)
ART_BOARD_WIDTH = 480 * 2
ART_BOARD_HEIGHT = 360 * 2

# Default view state when no QGraphicsView is attached
DEFAULT_VIEW_ZOOM = 1.0

# ======================================================================
# CROSSHAIR OVERLAY
# ======================================================================

# Rendered width of a crosshair in screen pixels, independent of zoom
CROSSHAIR_SIZE = 16

# Opacity of the crosshair shown while dragging
CROSSHAIR_FULL_OPACITY = 0.75

# Opacity of the faint center marker on the background guide
BACKGROUND_CROSSHAIR_OPACITY = 0.16

# Unscaled primitive geometry (local units, centered on origin)
CROSSHAIR_ARM_LENGTH = 7
CROSSHAIR_RING_RADIUS = 5.5

# Two passes: wide light stroke underneath, thin dark stroke on top
CROSSHAIR_OUTER_STROKE_WIDTH = 6
CROSSHAIR_OUTER_STROKE_COLOR = 'white'
CROSSHAIR_INNER_STROKE_WIDTH = 2
CROSSHAIR_INNER_STROKE_COLOR = 'black'

# ======================================================================
# CHECKERBOARD BACKGROUND GUIDE
# ======================================================================

# Edge length of one checker cell (scene units)
CHECKERBOARD_CELL_SIZE = 8

# Cell colors
CHECKERBOARD_COLOR = '#E5E5E5'
CHECKERBOARD_BACKGROUND_COLOR = '#fff'

# ======================================================================
# ITEM DATA KEYS
# ======================================================================

# QGraphicsItem.setData() keys for guide/lock marking
ITEM_DATA_GUIDE = 0
ITEM_DATA_LOCKED = 1
