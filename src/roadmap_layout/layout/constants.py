"""Layout constants used across layout modules.

These are the defaults behind LayoutConfig; pass a config to override them.
"""

# ---------------------------------------------------------------------------
# Node geometry
# ---------------------------------------------------------------------------
NODE_WIDTH: float = 220.0
"""Fixed topic box width (used unless dynamic width is enabled)."""

NODE_HEIGHT: float = 60.0
"""Topic box height, shared by every topic."""

# ---------------------------------------------------------------------------
# Font / text metrics (dynamic width)
# ---------------------------------------------------------------------------
CHAR_WIDTH: float = 11.0
"""Approximate pixel width of a single title character."""

BASE_PADDING: float = 40.0
"""Horizontal padding added to the title width."""

MIN_WIDTH: float = 140.0
"""Smallest box width produced by width estimation."""

# ---------------------------------------------------------------------------
# Spine layout
# ---------------------------------------------------------------------------
CENTER_X: float = 600.0
"""X coordinate of the central spine axis."""

COL_SPACING: float = 180.0
"""Distance from the spine axis to the inner edge of the branch columns."""

GRID_COL_SPACING: float = 20.0
"""Horizontal gap between neighbouring topics in a branch row."""

NODE_SPACING_X: float = 20.0
"""Horizontal gap between topics in a column-layout row."""

NODE_SPACING_Y: float = 40.0
"""Vertical gap between rows."""

SECTION_SPACING: float = 80.0
"""Vertical gap between consecutive sections."""

TOPICS_PER_ROW: int = 3
"""Grid width for full-width sections in the column layout."""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
MARGIN: float = 50.0
"""Horizontal margin added beyond the rightmost box."""

TOP_MARGIN: float = 50.0
"""Initial vertical cursor."""

BOTTOM_MARGIN: float = 100.0
"""Space added below the last section."""

# ---------------------------------------------------------------------------
# Column layout
# ---------------------------------------------------------------------------
COLUMN_LEFT_X: float = 50.0
"""Left edge of the left column."""

COLUMN_CENTER_X: float = 490.0
"""Left edge of the center column."""

COLUMN_RIGHT_X: float = 930.0
"""Left edge of the right column."""

# ---------------------------------------------------------------------------
# Routing
# ---------------------------------------------------------------------------
COORD_TOLERANCE: float = 1.0
"""Tolerance for coordinate comparison (same row or same column)."""

EDGE_TARGET_OFFSET: float = 20.0
"""Distance above the target box at which a spine edge turns horizontal."""

EDGE_MIN_BEND: float = 10.0
"""Minimum drop below the source before a spine edge may bend."""
