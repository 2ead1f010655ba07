"""Render constants used across render modules.

Theme-dependent values remain in style.py.
"""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
TITLE_X_INSET: float = 20.0
"""Horizontal inset of the diagram title from the canvas left edge."""

TITLE_Y: float = 30.0
"""Baseline of the diagram title."""

SECTION_LABEL_GAP: float = 10.0
"""Distance between a section header baseline and its first row."""

# ---------------------------------------------------------------------------
# Arrowhead marker (viewBox units, tip at x=1, reference point at origin)
# ---------------------------------------------------------------------------
ARROW_MIN_X: float = -5.0
ARROW_MAX_X: float = 1.0
ARROW_HALF_HEIGHT: float = 2.0
ARROW_SCALE: float = 1.0
