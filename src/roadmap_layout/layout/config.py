"""Layout configuration value object."""

from __future__ import annotations

from dataclasses import dataclass

from roadmap_layout.layout.constants import (
    BASE_PADDING,
    BOTTOM_MARGIN,
    CENTER_X,
    CHAR_WIDTH,
    COL_SPACING,
    COLUMN_CENTER_X,
    COLUMN_LEFT_X,
    COLUMN_RIGHT_X,
    EDGE_MIN_BEND,
    EDGE_TARGET_OFFSET,
    GRID_COL_SPACING,
    MARGIN,
    MIN_WIDTH,
    NODE_HEIGHT,
    NODE_SPACING_X,
    NODE_SPACING_Y,
    NODE_WIDTH,
    SECTION_SPACING,
    TOP_MARGIN,
    TOPICS_PER_ROW,
)
from roadmap_layout.parser.model import Column

VARIANTS = ("spine", "columns")


DEFAULT_COLUMN_OFFSETS: tuple[tuple[Column, float], ...] = (
    (Column.LEFT, COLUMN_LEFT_X),
    (Column.CENTER, COLUMN_CENTER_X),
    (Column.RIGHT, COLUMN_RIGHT_X),
)


@dataclass(frozen=True)
class LayoutConfig:
    """Options for compute_layout.

    ``variant`` selects the placement model: ``"spine"`` lays each section
    out around a central axis with left/right branches, ``"columns"``
    stacks whole sections in fixed columns.
    """

    variant: str = "spine"
    node_width: float = NODE_WIDTH
    node_height: float = NODE_HEIGHT
    center_x: float = CENTER_X
    col_spacing: float = COL_SPACING
    node_spacing_x: float = NODE_SPACING_X
    node_spacing_y: float = NODE_SPACING_Y
    section_spacing: float = SECTION_SPACING
    margin: float = MARGIN
    top_margin: float = TOP_MARGIN
    bottom_margin: float = BOTTOM_MARGIN
    grid_col_spacing: float = GRID_COL_SPACING
    topics_per_row: int = TOPICS_PER_ROW
    # Dynamic width estimation from title length
    dynamic_width: bool = False
    char_width: float = CHAR_WIDTH
    base_padding: float = BASE_PADDING
    min_width: float = MIN_WIDTH
    # Column layout anchors (left edge of each narrow column), as
    # (column, x) pairs so the config stays hashable
    column_x_offsets: tuple[tuple[Column, float], ...] = DEFAULT_COLUMN_OFFSETS
    # Edge routing
    edge_target_offset: float = EDGE_TARGET_OFFSET
    edge_min_bend: float = EDGE_MIN_BEND

    def validate(self) -> None:
        """Raise ValueError if the configuration cannot produce a layout."""
        if self.variant not in VARIANTS:
            raise ValueError(
                f"Unknown layout variant '{self.variant}' "
                f"(expected one of: {', '.join(VARIANTS)})"
            )
        if self.node_width <= 0 or self.node_height <= 0:
            raise ValueError("node_width and node_height must be positive")
        if self.min_width <= 0 or self.char_width < 0 or self.base_padding < 0:
            raise ValueError("width estimation constants must be non-negative")
        spacings = {
            "col_spacing": self.col_spacing,
            "node_spacing_x": self.node_spacing_x,
            "node_spacing_y": self.node_spacing_y,
            "section_spacing": self.section_spacing,
            "grid_col_spacing": self.grid_col_spacing,
            "margin": self.margin,
            "top_margin": self.top_margin,
            "bottom_margin": self.bottom_margin,
        }
        for name, value in spacings.items():
            if value < 0:
                raise ValueError(f"{name} must not be negative (got {value})")
        if self.topics_per_row < 1:
            raise ValueError("topics_per_row must be at least 1")
        missing = [
            c.value
            for c in (Column.LEFT, Column.CENTER, Column.RIGHT)
            if c not in dict(self.column_x_offsets)
        ]
        if missing:
            raise ValueError(f"column_x_offsets is missing: {', '.join(missing)}")

    def column_x(self, column: Column) -> float:
        """Left edge of a narrow column in the column layout."""
        return dict(self.column_x_offsets)[column]
