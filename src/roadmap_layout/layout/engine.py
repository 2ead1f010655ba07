"""Layout coordinator: combines ordering, row assignment, sizing and bounds.

Two placement models are supported:

- spine: sections stacked top to bottom; within a section, Center topics sit
  on a vertical axis at ``center_x`` and Left/Right topics branch off it.
- columns: sections stacked in fixed Left/Center/Right columns, each with
  its own vertical cursor; Full-width sections go below the tallest column.

Both are pure functions of their inputs. Topics referencing unknown sections
and empty sections are skipped rather than reported; see parser.checks for
the consistency pass.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from roadmap_layout.layout.bounds import compute_bounds
from roadmap_layout.layout.config import LayoutConfig
from roadmap_layout.layout.ordering import sort_topics
from roadmap_layout.layout.rows import assign_rows, partition_by_placement, row_y
from roadmap_layout.layout.sizing import topic_width
from roadmap_layout.parser.model import (
    Column,
    Dependency,
    LayoutResult,
    Placement,
    Roadmap,
    Section,
    SectionPosition,
    Topic,
    TopicPosition,
)

logger = logging.getLogger(__name__)


def compute_layout(
    sections: Sequence[Section],
    topics: Sequence[Topic],
    dependencies: Sequence[Dependency],
    config: LayoutConfig | None = None,
) -> LayoutResult:
    """Compute positions for every topic and section header."""
    config = config or LayoutConfig()
    config.validate()
    if config.variant == "columns":
        return compute_column_layout(sections, topics, dependencies, config)
    return compute_spine_layout(sections, topics, dependencies, config)


def layout_roadmap(roadmap: Roadmap, config: LayoutConfig | None = None) -> LayoutResult:
    """Convenience wrapper around compute_layout for a loaded Roadmap."""
    return compute_layout(
        roadmap.sections, roadmap.topics, roadmap.dependencies, config
    )


# ---------------------------------------------------------------------------
# Spine layout
# ---------------------------------------------------------------------------


def compute_spine_layout(
    sections: Sequence[Section],
    topics: Sequence[Topic],
    dependencies: Sequence[Dependency],
    config: LayoutConfig,
) -> LayoutResult:
    """Center-spine layout with Left/Right branches per section."""
    by_section = _group_by_section(sections, topics)
    section_positions: list[SectionPosition] = []
    topic_positions: list[TopicPosition] = []

    current_y = config.top_margin

    for section in _ordered_sections(sections):
        section_topics = by_section.get(section.id)
        if not section_topics:
            continue

        placed = _layout_spine_section(
            section, section_topics, dependencies, current_y, config
        )
        topic_positions.extend(placed)
        section_positions.append(_section_header(section, placed, current_y))

        max_y_in_section = max(p.y + config.node_height for p in placed)
        current_y = max_y_in_section + config.section_spacing

    min_x, total_width, total_height = compute_bounds(
        topic_positions, config, current_y
    )
    return LayoutResult(
        sections=section_positions,
        topics=topic_positions,
        min_x=min_x,
        total_width=total_width,
        total_height=total_height,
    )


def _layout_spine_section(
    section: Section,
    section_topics: list[Topic],
    dependencies: Sequence[Dependency],
    start_y: float,
    config: LayoutConfig,
) -> list[TopicPosition]:
    """Place one section's topics around the spine, starting at ``start_y``."""
    ordered = sort_topics(section_topics, dependencies)
    buckets = partition_by_placement(ordered)
    placed: list[TopicPosition] = []
    # row -> (left, right) extent of the Center topics in that row
    center_extent: dict[int, tuple[float, float]] = {}

    # Center: one topic per row sits on the axis; several share the row
    # side by side, centred as a group.
    for row, row_topics in assign_rows(buckets[Placement.CENTER]).items():
        y = row_y(start_y, row, config)
        widths = [topic_width(t.title, config) for t in row_topics]
        span = sum(widths) + config.grid_col_spacing * (len(widths) - 1)
        x = config.center_x - span / 2.0
        center_extent[row] = (x, x + span)
        for topic, width in zip(row_topics, widths):
            placed.append(TopicPosition(topic.id, section.id, x, y, width))
            x += width + config.grid_col_spacing

    # Branches start col_spacing from the axis, or further out when the
    # Center group in the same row is wider than that.
    # Left: flow right to left, hugging the axis.
    for row, row_topics in assign_rows(buckets[Placement.LEFT]).items():
        y = row_y(start_y, row, config)
        right_edge = config.center_x - config.col_spacing
        if row in center_extent:
            right_edge = min(right_edge, center_extent[row][0] - config.grid_col_spacing)
        for topic in row_topics:
            width = topic_width(topic.title, config)
            x = right_edge - width
            placed.append(TopicPosition(topic.id, section.id, x, y, width))
            right_edge = x - config.grid_col_spacing

    # Right: flow left to right from the inner column edge.
    for row, row_topics in assign_rows(buckets[Placement.RIGHT]).items():
        y = row_y(start_y, row, config)
        x = config.center_x + config.col_spacing
        if row in center_extent:
            x = max(x, center_extent[row][1] + config.grid_col_spacing)
        for topic in row_topics:
            width = topic_width(topic.title, config)
            placed.append(TopicPosition(topic.id, section.id, x, y, width))
            x += width + config.grid_col_spacing

    return placed


# ---------------------------------------------------------------------------
# Column layout
# ---------------------------------------------------------------------------


def compute_column_layout(
    sections: Sequence[Section],
    topics: Sequence[Topic],
    dependencies: Sequence[Dependency],
    config: LayoutConfig,
) -> LayoutResult:
    """Column layout: independent Left/Center/Right cursors plus a Full band."""
    by_section = _group_by_section(sections, topics)
    section_positions: list[SectionPosition] = []
    topic_positions: list[TopicPosition] = []

    cursors = {c: config.top_margin for c in (Column.LEFT, Column.CENTER, Column.RIGHT)}
    full_sections: list[Section] = []

    for section in _ordered_sections(sections):
        section_topics = by_section.get(section.id)
        if not section_topics:
            continue
        if section.column == Column.FULL:
            full_sections.append(section)
            continue

        start_y = cursors[section.column]
        placed = _layout_column_section(
            section,
            section_topics,
            dependencies,
            config.column_x(section.column),
            start_y,
            config,
        )
        topic_positions.extend(placed)
        section_positions.append(_section_header(section, placed, start_y))
        cursors[section.column] = (
            max(p.y + config.node_height for p in placed) + config.section_spacing
        )

    current_y = max(cursors.values())
    for section in full_sections:
        placed = _layout_full_section(
            section, by_section[section.id], dependencies, current_y, config
        )
        topic_positions.extend(placed)
        section_positions.append(_section_header(section, placed, current_y))
        current_y = max(p.y + config.node_height for p in placed) + config.section_spacing

    min_x, total_width, total_height = compute_bounds(
        topic_positions, config, current_y
    )
    return LayoutResult(
        sections=section_positions,
        topics=topic_positions,
        min_x=min_x,
        total_width=total_width,
        total_height=total_height,
    )


def _layout_column_section(
    section: Section,
    section_topics: list[Topic],
    dependencies: Sequence[Dependency],
    anchor_x: float,
    start_y: float,
    config: LayoutConfig,
) -> list[TopicPosition]:
    """Stack a section's rows in one column, each row flowing rightward."""
    ordered = sort_topics(section_topics, dependencies)
    placed: list[TopicPosition] = []
    for row, row_topics in assign_rows(ordered).items():
        y = row_y(start_y, row, config)
        x = anchor_x
        for topic in row_topics:
            width = topic_width(topic.title, config)
            placed.append(TopicPosition(topic.id, section.id, x, y, width))
            x += width + config.node_spacing_x
    return placed


def _layout_full_section(
    section: Section,
    section_topics: list[Topic],
    dependencies: Sequence[Dependency],
    start_y: float,
    config: LayoutConfig,
) -> list[TopicPosition]:
    """Wrap a full-width section into rows of ``topics_per_row``, centred."""
    ordered = sort_topics(section_topics, dependencies)
    placed: list[TopicPosition] = []
    n = config.topics_per_row
    for row, start in enumerate(range(0, len(ordered), n)):
        row_topics = ordered[start:start + n]
        y = row_y(start_y, row, config)
        widths = [topic_width(t.title, config) for t in row_topics]
        span = sum(widths) + config.node_spacing_x * (len(widths) - 1)
        x = config.center_x - span / 2.0
        for topic, width in zip(row_topics, widths):
            placed.append(TopicPosition(topic.id, section.id, x, y, width))
            x += width + config.node_spacing_x
    return placed


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def _ordered_sections(sections: Iterable[Section]) -> list[Section]:
    """Sections by ascending order (stable), first definition of an id wins."""
    seen: set[str] = set()
    unique: list[Section] = []
    for section in sections:
        if section.id in seen:
            logger.debug("Skipping duplicate section '%s'", section.id)
            continue
        seen.add(section.id)
        unique.append(section)
    return sorted(unique, key=lambda s: s.order)


def _group_by_section(
    sections: Iterable[Section],
    topics: Iterable[Topic],
) -> dict[str, list[Topic]]:
    """Map section id -> its topics in input order, dropping orphans."""
    known = {s.id for s in sections}
    groups: dict[str, list[Topic]] = {}
    for topic in topics:
        if topic.section_id not in known:
            logger.debug(
                "Skipping topic '%s': unknown section '%s'",
                topic.id,
                topic.section_id,
            )
            continue
        groups.setdefault(topic.section_id, []).append(topic)
    return groups


def _section_header(
    section: Section,
    placed: Sequence[TopicPosition],
    start_y: float,
) -> SectionPosition:
    """Header spanning the horizontal extent of the section's topics."""
    left = min(p.x for p in placed)
    right = max(p.x + p.width for p in placed)
    return SectionPosition(
        section_id=section.id,
        x=left,
        y=start_y,
        width=right - left,
    )
