"""Core edge routing: orthogonal (Manhattan) paths between topic boxes.

Every path starts exactly at the source attachment point and ends exactly
at the target's. Straight connections have 2 points; everything else gets
a 4-point path with two right-angle bends.

Routing only looks at the two boxes involved, not at the rest of the
layout, so it cannot promise to avoid unrelated boxes. The vertical case
turns just above the target rather than halfway down, which keeps long
spine edges clear of the boxes stacked between source and target.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from roadmap_layout.layout.config import LayoutConfig
from roadmap_layout.layout.constants import COORD_TOLERANCE
from roadmap_layout.layout.routing.common import (
    Connection,
    Point,
    RoutedPath,
    Side,
    attach,
)
from roadmap_layout.parser.model import (
    Dependency,
    LayoutResult,
    Placement,
    Topic,
    TopicPosition,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def route_edges(
    layout: LayoutResult,
    topics: Sequence[Topic],
    dependencies: Sequence[Dependency],
    config: LayoutConfig | None = None,
) -> list[RoutedPath]:
    """Route every dependency whose endpoints were both laid out.

    Dangling dependencies (unknown or unplaced topics) and self loops are
    dropped.
    """
    config = config or LayoutConfig()
    topic_by_id = {t.id: t for t in topics}
    pos_by_id = {p.topic_id: p for p in layout.topics}
    routes: list[RoutedPath] = []

    for dep in dependencies:
        src_pos = pos_by_id.get(dep.source)
        tgt_pos = pos_by_id.get(dep.target)
        src = topic_by_id.get(dep.source)
        tgt = topic_by_id.get(dep.target)
        if not (src_pos and tgt_pos and src and tgt):
            logger.debug("Skipping dangling dependency %s -> %s", dep.source, dep.target)
            continue
        if dep.source == dep.target:
            logger.debug("Skipping self dependency on '%s'", dep.source)
            continue

        points = route(src_pos, tgt_pos, src.placement, tgt.placement, config)
        routes.append(
            RoutedPath(
                source=dep.source,
                target=dep.target,
                points=points,
                is_cross_section=is_cross_section(src, tgt),
            )
        )

    return routes


def route(
    src: TopicPosition,
    tgt: TopicPosition,
    src_placement: Placement,
    tgt_placement: Placement,
    config: LayoutConfig | None = None,
) -> list[Point]:
    """Synthesize the orthogonal path between two placed topics."""
    config = config or LayoutConfig()
    conn = connection_points(src, tgt, src_placement, tgt_placement, config)
    if conn.is_vertical:
        return _vertical_path(conn, config)
    return _side_path(conn)


def connection_points(
    src: TopicPosition,
    tgt: TopicPosition,
    src_placement: Placement,
    tgt_placement: Placement,
    config: LayoutConfig,
) -> Connection:
    """Choose exit/entry sides from the relative position of two boxes.

    Priority: same column (straight vertical), same row (straight
    horizontal), branch connections involving a Left/Right topic (facing
    side edges), then the spine default of bottom edge to top edge.
    """
    src_cx = src.x + src.width / 2.0
    tgt_cx = tgt.x + tgt.width / 2.0
    same_row = abs(src.y - tgt.y) < COORD_TOLERANCE
    same_column = abs(src_cx - tgt_cx) < COORD_TOLERANCE

    if same_column and not same_row:
        if tgt.y >= src.y:
            return attach(src, tgt, Side.BOTTOM, Side.TOP, config)
        return attach(src, tgt, Side.TOP, Side.BOTTOM, config)

    is_branch = src_placement != Placement.CENTER or tgt_placement != Placement.CENTER
    if same_row or is_branch:
        if tgt_cx >= src_cx:
            return attach(src, tgt, Side.RIGHT, Side.LEFT, config)
        return attach(src, tgt, Side.LEFT, Side.RIGHT, config)

    return attach(src, tgt, Side.BOTTOM, Side.TOP, config)


def is_cross_section(src: Topic, tgt: Topic) -> bool:
    """Edges between sections or between topic types are drawn dashed."""
    return src.section_id != tgt.section_id or src.topic_type != tgt.topic_type


# ---------------------------------------------------------------------------
# Path shapes
# ---------------------------------------------------------------------------


def _vertical_path(conn: Connection, config: LayoutConfig) -> list[Point]:
    """Down -> across -> down, turning a fixed distance above the target."""
    (x1, y1), (x2, y2) = conn.start, conn.end
    # Only an exact match is straight; a sub-tolerance offset still gets
    # a (tiny) jog so every segment stays axis-aligned.
    if x1 == x2:
        return [conn.start, conn.end]

    mid_y = y2 - config.edge_target_offset
    # Target too close to (or above) the source: bend halfway instead.
    if mid_y < y1 + config.edge_min_bend:
        mid_y = (y1 + y2) / 2.0

    return [conn.start, (x1, mid_y), (x2, mid_y), conn.end]


def _side_path(conn: Connection) -> list[Point]:
    """Across -> vertical step at the horizontal midpoint -> across."""
    (x1, y1), (x2, y2) = conn.start, conn.end
    if y1 == y2:
        return [conn.start, conn.end]

    mid_x = (x1 + x2) / 2.0
    return [conn.start, (mid_x, y1), (mid_x, y2), conn.end]
