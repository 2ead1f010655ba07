"""Canvas extent from computed topic positions."""

from __future__ import annotations

__all__ = ["compute_bounds"]

from collections.abc import Sequence

from roadmap_layout.layout.config import LayoutConfig
from roadmap_layout.parser.model import TopicPosition


def compute_bounds(
    topics: Sequence[TopicPosition],
    config: LayoutConfig,
    content_bottom: float,
) -> tuple[float, float, float]:
    """Return ``(min_x, total_width, total_height)`` for the canvas.

    The canvas spans ``[min_x, min_x + total_width]`` horizontally, with
    ``min_x`` clamped to at most 0. Its width is the widest of:

    - the symmetric width ``2 * center_x``;
    - everything from ``min_x`` to the rightmost box plus ``margin``;
    - for a left overflow, the symmetric width grown by the overflow on
      both sides, which keeps the spine in the middle of the canvas.
    """
    min_x = min((p.x for p in topics), default=0.0)
    min_x = min(min_x, 0.0)
    max_x = max((p.x + p.width for p in topics), default=0.0)
    max_x = max(max_x, 0.0)

    symmetric_width = config.center_x * 2.0
    content_width = (max_x - min_x) + config.margin
    total_width = max(symmetric_width, content_width)
    if min_x < 0.0:
        total_width = max(total_width, 2.0 * (config.center_x - min_x))

    total_height = content_bottom + config.bottom_margin
    return min_x, total_width, total_height
