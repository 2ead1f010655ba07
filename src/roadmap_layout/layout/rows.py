"""Placement buckets and row assignment for a section's topics."""

from __future__ import annotations

__all__ = ["assign_rows", "partition_by_placement", "row_y"]

from collections.abc import Iterable

from roadmap_layout.layout.config import LayoutConfig
from roadmap_layout.parser.model import Placement, Topic


def partition_by_placement(topics: Iterable[Topic]) -> dict[Placement, list[Topic]]:
    """Split topics into Center/Left/Right buckets, keeping iteration order."""
    buckets: dict[Placement, list[Topic]] = {p: [] for p in Placement}
    for topic in topics:
        buckets[topic.placement].append(topic)
    return buckets


def assign_rows(topics: Iterable[Topic]) -> dict[int, list[Topic]]:
    """Group topics into rows, returned in ascending row order.

    Topics with an explicit ``row`` go to that row. The others take the
    next value of an auto counter, which starts at 0 and only advances for
    auto-assigned topics, so an auto topic may share a row with an
    explicit one.
    """
    groups: dict[int, list[Topic]] = {}
    auto_row = 0
    for topic in topics:
        if topic.row is not None:
            row = topic.row
        else:
            row = auto_row
            auto_row += 1
        groups.setdefault(row, []).append(topic)
    return {row: groups[row] for row in sorted(groups)}


def row_y(start_y: float, row: int, config: LayoutConfig) -> float:
    """Top y of a row band within a section starting at ``start_y``."""
    return start_y + row * (config.node_height + config.node_spacing_y)
