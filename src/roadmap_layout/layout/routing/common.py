"""Shared types and helper functions for edge routing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from roadmap_layout.layout.config import LayoutConfig
from roadmap_layout.parser.model import TopicPosition

Point = tuple[float, float]


class Side(Enum):
    """Side of a topic box where an edge attaches."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class Connection:
    """Resolved attachment points for one edge."""

    start: Point
    end: Point
    start_side: Side
    end_side: Side

    @property
    def is_vertical(self) -> bool:
        return self.start_side in (Side.TOP, Side.BOTTOM)


@dataclass
class RoutedPath:
    """A routed dependency edge, as (x, y) waypoints from source to target."""

    source: str
    target: str
    points: list[Point]
    is_cross_section: bool = False


def top_edge(pos: TopicPosition, config: LayoutConfig) -> Point:
    return (pos.x + pos.width / 2.0, pos.y)


def bottom_edge(pos: TopicPosition, config: LayoutConfig) -> Point:
    return (pos.x + pos.width / 2.0, pos.y + config.node_height)


def left_edge(pos: TopicPosition, config: LayoutConfig) -> Point:
    return (pos.x, pos.y + config.node_height / 2.0)


def right_edge(pos: TopicPosition, config: LayoutConfig) -> Point:
    return (pos.x + pos.width, pos.y + config.node_height / 2.0)


EDGE_POINTS = {
    Side.TOP: top_edge,
    Side.BOTTOM: bottom_edge,
    Side.LEFT: left_edge,
    Side.RIGHT: right_edge,
}


def attach(
    src: TopicPosition,
    tgt: TopicPosition,
    start_side: Side,
    end_side: Side,
    config: LayoutConfig,
) -> Connection:
    """Build a Connection from the chosen sides of two boxes."""
    return Connection(
        start=EDGE_POINTS[start_side](src, config),
        end=EDGE_POINTS[end_side](tgt, config),
        start_side=start_side,
        end_side=end_side,
    )
