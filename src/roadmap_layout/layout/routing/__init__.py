"""Edge routing subpackage for roadmap layout.

Public API:
- route_edges: Route every dependency of a laid-out roadmap
- route: Orthogonal path between two placed topics
- connection_points: Exit/entry side selection
- is_cross_section: Dashed-edge predicate
- RoutedPath: Routed path dataclass
"""

from roadmap_layout.layout.routing.common import Connection, RoutedPath, Side
from roadmap_layout.layout.routing.core import (
    connection_points,
    is_cross_section,
    route,
    route_edges,
)

__all__ = [
    "Connection",
    "RoutedPath",
    "Side",
    "connection_points",
    "is_cross_section",
    "route",
    "route_edges",
]
