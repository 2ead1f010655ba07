"""Deterministic roadmap layout and edge routing."""

from roadmap_layout.layout.config import LayoutConfig
from roadmap_layout.layout.engine import compute_layout, layout_roadmap
from roadmap_layout.layout.routing import route_edges

__all__ = ["LayoutConfig", "compute_layout", "layout_roadmap", "route_edges"]
