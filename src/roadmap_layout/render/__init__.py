"""SVG rendering for roadmap diagrams."""

from roadmap_layout.render.svg import render_svg

__all__ = ["render_svg"]
