"""roadmap-layout: Deterministic roadmap diagrams rendered to SVG."""

__version__ = "0.1.0"
