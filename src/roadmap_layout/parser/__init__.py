"""Roadmap definition model and loaders."""

from roadmap_layout.parser.loader import load_roadmap, load_roadmap_file

__all__ = ["load_roadmap", "load_roadmap_file"]
