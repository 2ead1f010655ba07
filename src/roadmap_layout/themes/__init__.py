"""Theme definitions for roadmap diagrams."""

from roadmap_layout.themes.dark import DARK_THEME
from roadmap_layout.themes.light import LIGHT_THEME

THEMES = {
    "light": LIGHT_THEME,
    "dark": DARK_THEME,
}

__all__ = ["THEMES", "LIGHT_THEME", "DARK_THEME"]
