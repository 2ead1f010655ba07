"""Topic box width estimation."""

from __future__ import annotations

from roadmap_layout.layout.config import LayoutConfig


def estimate_width(title: str, config: LayoutConfig | None = None) -> float:
    """Estimate the rendered box width of a title.

    Proportional-font heuristic: a fixed width per character plus padding,
    never below ``config.min_width``.
    """
    config = config or LayoutConfig()
    est = len(title) * config.char_width + config.base_padding
    return max(config.min_width, est)


def topic_width(title: str, config: LayoutConfig) -> float:
    """Box width for a topic: estimated in dynamic mode, else fixed."""
    if config.dynamic_width:
        return estimate_width(title, config)
    return config.node_width
