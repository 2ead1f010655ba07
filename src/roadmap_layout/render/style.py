"""Theme and style mapping for roadmap rendering."""

from __future__ import annotations

from dataclasses import dataclass

from roadmap_layout.parser.model import Level, TopicType


@dataclass
class Theme:
    """Visual theme for a roadmap diagram."""

    name: str
    background_color: str
    main_fill: str
    main_stroke: str
    sub_fill: str
    sub_stroke: str
    node_stroke_width: float
    node_corner_radius: float
    label_color: str
    label_font_family: str
    label_font_size: float
    edge_color: str
    edge_width: float
    title_color: str
    title_font_size: float
    section_label_color: str
    section_label_font_size: float
    highlight_stroke: str
    highlight_stroke_width: float = 4.0
    cross_section_dasharray: str = "6,4"
    main_font_weight: str = "bold"
    sub_font_weight: str = "normal"


# Topic type -> CSS class. Fill/stroke come from the theme via node_colors().
TYPE_CLASSES: dict[TopicType, str] = {
    TopicType.MAIN: "type-main",
    TopicType.SUB: "type-sub",
}

LEVEL_CLASSES: dict[Level, str] = {
    Level.BEGINNER: "level-beginner",
    Level.INTERMEDIATE: "level-intermediate",
    Level.ADVANCED: "level-advanced",
}


def node_classes(topic_type: TopicType, level: Level, highlighted: bool = False) -> str:
    """Space-separated class list for a topic node group."""
    classes = ["roadmap-node", TYPE_CLASSES[topic_type], LEVEL_CLASSES[level]]
    if highlighted:
        classes.append("highlighted")
    return " ".join(classes)


def node_colors(theme: Theme, topic_type: TopicType) -> tuple[str, str, str]:
    """Return (fill, stroke, font_weight) for a topic type."""
    if topic_type == TopicType.MAIN:
        return theme.main_fill, theme.main_stroke, theme.main_font_weight
    return theme.sub_fill, theme.sub_stroke, theme.sub_font_weight
