"""SVG generation for roadmap diagrams using drawsvg."""

from __future__ import annotations

from collections.abc import Sequence

import drawsvg as draw

from roadmap_layout.layout.config import LayoutConfig
from roadmap_layout.layout.routing import RoutedPath
from roadmap_layout.parser.model import LayoutResult, Roadmap, Topic
from roadmap_layout.render.constants import (
    ARROW_HALF_HEIGHT,
    ARROW_MAX_X,
    ARROW_MIN_X,
    ARROW_SCALE,
    SECTION_LABEL_GAP,
    TITLE_X_INSET,
    TITLE_Y,
)
from roadmap_layout.render.style import Theme, node_classes, node_colors


def render_svg(
    roadmap: Roadmap,
    layout: LayoutResult,
    routes: Sequence[RoutedPath],
    theme: Theme,
    config: LayoutConfig | None = None,
    highlight: str | None = None,
) -> str:
    """Render a laid-out roadmap to an SVG string.

    ``highlight`` is a search term; topics whose title contains it
    (case-insensitively) are drawn with the theme's highlight stroke.
    """
    config = config or LayoutConfig()
    if not layout.topics:
        return '<svg xmlns="http://www.w3.org/2000/svg"></svg>'

    d = draw.Drawing(
        layout.total_width,
        layout.total_height,
        origin=(layout.min_x, 0),
        class_="roadmap-diagram",
    )

    # Background
    d.append(draw.Rectangle(
        layout.min_x, 0, layout.total_width, layout.total_height,
        fill=theme.background_color,
    ))

    if roadmap.title:
        d.append(draw.Text(
            roadmap.title,
            theme.title_font_size,
            layout.min_x + TITLE_X_INSET, TITLE_Y,
            fill=theme.title_color,
            font_family=theme.label_font_family,
            font_weight="bold",
        ))

    # Edges behind everything else
    _render_edges(d, routes, theme)
    _render_section_headers(d, roadmap, layout, theme)
    _render_nodes(d, roadmap, layout, theme, config, highlight)

    return d.as_svg()


def topic_matches(topic: Topic, term: str | None) -> bool:
    """Case-insensitive substring search over a topic title."""
    if not term:
        return False
    return term.strip().lower() in topic.title.lower()


def arrowhead_marker(theme: Theme) -> draw.Marker:
    """The shared arrowhead; drawsvg emits it once in <defs>."""
    marker = draw.Marker(
        ARROW_MIN_X, -ARROW_HALF_HEIGHT, ARROW_MAX_X, ARROW_HALF_HEIGHT,
        scale=ARROW_SCALE,
        orient="auto",
        id="arrowhead",
    )
    marker.append(draw.Lines(
        ARROW_MIN_X, -ARROW_HALF_HEIGHT,
        ARROW_MAX_X, 0,
        ARROW_MIN_X, ARROW_HALF_HEIGHT,
        close=True,
        fill=theme.edge_color,
        class_="arrowhead-fill",
    ))
    return marker


def _render_edges(
    d: draw.Drawing,
    routes: Sequence[RoutedPath],
    theme: Theme,
) -> None:
    """Render routed dependency edges, dashed when cross-section."""
    marker = arrowhead_marker(theme)
    layer = draw.Group(class_="edges-layer")

    for route in routes:
        extra = {}
        if route.is_cross_section:
            extra["stroke_dasharray"] = theme.cross_section_dasharray
        path = draw.Path(
            stroke=theme.edge_color,
            stroke_width=theme.edge_width,
            fill="none",
            marker_end=marker,
            class_=(
                "roadmap-edge edge-cross-section"
                if route.is_cross_section
                else "roadmap-edge"
            ),
            data_from=route.source,
            data_to=route.target,
            **extra,
        )
        path.M(*route.points[0])
        for point in route.points[1:]:
            path.L(*point)
        layer.append(path)

    d.append(layer)


def _render_section_headers(
    d: draw.Drawing,
    roadmap: Roadmap,
    layout: LayoutResult,
    theme: Theme,
) -> None:
    """Render section titles just above each section's first row."""
    layer = draw.Group(class_="sections-layer")
    for pos in layout.sections:
        section = roadmap.section(pos.section_id)
        if section is None or not section.title:
            continue
        layer.append(draw.Text(
            section.title,
            theme.section_label_font_size,
            pos.x, pos.y - SECTION_LABEL_GAP,
            fill=theme.section_label_color,
            font_family=theme.label_font_family,
            font_weight="bold",
            class_="section-header",
            data_section_id=section.id,
        ))
    d.append(layer)


def _render_nodes(
    d: draw.Drawing,
    roadmap: Roadmap,
    layout: LayoutResult,
    theme: Theme,
    config: LayoutConfig,
    highlight: str | None,
) -> None:
    """Render topic boxes with centred labels on top of the edges."""
    layer = draw.Group(class_="nodes-layer")
    for pos in layout.topics:
        topic = roadmap.topic(pos.topic_id)
        if topic is None:
            continue

        highlighted = topic_matches(topic, highlight)
        fill, stroke, weight = node_colors(theme, topic.topic_type)
        if highlighted:
            stroke = theme.highlight_stroke

        group = draw.Group(
            class_=node_classes(topic.topic_type, topic.level, highlighted),
            data_topic_id=topic.id,
            style="cursor: pointer;",
        )
        group.append(draw.Rectangle(
            pos.x, pos.y, pos.width, config.node_height,
            rx=theme.node_corner_radius, ry=theme.node_corner_radius,
            fill=fill,
            stroke=stroke,
            stroke_width=(
                theme.highlight_stroke_width if highlighted else theme.node_stroke_width
            ),
            class_="node-rect",
        ))
        group.append(draw.Text(
            topic.title,
            theme.label_font_size,
            pos.x + pos.width / 2, pos.y + config.node_height / 2,
            fill=theme.label_color,
            font_family=theme.label_font_family,
            font_weight=weight,
            text_anchor="middle",
            dominant_baseline="central",
            class_="node-text",
        ))
        layer.append(group)
    d.append(layer)
