"""Dark grey theme."""

from roadmap_layout.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#1e1e1e",
    main_fill="#ca8a04",
    main_stroke="#fde68a",
    sub_fill="#3f3f46",
    sub_stroke="#a1a1aa",
    node_stroke_width=1.5,
    node_corner_radius=6.0,
    label_color="#f4f4f5",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=14.0,
    edge_color="#60a5fa",
    edge_width=2.0,
    title_color="#ffffff",
    title_font_size=24.0,
    section_label_color="#a1a1aa",
    section_label_font_size=13.0,
    highlight_stroke="#f87171",
    cross_section_dasharray="5,5",
)
