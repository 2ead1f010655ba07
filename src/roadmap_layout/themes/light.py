"""Light theme: yellow boxes with black borders on white."""

from roadmap_layout.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="#ffffff",
    main_fill="#facc15",
    main_stroke="#000000",
    sub_fill="#fef9c3",
    sub_stroke="#000000",
    node_stroke_width=2.0,
    node_corner_radius=4.0,
    label_color="#0f172a",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=15.0,
    edge_color="#2563eb",
    edge_width=2.0,
    title_color="#111111",
    title_font_size=26.0,
    section_label_color="#475569",
    section_label_font_size=14.0,
    highlight_stroke="#dc2626",
)
