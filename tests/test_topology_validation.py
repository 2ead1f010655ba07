"""Parametrized topology stress tests for the layout engine.

Loads diverse .json fixtures, runs layout and routing under each placement
model, and validates programmatically for layout defects. Also includes
topology-specific assertions.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from layout_validator import (
    Severity,
    check_bounds_containment,
    check_route_shapes,
    check_row_overlap,
    check_section_headers,
    check_topological_respect,
    check_totality,
    validate_layout,
)

from roadmap_layout.layout import LayoutConfig, layout_roadmap, route_edges
from roadmap_layout.parser import load_roadmap_file
from roadmap_layout.parser.checks import check_roadmap
from roadmap_layout.parser.model import LayoutResult, TopicPosition

TOPOLOGIES_DIR = Path(__file__).parent / "fixtures" / "topologies"
EXAMPLES_DIR = Path(__file__).parent.parent / "examples"

# Collect all topology fixtures, plus the shipped examples as regression guard
TOPOLOGY_FILES = sorted(TOPOLOGIES_DIR.glob("*.json")) + sorted(
    EXAMPLES_DIR.glob("*.json")
)
TOPOLOGY_IDS = [f.stem for f in TOPOLOGY_FILES]

CONFIGS = {
    "spine": LayoutConfig(),
    "spine-dynamic": LayoutConfig(dynamic_width=True),
    "columns": LayoutConfig(variant="columns"),
    "columns-dynamic": LayoutConfig(variant="columns", dynamic_width=True),
}


def _load_and_layout(path: Path, config: LayoutConfig):
    """Load a .json file, run layout and routing."""
    roadmap = load_roadmap_file(path)
    layout = layout_roadmap(roadmap, config)
    routes = route_edges(layout, roadmap.topics, roadmap.dependencies, config)
    return roadmap, layout, routes


@pytest.fixture(params=TOPOLOGY_FILES, ids=TOPOLOGY_IDS)
def topology_path(request):
    return request.param


@pytest.fixture(params=list(CONFIGS), ids=list(CONFIGS))
def config(request):
    return CONFIGS[request.param]


@pytest.fixture
def laid_out(topology_path, config):
    """Load and lay out each topology fixture under each configuration."""
    return _load_and_layout(topology_path, config)


def _errors(violations):
    return [v for v in violations if v.severity == Severity.ERROR]


class TestTopologyValidation:
    """Run all validator checks against every topology."""

    def test_totality(self, laid_out):
        roadmap, layout, _ = laid_out
        errors = _errors(check_totality(roadmap, layout))
        assert not errors, "\n".join(v.message for v in errors)

    def test_no_row_overlap(self, laid_out):
        _, layout, _ = laid_out
        errors = _errors(check_row_overlap(layout))
        assert not errors, "\n".join(v.message for v in errors)

    def test_topological_respect(self, laid_out, config):
        roadmap, layout, _ = laid_out
        errors = _errors(check_topological_respect(roadmap, layout, config))
        assert not errors, "\n".join(v.message for v in errors)

    def test_bounds_containment(self, laid_out, config):
        _, layout, _ = laid_out
        errors = _errors(check_bounds_containment(layout, config))
        assert not errors, "\n".join(v.message for v in errors)

    def test_section_headers(self, laid_out):
        roadmap, layout, _ = laid_out
        errors = _errors(check_section_headers(roadmap, layout))
        assert not errors, "\n".join(v.message for v in errors)

    def test_route_shapes(self, laid_out, config):
        _, layout, routes = laid_out
        errors = _errors(check_route_shapes(layout, routes, config))
        assert not errors, "\n".join(v.message for v in errors)

    def test_deterministic(self, topology_path, config):
        first = _load_and_layout(topology_path, config)
        second = _load_and_layout(topology_path, config)
        assert first[1] == second[1]
        assert first[2] == second[2]


# --- Topology-specific assertions ---


def test_cyclic_fixture_still_places_everything():
    roadmap, layout, routes = _load_and_layout(
        TOPOLOGIES_DIR / "cyclic.json", LayoutConfig()
    )
    assert not validate_layout(roadmap, layout, LayoutConfig(), routes)
    assert len(layout.topics) == len(roadmap.topics)
    checks = {i.check for i in check_roadmap(roadmap)}
    assert "dependency_cycle" in checks


def test_cyclic_fixture_acyclic_part_ordered_first():
    _, layout, _ = _load_and_layout(TOPOLOGIES_DIR / "cyclic.json", LayoutConfig())
    ys = {p.topic_id: p.y for p in layout.topics}
    # a is resolved; the b/c cycle is appended after it in input order.
    assert ys["a"] < ys["b"] < ys["c"]


def test_dangling_fixture_drops_broken_edges():
    roadmap, layout, routes = _load_and_layout(
        TOPOLOGIES_DIR / "dangling.json", LayoutConfig()
    )
    assert layout.topic_position("orphan") is None
    assert layout.section_position("empty") is None
    assert {(r.source, r.target) for r in routes} == {("a", "b"), ("a", "c")}
    checks = {i.check for i in check_roadmap(roadmap)}
    assert {
        "dangling_dependency",
        "unknown_section",
        "self_dependency",
        "empty_section",
    } <= checks


def test_wide_branches_extend_canvas_left():
    _, layout, _ = _load_and_layout(
        TOPOLOGIES_DIR / "wide_branches.json", LayoutConfig(dynamic_width=True)
    )
    assert layout.min_x < 0
    config = LayoutConfig()
    assert layout.total_width >= 2 * (config.center_x - layout.min_x)


def test_columns_fixture_full_sections_below_columns():
    config = LayoutConfig(variant="columns")
    roadmap, layout, _ = _load_and_layout(TOPOLOGIES_DIR / "columns.json", config)
    narrow_bottom = max(
        p.y + config.node_height
        for p in layout.topics
        if p.section_id not in ("shared", "capstone")
    )
    shared = layout.section_position("shared")
    capstone = layout.section_position("capstone")
    assert shared.y == narrow_bottom + config.section_spacing
    assert capstone.y > shared.y
    # Four shared topics wrap into two rows of at most three
    shared_rows = {p.y for p in layout.topics if p.section_id == "shared"}
    assert len(shared_rows) == 2


def test_crowded_rows_fixture_keeps_branches_clear_of_spine_group():
    config = LayoutConfig(dynamic_width=True)
    _, layout, _ = _load_and_layout(TOPOLOGIES_DIR / "crowded_rows.json", config)
    pos = {p.topic_id: p for p in layout.topics}
    for group, left, right in (
        (("c1", "c2"), "l2", "r2"),
        (("wide",), "wide_l", "wide_r"),
    ):
        group_left = min(pos[t].x for t in group)
        group_right = max(pos[t].x + pos[t].width for t in group)
        assert pos[left].x + pos[left].width <= group_left - config.grid_col_spacing
        assert pos[right].x >= group_right + config.grid_col_spacing


def test_row_overlap_check_spans_placements():
    layout = LayoutResult(
        sections=[],
        topics=[
            TopicPosition("wide", "s", 300.0, 50.0, 600.0),
            TopicPosition("branch", "s", 780.0, 50.0, 220.0),
        ],
        min_x=0,
        total_width=1200,
        total_height=200,
    )
    assert [v.check for v in check_row_overlap(layout)] == ["row_overlap"]
