"""Tests for the JSON roadmap loader and consistency checks."""

import json
from pathlib import Path

import pytest

from roadmap_layout.parser import load_roadmap, load_roadmap_file
from roadmap_layout.parser.checks import Severity, check_roadmap, has_errors
from roadmap_layout.parser.model import (
    Column,
    Dependency,
    Level,
    Placement,
    Roadmap,
    Section,
    Topic,
    TopicType,
)

EXAMPLES_DIR = Path(__file__).parent.parent / "examples"


def _doc(**overrides):
    doc = {
        "title": "Demo",
        "sections": [{"id": "s1", "title": "Start", "order": 1}],
        "topics": [
            {"id": "a", "title": "Alpha", "section": "s1", "type": "main"},
            {"id": "b", "title": "Beta", "section": "s1"},
        ],
        "dependencies": [["a", "b"]],
    }
    doc.update(overrides)
    return json.dumps(doc)


# --- Loader ---


def test_load_minimal():
    roadmap = load_roadmap(_doc())
    assert roadmap.title == "Demo"
    assert roadmap.sections == (Section("s1", "Start", 1, Column.CENTER),)
    assert [t.id for t in roadmap.topics] == ["a", "b"]
    assert roadmap.dependencies == (Dependency("a", "b"),)


def test_topic_defaults():
    topic = load_roadmap(_doc()).topic("b")
    assert topic.level == Level.BEGINNER
    assert topic.topic_type == TopicType.SUB
    assert topic.placement == Placement.CENTER
    assert topic.row is None


def test_topic_all_fields():
    text = _doc(topics=[{
        "id": "x",
        "title": "X",
        "section_id": "s1",
        "level": "Advanced",
        "type": "main",
        "placement": "right",
        "row": 2,
    }])
    topic = load_roadmap(text).topic("x")
    assert topic.section_id == "s1"
    assert topic.level == Level.ADVANCED
    assert topic.topic_type == TopicType.MAIN
    assert topic.placement == Placement.RIGHT
    assert topic.row == 2


def test_dependency_object_form():
    roadmap = load_roadmap(_doc(dependencies=[{"from": "a", "to": "b"}]))
    assert roadmap.dependencies == (Dependency("a", "b"),)


def test_section_order_defaults_to_index():
    roadmap = load_roadmap(_doc(sections=[{"id": "p"}, {"id": "q"}]))
    assert [s.order for s in roadmap.sections] == [0, 1]


def test_section_column():
    roadmap = load_roadmap(_doc(sections=[{"id": "s1", "column": "full"}]))
    assert roadmap.section("s1").column == Column.FULL


def test_missing_lists_are_empty():
    roadmap = load_roadmap("{}")
    assert roadmap == Roadmap()


def test_invalid_json():
    with pytest.raises(ValueError, match="Invalid JSON at line"):
        load_roadmap("{not json")


def test_non_object_document():
    with pytest.raises(ValueError, match="must be a JSON object"):
        load_roadmap("[]")


def test_missing_topic_section():
    with pytest.raises(ValueError, match="missing required key 'section'"):
        load_roadmap(_doc(topics=[{"id": "a", "title": "A"}]))


def test_missing_section_id():
    with pytest.raises(ValueError, match="missing required key 'id'"):
        load_roadmap(_doc(sections=[{"title": "No id"}]))


def test_unknown_placement():
    text = _doc(topics=[{"id": "a", "title": "A", "section": "s1", "placement": "up"}])
    with pytest.raises(ValueError, match="unknown placement 'up'"):
        load_roadmap(text)


def test_bad_row():
    text = _doc(topics=[{"id": "a", "title": "A", "section": "s1", "row": -1}])
    with pytest.raises(ValueError, match="row must be a non-negative integer"):
        load_roadmap(text)


def test_bad_dependency_shape():
    with pytest.raises(ValueError, match="Dependency #0"):
        load_roadmap(_doc(dependencies=[["a", "b", "c"]]))


def test_load_file(tmp_path):
    path = tmp_path / "roadmap.json"
    path.write_text(_doc())
    assert load_roadmap_file(path).title == "Demo"


def test_section_topics_keeps_definition_order():
    roadmap = load_roadmap(_doc())
    assert [t.id for t in roadmap.section_topics("s1")] == ["a", "b"]
    assert roadmap.section_topics("missing") == []


# --- Consistency checks ---


def _roadmap(sections=("s",), topics=(), deps=()):
    return Roadmap(
        title="t",
        sections=tuple(Section(s, order=i) for i, s in enumerate(sections)),
        topics=tuple(Topic(tid, tid.upper(), sec) for tid, sec in topics),
        dependencies=tuple(Dependency(a, b) for a, b in deps),
    )


def _checks(issues):
    return sorted(i.check for i in issues)


def test_clean_roadmap_has_no_issues():
    roadmap = _roadmap(topics=[("a", "s"), ("b", "s")], deps=[("a", "b")])
    assert check_roadmap(roadmap) == []


def test_duplicate_ids():
    roadmap = _roadmap(sections=("s", "s"), topics=[("a", "s"), ("a", "s")])
    issues = check_roadmap(roadmap)
    assert _checks(issues) == ["duplicate_section_id", "duplicate_topic_id"]
    assert has_errors(issues)


def test_unknown_section():
    issues = check_roadmap(_roadmap(topics=[("a", "s"), ("b", "nowhere")]))
    assert _checks(issues) == ["unknown_section"]


def test_dangling_dependency():
    roadmap = _roadmap(topics=[("a", "s")], deps=[("a", "ghost")])
    issues = check_roadmap(roadmap)
    assert _checks(issues) == ["dangling_dependency"]
    assert issues[0].context == {"source": "a", "target": "ghost"}


def test_self_dependency_is_warning():
    issues = check_roadmap(_roadmap(topics=[("a", "s")], deps=[("a", "a")]))
    assert _checks(issues) == ["self_dependency"]
    assert issues[0].severity == Severity.WARNING
    assert not has_errors(issues)


def test_cycle_detected():
    roadmap = _roadmap(
        topics=[("a", "s"), ("b", "s"), ("c", "s")],
        deps=[("a", "b"), ("b", "c"), ("c", "a")],
    )
    issues = check_roadmap(roadmap)
    assert _checks(issues) == ["dependency_cycle"]
    assert issues[0].context["topics"] == ["a", "b", "c"]


def test_empty_section_warning():
    issues = check_roadmap(_roadmap(sections=("s", "empty"), topics=[("a", "s")]))
    assert _checks(issues) == ["empty_section"]
    assert issues[0].severity == Severity.WARNING


@pytest.mark.parametrize(
    "path",
    sorted(EXAMPLES_DIR.glob("*.json")),
    ids=lambda p: p.stem,
)
def test_shipped_examples_are_clean(path):
    roadmap = load_roadmap_file(path)
    assert not has_errors(check_roadmap(roadmap))
