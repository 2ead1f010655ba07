"""Loader for JSON roadmap definitions.

The document holds a title plus three lists: sections, topics and
dependencies. Structural problems (bad JSON, missing keys, unknown enum
values) raise ValueError. Referential problems such as dangling dependency
ids are left for the consistency checks, since layout tolerates them.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any, TypeVar

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

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


def load_roadmap_file(path: str | Path) -> Roadmap:
    """Read and parse a roadmap definition file."""
    return load_roadmap(Path(path).read_text())


def load_roadmap(text: str) -> Roadmap:
    """Parse a JSON roadmap definition."""
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON at line {e.lineno}: {e.msg}") from e

    if not isinstance(doc, dict):
        raise ValueError("Roadmap definition must be a JSON object")

    sections = tuple(
        _parse_section(entry, i) for i, entry in enumerate(doc.get("sections", []))
    )
    topics = tuple(
        _parse_topic(entry, i) for i, entry in enumerate(doc.get("topics", []))
    )
    dependencies = tuple(
        _parse_dependency(entry, i)
        for i, entry in enumerate(doc.get("dependencies", []))
    )

    logger.debug(
        "Loaded roadmap: %d sections, %d topics, %d dependencies",
        len(sections),
        len(topics),
        len(dependencies),
    )
    return Roadmap(
        title=str(doc.get("title", "")),
        sections=sections,
        topics=topics,
        dependencies=dependencies,
    )


def _require(entry: dict[str, Any], key: str, what: str, index: int) -> Any:
    if key not in entry:
        raise ValueError(f"{what} #{index} is missing required key '{key}'")
    return entry[key]


def _enum_value(enum_cls: type[E], raw: Any, what: str) -> E:
    try:
        return enum_cls(str(raw).lower())
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValueError(
            f"{what}: unknown {enum_cls.__name__.lower()} '{raw}' "
            f"(expected one of: {allowed})"
        ) from None


def _parse_section(entry: Any, index: int) -> Section:
    if not isinstance(entry, dict):
        raise ValueError(f"Section #{index} must be an object")
    section_id = str(_require(entry, "id", "Section", index))
    what = f"Section '{section_id}'"
    try:
        order = int(entry.get("order", index))
    except (TypeError, ValueError):
        raise ValueError(f"{what}: order must be an integer") from None
    return Section(
        id=section_id,
        title=str(entry.get("title", "")),
        order=order,
        column=_enum_value(Column, entry.get("column", "center"), what),
    )


def _parse_topic(entry: Any, index: int) -> Topic:
    if not isinstance(entry, dict):
        raise ValueError(f"Topic #{index} must be an object")
    topic_id = str(_require(entry, "id", "Topic", index))
    what = f"Topic '{topic_id}'"

    if "section" in entry:
        section_id = entry["section"]
    elif "section_id" in entry:
        section_id = entry["section_id"]
    else:
        raise ValueError(f"{what} is missing required key 'section'")

    row = entry.get("row")
    if row is not None:
        if isinstance(row, bool) or not isinstance(row, int) or row < 0:
            raise ValueError(f"{what}: row must be a non-negative integer or null")

    return Topic(
        id=topic_id,
        title=str(_require(entry, "title", "Topic", index)),
        section_id=str(section_id),
        level=_enum_value(Level, entry.get("level", "beginner"), what),
        topic_type=_enum_value(TopicType, entry.get("type", "sub"), what),
        placement=_enum_value(Placement, entry.get("placement", "center"), what),
        row=row,
    )


def _parse_dependency(entry: Any, index: int) -> Dependency:
    if isinstance(entry, (list, tuple)):
        if len(entry) != 2:
            raise ValueError(f"Dependency #{index} must be a [from, to] pair")
        source, target = entry
    elif isinstance(entry, dict):
        source = _require(entry, "from", "Dependency", index)
        target = _require(entry, "to", "Dependency", index)
    else:
        raise ValueError(f"Dependency #{index} must be a pair or an object")
    return Dependency(source=str(source), target=str(target))
