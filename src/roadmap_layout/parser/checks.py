"""Consistency checks for roadmap definitions.

Layout tolerates broken references by skipping them, so these checks are
where data problems surface: the CLI ``validate`` command and the test suite
run them over the shipped roadmaps.
"""

from __future__ import annotations

__all__ = ["Issue", "Severity", "check_roadmap", "has_errors"]

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum

import networkx as nx

from roadmap_layout.parser.model import Roadmap


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class Issue:
    check: str
    severity: Severity
    message: str
    context: dict = field(default_factory=dict)


def check_roadmap(roadmap: Roadmap) -> list[Issue]:
    """Run all consistency checks and return the issues found."""
    issues: list[Issue] = []
    issues.extend(check_duplicate_ids(roadmap))
    issues.extend(check_topic_sections(roadmap))
    issues.extend(check_dependency_refs(roadmap))
    issues.extend(check_cycles(roadmap))
    issues.extend(check_empty_sections(roadmap))
    return issues


def has_errors(issues: list[Issue]) -> bool:
    return any(i.severity == Severity.ERROR for i in issues)


def check_duplicate_ids(roadmap: Roadmap) -> list[Issue]:
    """Section ids and topic ids must each be unique."""
    issues: list[Issue] = []
    for kind, ids in (
        ("section", [s.id for s in roadmap.sections]),
        ("topic", [t.id for t in roadmap.topics]),
    ):
        for dup, count in Counter(ids).items():
            if count > 1:
                issues.append(
                    Issue(
                        check=f"duplicate_{kind}_id",
                        severity=Severity.ERROR,
                        message=f"{kind.capitalize()} id '{dup}' is defined {count} times",
                        context={"id": dup},
                    )
                )
    return issues


def check_topic_sections(roadmap: Roadmap) -> list[Issue]:
    """Every topic must reference an existing section."""
    section_ids = {s.id for s in roadmap.sections}
    return [
        Issue(
            check="unknown_section",
            severity=Severity.ERROR,
            message=f"Topic '{t.id}' references unknown section '{t.section_id}'",
            context={"topic": t.id, "section": t.section_id},
        )
        for t in roadmap.topics
        if t.section_id not in section_ids
    ]


def check_dependency_refs(roadmap: Roadmap) -> list[Issue]:
    """Dependencies must connect two existing, distinct topics."""
    topic_ids = {t.id for t in roadmap.topics}
    issues: list[Issue] = []
    for dep in roadmap.dependencies:
        for end in (dep.source, dep.target):
            if end not in topic_ids:
                issues.append(
                    Issue(
                        check="dangling_dependency",
                        severity=Severity.ERROR,
                        message=(
                            f"Dependency {dep.source} -> {dep.target} "
                            f"references unknown topic '{end}'"
                        ),
                        context={"source": dep.source, "target": dep.target},
                    )
                )
        if dep.source == dep.target:
            issues.append(
                Issue(
                    check="self_dependency",
                    severity=Severity.WARNING,
                    message=f"Topic '{dep.source}' depends on itself",
                    context={"topic": dep.source},
                )
            )
    return issues


def check_cycles(roadmap: Roadmap) -> list[Issue]:
    """Report dependency cycles (self loops are reported separately)."""
    G = nx.DiGraph()
    G.add_edges_from(
        (d.source, d.target) for d in roadmap.dependencies if d.source != d.target
    )
    issues: list[Issue] = []
    for component in nx.strongly_connected_components(G):
        if len(component) < 2:
            continue
        members = sorted(component)
        issues.append(
            Issue(
                check="dependency_cycle",
                severity=Severity.ERROR,
                message="Dependency cycle between: " + ", ".join(members),
                context={"topics": members},
            )
        )
    return issues


def check_empty_sections(roadmap: Roadmap) -> list[Issue]:
    """Sections without topics are skipped by layout; flag them."""
    used = {t.section_id for t in roadmap.topics}
    return [
        Issue(
            check="empty_section",
            severity=Severity.WARNING,
            message=f"Section '{s.id}' has no topics and will not be drawn",
            context={"section": s.id},
        )
        for s in roadmap.sections
        if s.id not in used
    ]
