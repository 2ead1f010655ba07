"""Data model for roadmap graphs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Placement(Enum):
    """Horizontal placement of a topic relative to the central spine."""

    CENTER = "center"
    LEFT = "left"
    RIGHT = "right"


class Column(Enum):
    """Horizontal band a section occupies in the column layout."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    FULL = "full"


class Level(Enum):
    """Difficulty level for a topic."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class TopicType(Enum):
    """Visual type of the topic box."""

    MAIN = "main"
    SUB = "sub"


@dataclass(frozen=True)
class Section:
    """A named group of topics (one spine phase)."""

    id: str
    title: str = ""
    order: int = 0
    column: Column = Column.CENTER


@dataclass(frozen=True)
class Topic:
    """A single node in the roadmap."""

    id: str
    title: str
    section_id: str
    level: Level = Level.BEGINNER
    topic_type: TopicType = TopicType.SUB
    placement: Placement = Placement.CENTER
    # None means auto-assign sequentially within the placement bucket
    row: int | None = None


@dataclass(frozen=True)
class Dependency:
    """A directed prerequisite edge between two topics."""

    source: str
    target: str


@dataclass(frozen=True)
class Roadmap:
    """Complete roadmap definition, loaded once and read many times."""

    title: str = ""
    sections: tuple[Section, ...] = ()
    topics: tuple[Topic, ...] = ()
    dependencies: tuple[Dependency, ...] = ()

    def section(self, section_id: str) -> Section | None:
        for section in self.sections:
            if section.id == section_id:
                return section
        return None

    def topic(self, topic_id: str) -> Topic | None:
        for topic in self.topics:
            if topic.id == topic_id:
                return topic
        return None

    def section_topics(self, section_id: str) -> list[Topic]:
        """Return the topics of a section, in definition order."""
        return [t for t in self.topics if t.section_id == section_id]


# ---------------------------------------------------------------------------
# Derived layout output (populated by the layout engine)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TopicPosition:
    """Top-left corner and width of a topic box. Height is shared config."""

    topic_id: str
    section_id: str
    x: float
    y: float
    width: float


@dataclass(frozen=True)
class SectionPosition:
    """Placement of a section header."""

    section_id: str
    x: float
    y: float
    width: float


@dataclass
class LayoutResult:
    """All computed positions plus the overall canvas extent."""

    sections: list[SectionPosition] = field(default_factory=list)
    topics: list[TopicPosition] = field(default_factory=list)
    min_x: float = 0.0
    total_width: float = 0.0
    total_height: float = 0.0

    def topic_position(self, topic_id: str) -> TopicPosition | None:
        for pos in self.topics:
            if pos.topic_id == topic_id:
                return pos
        return None

    def section_position(self, section_id: str) -> SectionPosition | None:
        for pos in self.sections:
            if pos.section_id == section_id:
                return pos
        return None
