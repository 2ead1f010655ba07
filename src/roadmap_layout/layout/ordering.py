"""Topological ordering of topics within a section.

Kahn's algorithm with ties broken by original input index, so the output
is stable: with no dependencies it is exactly the input order, and among
nodes that become ready together the one defined first comes first.
"""

from __future__ import annotations

__all__ = ["sort_topics"]

import heapq
import logging
from collections.abc import Iterable, Sequence

import networkx as nx

from roadmap_layout.parser.model import Dependency, Topic

logger = logging.getLogger(__name__)


def sort_topics(
    topics: Sequence[Topic],
    dependencies: Iterable[Dependency],
) -> list[Topic]:
    """Order topics so every dependency source precedes its target.

    Only dependencies with both endpoints in ``topics`` are considered.
    Topics caught in a cycle are appended after the resolvable prefix in
    their input order; no error is raised.
    """
    index = {t.id: i for i, t in enumerate(topics)}

    G = nx.DiGraph()
    G.add_nodes_from(range(len(topics)))
    for dep in dependencies:
        src = index.get(dep.source)
        tgt = index.get(dep.target)
        if src is None or tgt is None or src == tgt:
            continue
        G.add_edge(src, tgt)

    if G.number_of_edges() == 0:
        return list(topics)

    in_degree = {n: d for n, d in G.in_degree()}
    ready = [n for n in G.nodes if in_degree[n] == 0]
    heapq.heapify(ready)

    order: list[int] = []
    while ready:
        node = heapq.heappop(ready)
        order.append(node)
        for succ in G.successors(node):
            in_degree[succ] -= 1
            if in_degree[succ] == 0:
                heapq.heappush(ready, succ)

    if len(order) < len(topics):
        placed = set(order)
        leftover = [n for n in range(len(topics)) if n not in placed]
        logger.debug(
            "Dependency cycle: appending %d unresolved topics in input order: %s",
            len(leftover),
            ", ".join(topics[n].id for n in leftover),
        )
        order.extend(leftover)

    return [topics[n] for n in order]
