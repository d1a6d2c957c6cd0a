# -*- coding: utf-8 -*-
"""
Per-run search state, kept apart from the node model.

Every planner call starts from a fresh SearchState, so visited flags,
distances and backpointers from an earlier run can never leak into the next.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Hashable, List, NamedTuple, Set
import math


@dataclass
class SearchState:
    visited: Set[Hashable] = field(default_factory=set)
    distance: Dict[Hashable, float] = field(default_factory=dict)
    previous: Dict[Hashable, Hashable] = field(default_factory=dict)

    def dist(self, key) -> float:
        return self.distance.get(key, math.inf)

    def mark(self, key, parent=None):
        """Mark `key` visited and, if given, point its backpointer at `parent`."""
        self.visited.add(key)
        if parent is not None:
            self.previous[key] = parent


class SearchResult(NamedTuple):
    """What a planner returns: unpacks as (visited, path, state)."""
    visited: List[Hashable]
    path: List[Hashable]
    state: SearchState

    @property
    def success(self) -> bool:
        return bool(self.path)


def begin_search(source, start, goal):
    """
    Validate endpoints against `source` (Grid or WaypointGraph) and hand back
    normalised keys plus a fresh state. Raises ValueError before any state
    exists.
    """
    start, goal = source.validate_endpoints(start, goal)
    return start, goal, SearchState()


def trivial_result(start, state: SearchState) -> SearchResult:
    """start == goal: one-node path, nothing else explored."""
    state.mark(start)
    state.distance[start] = 0.0
    return SearchResult(visited=[start], path=[start], state=state)
