#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Bidirectional BFS planner (meet in the middle).

- Two FIFO frontiers: forward from start, backward from goal, each with its
  own visited set and backpointer map (forward -> toward start, backward ->
  toward goal).
- One round = one full BFS level of the forward frontier, then one full
  level of the backward frontier.
- The search stops the moment a frontier discovers a node the other side
  has already visited. The backward side walks incoming edges
  (`source.predecessors`), so one-way graph edges are followed in their own
  direction on both sides. With whole levels expanded per side the two visited
  sets are disjoint before that discovery, so the joined path is a shortest
  one by edge count.
- `visited` interleaves the expansion order of both sides; the meeting node
  is appended last if neither side expanded it.
"""

from __future__ import annotations
from typing import Hashable, List, Optional

from .frontier import FIFOQueue
from .reconstruct import reconstruct_bidirectional
from .state import SearchResult, SearchState, begin_search, trivial_result


class BidirectionalPlanner:
    name = "bidirectional"

    @staticmethod
    def _expand_level(step, queue: FIFOQueue, own: SearchState, other: SearchState,
                      visited_order: List[Hashable], expanded: set) -> Optional[Hashable]:
        """Expand every node currently in `queue`; return the meeting node, if any."""
        for _ in range(len(queue)):
            node = queue.pop()
            if node not in expanded:
                expanded.add(node)
                visited_order.append(node)
            for nbr, _ in step(node):
                if nbr in own.visited:
                    continue
                own.mark(nbr, parent=node)
                own.distance[nbr] = own.distance[node] + 1
                if nbr in other.visited:
                    return nbr
                queue.push(nbr)
        return None

    def plan(self, source, start: Hashable, goal: Hashable, heuristic=None) -> SearchResult:
        start, goal, forward = begin_search(source, start, goal)
        if start == goal:
            return trivial_result(start, forward)
        backward = SearchState()

        visited_order: List[Hashable] = []
        expanded: set = set()
        fq, bq = FIFOQueue([start]), FIFOQueue([goal])
        forward.mark(start)
        forward.distance[start] = 0.0
        backward.mark(goal)
        backward.distance[goal] = 0.0

        meet = None
        while fq and bq:
            meet = self._expand_level(source.neighbors, fq, forward, backward, visited_order, expanded)
            if meet is not None:
                break
            meet = self._expand_level(source.predecessors, bq, backward, forward, visited_order, expanded)
            if meet is not None:
                break

        if meet is None:
            return SearchResult(visited_order, [], self._merge(forward, backward, []))

        if meet not in expanded:
            visited_order.append(meet)
        path = reconstruct_bidirectional(forward.previous, backward.previous, meet, start, goal)
        return SearchResult(visited_order, path, self._merge(forward, backward, path))

    @staticmethod
    def _merge(forward: SearchState, backward: SearchState, path: List[Hashable]) -> SearchState:
        """
        Single start-rooted state for callers: union of both visited sets,
        forward backpointers/distances, and the goal-side half of the path
        re-pointed toward start.
        """
        merged = SearchState(visited=forward.visited | backward.visited,
                             distance=dict(forward.distance),
                             previous=dict(forward.previous))
        for i in range(1, len(path)):
            merged.previous[path[i]] = path[i - 1]
            merged.distance[path[i]] = float(i)
        return merged
