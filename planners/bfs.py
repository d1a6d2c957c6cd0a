#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Breadth-First Search planner (unweighted shortest hops).
- Works on Grid (4-connected) and WaypointGraph sources.
- Nodes are marked visited when enqueued, so nothing is queued twice.
- `visited` in the result lists nodes in dequeue order, goal included.
"""

from __future__ import annotations
from typing import Hashable

from .frontier import FIFOQueue
from .reconstruct import reconstruct_path
from .state import SearchResult, begin_search, trivial_result


class BFSPlanner:
    name = "bfs"

    def plan(self, source, start: Hashable, goal: Hashable, heuristic=None) -> SearchResult:
        start, goal, state = begin_search(source, start, goal)
        if start == goal:
            return trivial_result(start, state)

        visited_order = []
        queue = FIFOQueue([start])
        state.mark(start)
        state.distance[start] = 0.0

        while queue:
            node = queue.pop()
            visited_order.append(node)
            if node == goal:
                path = reconstruct_path(state.previous, start, goal)
                return SearchResult(visited_order, path, state)
            for nbr, _ in source.neighbors(node):
                if nbr in state.visited:
                    continue
                state.mark(nbr, parent=node)
                state.distance[nbr] = state.distance[node] + 1
                queue.push(nbr)

        return SearchResult(visited_order, [], state)
