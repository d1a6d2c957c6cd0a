#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Dijkstra planner for grids and waypoint graphs.
- Uniform edge relaxation, no heuristic (A* with h=0).
- Costs: 1 per grid step; Haversine kilometres on waypoint graphs.
- Stale queue entries are skipped; `visited` is the settle order.
"""

from __future__ import annotations
from typing import Hashable

from .frontier import PriorityQueue
from .reconstruct import reconstruct_path
from .state import SearchResult, begin_search, trivial_result


class DijkstraPlanner:
    name = "dijkstra"

    def plan(self, source, start: Hashable, goal: Hashable, heuristic=None) -> SearchResult:
        start, goal, state = begin_search(source, start, goal)
        if start == goal:
            return trivial_result(start, state)

        visited_order = []
        state.distance[start] = 0.0
        pq = PriorityQueue()
        pq.push(start, 0.0)

        while pq:
            d, node = pq.pop_with_priority()
            if node in state.visited:
                continue
            state.mark(node)
            visited_order.append(node)
            if node == goal:
                path = reconstruct_path(state.previous, start, goal)
                return SearchResult(visited_order, path, state)
            for nbr, w in source.neighbors(node):
                if nbr in state.visited:
                    continue
                nd = d + w
                if nd < state.dist(nbr):
                    state.distance[nbr] = nd
                    state.previous[nbr] = node
                    pq.push(nbr, nd)

        return SearchResult(visited_order, [], state)
