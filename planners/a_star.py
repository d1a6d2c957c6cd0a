#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
A* path planner for grids and waypoint graphs.
- g = best known cost from start, f = g + h.
- Open set is a stable priority queue keyed by (f, h): equal f prefers the
  node closer to the goal, remaining ties go to the earliest push.
- Heuristic: mapping or callable supplied by the caller (see
  planners.heuristics). Without one every h is 0, A* expands like Dijkstra,
  and a RuntimeWarning says so.

Returns SearchResult(visited, path, state); path is [] when unreachable.
"""

from __future__ import annotations
from typing import Hashable

from .frontier import PriorityQueue
from .heuristics import as_heuristic_fn
from .reconstruct import reconstruct_path
from .state import SearchResult, begin_search, trivial_result


class AStarPlanner:
    name = "a_star"

    def plan(self, source, start: Hashable, goal: Hashable, heuristic=None) -> SearchResult:
        start, goal, state = begin_search(source, start, goal)
        h = as_heuristic_fn(heuristic, "A*")
        if start == goal:
            return trivial_result(start, state)

        visited_order = []
        state.distance[start] = 0.0
        h_start = h(start)
        pq = PriorityQueue()
        pq.push(start, (h_start, h_start))

        while pq:
            node = pq.pop()
            # Skip if already processed
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
                tentative_g = state.distance[node] + w
                # Update if we found a better path
                if tentative_g < state.dist(nbr):
                    state.distance[nbr] = tentative_g
                    state.previous[nbr] = node
                    h_nbr = h(nbr)
                    pq.push(nbr, (tentative_g + h_nbr, h_nbr))

        return SearchResult(visited_order, [], state)
