#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Greedy best-first planner.
- Expands the open node with the smallest heuristic value, ignoring the
  cost already paid; equal values go to the earliest discovered node.
- First discovery wins: a node's backpointer is set once and never revised,
  even if a cheaper route turns up later. Paths are not optimal.
"""

from __future__ import annotations
from typing import Hashable

from .frontier import PriorityQueue
from .heuristics import as_heuristic_fn
from .reconstruct import reconstruct_path
from .state import SearchResult, begin_search, trivial_result


class GreedyBestFirstPlanner:
    name = "greedy_best_first"

    def plan(self, source, start: Hashable, goal: Hashable, heuristic=None) -> SearchResult:
        start, goal, state = begin_search(source, start, goal)
        h = as_heuristic_fn(heuristic, "Greedy best-first")
        if start == goal:
            return trivial_result(start, state)

        visited_order = []
        came_from = state.previous
        discovered = {start}
        state.distance[start] = 0.0
        open_set = PriorityQueue()
        open_set.push(start, h(start))

        while open_set:
            current = open_set.pop()
            state.mark(current)
            visited_order.append(current)

            if current == goal:
                path = reconstruct_path(came_from, start, goal)
                return SearchResult(visited_order, path, state)

            for nbr, w in source.neighbors(current):
                if nbr in discovered:
                    continue
                discovered.add(nbr)
                came_from[nbr] = current
                state.distance[nbr] = state.distance[current] + w
                open_set.push(nbr, h(nbr))

        return SearchResult(visited_order, [], state)
