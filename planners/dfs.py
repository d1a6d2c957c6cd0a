#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Depth-First Search planner (not optimal, but useful as a baseline).
- Pre-order: a node is visited and recorded the moment the search enters it.
- Returns the first path found (often long and twisty); exploration stops
  there, so `visited` only holds what was explored before success.
- Uses an explicit stack of neighbour iterators instead of recursion, so
  large open grids do not hit the interpreter's recursion limit.
"""

from __future__ import annotations
from typing import Hashable

from .reconstruct import reconstruct_path
from .state import SearchResult, begin_search, trivial_result


class DFSPlanner:
    name = "dfs"

    def plan(self, source, start: Hashable, goal: Hashable, heuristic=None) -> SearchResult:
        """
        Find a path from start to goal using depth-first search.

        Args:
            source: Grid or WaypointGraph
            start: key of the starting node
            goal: key of the goal node

        Returns:
            SearchResult(visited, path, state); path is [] when unreachable
        """
        start, goal, state = begin_search(source, start, goal)
        if start == goal:
            return trivial_result(start, state)

        visited_order = [start]
        state.mark(start)
        state.distance[start] = 0.0
        stack = [(start, iter(source.neighbors(start)))]

        while stack:
            node, nbrs = stack[-1]
            for nbr, _ in nbrs:
                if nbr in state.visited:
                    continue
                # enter nbr: this is the recursive call
                state.mark(nbr, parent=node)
                state.distance[nbr] = state.distance[node] + 1
                visited_order.append(nbr)
                if nbr == goal:
                    path = reconstruct_path(state.previous, start, goal)
                    return SearchResult(visited_order, path, state)
                stack.append((nbr, iter(source.neighbors(nbr))))
                break
            else:
                stack.pop()

        return SearchResult(visited_order, [], state)
