# -*- coding: utf-8 -*-
"""
Search strategies over grids and waypoint graphs with a unified API:
planner.plan(source: Grid | WaypointGraph, start, goal, heuristic=None)
  -> SearchResult(visited: List[key], path: List[key], state: SearchState)
"""

from __future__ import annotations
from typing import Dict, Type

from .a_star import AStarPlanner
from .bfs import BFSPlanner
from .bidirectional import BidirectionalPlanner
from .dfs import DFSPlanner
from .dijkstra import DijkstraPlanner
from .greedy_best_first import GreedyBestFirstPlanner
from .heuristics import haversine_heuristic, manhattan_heuristic
from .reconstruct import reconstruct_bidirectional, reconstruct_path
from .state import SearchResult, SearchState

# Mapping used by factories/CLIs
PLANNERS: Dict[str, Type] = {
    "bfs": BFSPlanner,
    "dfs": DFSPlanner,
    "dijkstra": DijkstraPlanner,
    "bidirectional": BidirectionalPlanner,
    "a_star": AStarPlanner,
    "greedy_best_first": GreedyBestFirstPlanner,
}

# Button names used by the visualizer front end
ALGORITHM_ALIASES: Dict[str, str] = {
    "greedy-bfs": "bfs",
    "bidirectional-swarm": "bidirectional",
    "a-star": "a_star",
    "astar": "a_star",
    "greedy": "greedy_best_first",
}


def get_planner(name: str):
    key = ALGORITHM_ALIASES.get(name, name)
    if key not in PLANNERS:
        known = ", ".join(sorted(set(PLANNERS) | set(ALGORITHM_ALIASES)))
        raise KeyError(f"Unknown algorithm '{name}'. Known: {known}")
    return PLANNERS[key]()


def run(name: str, source, start, goal, heuristic=None) -> SearchResult:
    """
    One-shot: look up `name` and plan from start to goal on `source`.

    The result unpacks as three values, (visited, path, state). Callers that
    only want the visited order and the path should use `result.visited` and
    `result.path`, or `visited, path, _ = run(...)`.
    """
    return get_planner(name).plan(source, start, goal, heuristic=heuristic)


__all__ = [
    "AStarPlanner",
    "BFSPlanner",
    "BidirectionalPlanner",
    "DFSPlanner",
    "DijkstraPlanner",
    "GreedyBestFirstPlanner",
    "PLANNERS",
    "ALGORITHM_ALIASES",
    "SearchResult",
    "SearchState",
    "get_planner",
    "run",
    "reconstruct_path",
    "reconstruct_bidirectional",
    "manhattan_heuristic",
    "haversine_heuristic",
]
