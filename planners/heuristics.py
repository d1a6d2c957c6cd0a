# -*- coding: utf-8 -*-
"""
Heuristic maps for A* and greedy best-first.

A heuristic is a mapping node -> non-negative estimate of the remaining cost
to the goal. Planners also accept a plain callable. Nodes missing from a
mapping count as 0.
"""

from __future__ import annotations
from typing import Callable, Dict, Hashable, Mapping, Optional, Union
import collections.abc
import warnings

from envs.waypoints import haversine_km

Heuristic = Union[Mapping[Hashable, float], Callable[[Hashable], float]]


def manhattan_heuristic(grid, goal) -> Dict[Hashable, float]:
    """|dr| + |dc| to `goal` for every free cell; admissible on a 4-connected grid."""
    gr, gc = goal
    return {(r, c): float(abs(r - gr) + abs(c - gc))
            for (r, c) in grid.keys() if not grid.walls[r, c]}


def haversine_heuristic(graph, goal) -> Dict[Hashable, float]:
    """Straight great-circle distance (km) to `goal`; needs graph.coords."""
    if goal not in graph.coords:
        raise ValueError(f"goal {goal!r} has no coordinates in this graph")
    target = graph.coords[goal]
    return {key: haversine_km(point, target) for key, point in graph.coords.items()}


def as_heuristic_fn(heuristic: Optional[Heuristic], planner_name: str) -> Callable[[Hashable], float]:
    if heuristic is None:
        warnings.warn(f"{planner_name} called without a heuristic; every estimate is 0 "
                      f"and the expansion order degenerates", RuntimeWarning, stacklevel=3)
        return lambda key: 0.0
    if isinstance(heuristic, collections.abc.Mapping):
        return lambda key: float(heuristic.get(key, 0.0))
    if callable(heuristic):
        return heuristic
    raise TypeError(f"heuristic must be a mapping or a callable, got {type(heuristic).__name__}")
