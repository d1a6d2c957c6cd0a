# -*- coding: utf-8 -*-
"""
Backpointer walks.

Convention: a backpointer always points one step closer to the node the
search that installed it started from. In bidirectional search the forward
map points toward start and the backward map points toward the goal.
"""

from __future__ import annotations
from typing import Hashable, List, Mapping


def reconstruct_path(previous: Mapping[Hashable, Hashable],
                     start: Hashable, goal: Hashable) -> List[Hashable]:
    """
    Walk from `goal` back to `start`. Returns start..goal inclusive, [start]
    when start == goal, and [] when the chain stops before reaching start.
    """
    if start == goal:
        return [start]
    if goal not in previous:
        return []
    path = [goal]
    node = goal
    seen = {goal}
    while node != start:
        node = previous.get(node)
        if node is None or node in seen:
            return []
        seen.add(node)
        path.append(node)
    path.reverse()
    return path


def reconstruct_bidirectional(forward_previous: Mapping[Hashable, Hashable],
                              backward_previous: Mapping[Hashable, Hashable],
                              meet: Hashable,
                              start: Hashable, goal: Hashable) -> List[Hashable]:
    """
    Join the two halves at `meet`: start..meet from the forward map, then
    meet's successors toward the goal from the backward map.
    """
    head = reconstruct_path(forward_previous, start, meet)
    if not head:
        return []
    # the backward map rebuilds goal..meet; flip it to run meet..goal
    tail = reconstruct_path(backward_previous, goal, meet)
    if not tail:
        return []
    tail.reverse()
    return head + tail[1:]
