# -*- coding: utf-8 -*-
"""
Node models for the search visualizer.
Exposes:
- Grid / Node and the grid constructors and edit operations (grid.py)
- WaypointGraph, haversine_km, build_waypoint_graph, WaypointSelection (waypoints.py)
"""

from __future__ import annotations

from .grid import (Grid, Node, create_grid, grid_from_ascii, random_walls,
                   toggle_wall, clear_grid, reset_grid)
from .waypoints import WaypointGraph, WaypointSelection, build_waypoint_graph, haversine_km

__all__ = [
    "Grid",
    "Node",
    "create_grid",
    "grid_from_ascii",
    "random_walls",
    "toggle_wall",
    "clear_grid",
    "reset_grid",
    "WaypointGraph",
    "WaypointSelection",
    "build_waypoint_graph",
    "haversine_km",
]
