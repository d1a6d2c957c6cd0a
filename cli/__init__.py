# -*- coding: utf-8 -*-
"""
Command-line entry points (run with `python -m cli.<name>`):

- run_grid       : run one strategy on a grid, replay it, save PNG/frames
- run_waypoints  : search a Haversine-weighted waypoint graph
- run_bench      : benchmark all strategies over random wall layouts (CSV)
"""
__all__ = [
    "run_grid",
    "run_waypoints",
    "run_bench",
]
