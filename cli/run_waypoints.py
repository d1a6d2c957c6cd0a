#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_waypoints.py
----------------
Search over a waypoint graph (map view):
- Waypoints are (lat, lon) pairs; every pair is joined by a Haversine edge
- Source/destination are waypoint indices (default: first and last)
- Prints the visited order, the path and its length in km; optionally
  plots it to PNG

Example:
    python -m cli.run_waypoints \
        --waypoints "48.86,2.3522;48.85,2.3522;48.855,2.34" \
        --algorithm a_star --out out/waypoints.png
"""

from __future__ import annotations
import argparse
from typing import List, Optional, Tuple

from envs.waypoints import build_waypoint_graph
from planners import get_planner, haversine_heuristic

DEFAULT_WAYPOINTS = "48.86,2.3522;48.85,2.3522;48.855,2.34"


def _parse_waypoints(s: str) -> List[Tuple[float, float]]:
    points = []
    for token in s.split(";"):
        token = token.strip()
        if not token:
            continue
        if "," not in token:
            raise argparse.ArgumentTypeError(f"Bad waypoint '{token}', expected like 48.86,2.35")
        lat, lon = token.split(",", 1)
        points.append((float(lat), float(lon)))
    return points


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Search a Haversine-weighted waypoint graph.")
    ap.add_argument("--waypoints", type=_parse_waypoints, default=_parse_waypoints(DEFAULT_WAYPOINTS),
                    help="Semicolon-separated lat,lon pairs")
    ap.add_argument("--algorithm", type=str, default="dijkstra")
    ap.add_argument("--source", type=int, default=0, help="Index of the source waypoint")
    ap.add_argument("--destination", type=int, default=-1, help="Index of the destination waypoint")
    ap.add_argument("--out", type=str, default=None, help="If set, plot the result to this PNG")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    graph = build_waypoint_graph(args.waypoints)

    n = len(graph)
    src = args.source % n
    dst = args.destination % n

    planner = get_planner(args.algorithm)
    heuristic = haversine_heuristic(graph, dst) if planner.name in ("a_star", "greedy_best_first") else None
    result = planner.plan(graph, src, dst, heuristic=heuristic)

    print(f"{planner.name}: visited {result.visited}")
    if result.success:
        print(f"Path: {' -> '.join(str(k) for k in result.path)} ({graph.path_length_km(result.path):.3f} km)")
    else:
        print("No path")

    if args.out:
        from playback.render import render_waypoints, save_figure
        ax = render_waypoints(graph, result.visited, result.path, title=f"{planner.name}")
        save_figure(ax, args.out)
    return 0 if result.success else 1


if __name__ == "__main__":
    raise SystemExit(main())
