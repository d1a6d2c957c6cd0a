#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_grid.py
-----------
Run one search strategy on a grid and replay it:
- Builds the default 20x40 board (or loads an ASCII picture, or sprinkles
  random walls)
- Runs the chosen planner
- Replays visited order then path through the PlaybackScheduler into a
  GridCanvas, optionally dumping snapshot frames
- Saves the final picture as PNG

Example:
    python -m cli.run_grid --algorithm dijkstra --density 0.25 --seed 3 \
        --out out/dijkstra.png --frames-every 50

Grid picture format (--walls FILE): '#' wall, '.' free, 'S' start, 'F' finish.
"""

from __future__ import annotations
import argparse
import os
import time
from typing import List, Optional, Tuple

import numpy as np

from config import FINISH_NODE, GRID_COLS, GRID_ROWS, OUT_DIR, START_NODE, STEP_DELAY_MS
from envs.grid import create_grid, grid_from_ascii, random_walls
from planners import ALGORITHM_ALIASES, PLANNERS, get_planner, manhattan_heuristic
from playback.scheduler import PlaybackScheduler


# -------------------- helpers -------------------- #

def _parse_cell(s: str) -> Tuple[int, int]:
    token = s.strip().replace(" ", "")
    if "," not in token:
        raise argparse.ArgumentTypeError(f"Bad cell '{s}', expected like 10,5")
    r, c = token.split(",", 1)
    return int(r), int(c)


class SimulatedClock:
    """Clock whose sleep() just moves time forward; replays finish instantly."""

    def __init__(self):
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float):
        self.now += max(0.0, seconds)


def build_parser() -> argparse.ArgumentParser:
    names = sorted(set(PLANNERS) | set(ALGORITHM_ALIASES))
    ap = argparse.ArgumentParser(description="Visualize a grid search algorithm.")
    ap.add_argument("--algorithm", type=str, default="dijkstra",
                    help=f"One of: {', '.join(names)}")
    ap.add_argument("--rows", type=int, default=GRID_ROWS)
    ap.add_argument("--cols", type=int, default=GRID_COLS)
    ap.add_argument("--start", type=_parse_cell, default=START_NODE, help="row,col")
    ap.add_argument("--finish", type=_parse_cell, default=FINISH_NODE, help="row,col")
    ap.add_argument("--walls", type=str, default=None,
                    help="ASCII grid picture; overrides --rows/--cols/--start/--finish")
    ap.add_argument("--density", type=float, default=0.0, help="Random wall density in [0,1)")
    ap.add_argument("--seed", type=int, default=0, help="RNG seed for random walls")
    ap.add_argument("--step-delay", type=float, default=STEP_DELAY_MS, help="Milliseconds per replay step")
    ap.add_argument("--realtime", action="store_true",
                    help="Sleep between replay steps instead of replaying instantly")
    ap.add_argument("--frames-every", type=int, default=0,
                    help="If >0, save a snapshot PNG every N replay events")
    ap.add_argument("--out", type=str, default=None, help="Output PNG (default: out/<algorithm>.png)")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.walls:
        with open(args.walls) as f:
            grid = grid_from_ascii(f.read().splitlines())
    else:
        grid = create_grid(args.rows, args.cols, args.start, args.finish)
    if args.density > 0:
        grid = random_walls(grid, args.density, np.random.default_rng(args.seed))

    planner = get_planner(args.algorithm)
    heuristic = manhattan_heuristic(grid, grid.finish) if planner.name in ("a_star", "greedy_best_first") else None

    t0 = time.perf_counter()
    result = planner.plan(grid, grid.start, grid.finish, heuristic=heuristic)
    dt = time.perf_counter() - t0

    if result.success:
        print(f"{planner.name}: path found, {len(result.path)} nodes ({len(result.path) - 1} hops), "
              f"{len(result.visited)} visited, {dt:.4f}s")
    else:
        print(f"{planner.name}: no path, {len(result.visited)} visited, {dt:.4f}s")

    # Imported here so the search itself never needs matplotlib
    from playback.render import GridCanvas

    out = args.out or os.path.join(OUT_DIR, f"{planner.name}.png")
    frame_dir = os.path.splitext(out)[0] + "_frames"
    canvas = GridCanvas(grid)
    events = {"n": 0}

    def snapshot():
        events["n"] += 1
        if args.frames_every > 0 and events["n"] % args.frames_every == 0:
            canvas.save(os.path.join(frame_dir, f"frame_{events['n']:05d}.png"))

    def on_visit(cell):
        canvas.mark_visited(cell)
        snapshot()

    def on_path_step(cell):
        canvas.mark_path(cell)
        snapshot()

    if args.realtime:
        scheduler = PlaybackScheduler()
    else:
        clock = SimulatedClock()
        scheduler = PlaybackScheduler(clock=clock, sleep=clock.sleep)
    scheduler.schedule(result.visited, result.path, on_visit, on_path_step, step_delay=args.step_delay)
    fired = scheduler.run_until_complete()

    title = f"{planner.name}: {'success' if result.success else 'fail'}"
    canvas.save(out, title=title)
    print(f"Replayed {fired} events")
    print(f"Saved: {out}")
    return 0 if result.success else 1


if __name__ == "__main__":
    raise SystemExit(main())
