# -*- coding: utf-8 -*-
"""
Configuration constants for the search visualizer.

Everything tunable lives here; the CLIs expose the same values as
argparse defaults so a single run can override them.
"""

import os

# =============================================================================
# Paths
# =============================================================================

PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

# PNG frames, CSVs and other artifacts
OUT_DIR = os.path.join(PROJECT_ROOT, "out")

# =============================================================================
# Grid defaults (the board shown on first load)
# =============================================================================

GRID_ROWS = 20
GRID_COLS = 40

START_NODE = (10, 5)
FINISH_NODE = (10, 35)

# =============================================================================
# Playback
# =============================================================================

# Delay between consecutive replay events, in milliseconds
STEP_DELAY_MS = 20

# =============================================================================
# Waypoint graph
# =============================================================================

EARTH_RADIUS_KM = 6371.0

# =============================================================================
# Benchmark
# =============================================================================

BENCH_SIZES = [(20, 40), (40, 80)]
BENCH_DENSITIES = [0.0, 0.15, 0.30]
BENCH_SEEDS = 5
