"""
Test package for the search visualizer.

Puts the repository root on sys.path so the flat top-level packages
(envs, planners, playback, cli) and config import when pytest is started
from any directory.
"""

import os
import sys

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)
