# -*- coding: utf-8 -*-
"""
Replay of planner output as timed, cancellable animation events.
Rendering helpers live in playback.render (imported on demand, it pulls
in matplotlib).
"""

from __future__ import annotations

from .scheduler import (PATH, PATH_START, VISIT, PlaybackEvent, PlaybackHandle,
                        PlaybackScheduler, build_events)

__all__ = [
    "PlaybackScheduler",
    "PlaybackHandle",
    "PlaybackEvent",
    "build_events",
    "VISIT",
    "PATH_START",
    "PATH",
]
