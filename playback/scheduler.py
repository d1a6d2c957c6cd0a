#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
scheduler.py
------------
Replays a planner's output as timed animation events.

Given `visited` (N nodes) and `path` (M nodes) a schedule holds N + 1 + M
events, all timed from the moment `schedule()` is called:

    visit i        at  i * d            (0 <= i < N)
    path_start     at  N * d
    path j         at  (N + j) * d      (0 <= j < M)

Nothing runs on its own. A single coordinating loop (`run_pending`, or
`run_until_complete` which sleeps between events) fires every due event in
schedule order. Cancelling a handle drops its remaining events; it never
touches the search state the sequences came from.

Typical use from a tkinter/matplotlib front end:

    handle = scheduler.schedule(result.visited, result.path, paint_visit, paint_path)
    root.after(10, pump)      # where pump() calls scheduler.run_pending()
"""

from __future__ import annotations

import itertools
import time
from dataclasses import dataclass
from typing import Callable, Hashable, List, Optional, Sequence

from config import STEP_DELAY_MS

VISIT = "visit"
PATH_START = "path_start"
PATH = "path"


@dataclass(frozen=True)
class PlaybackEvent:
    kind: str
    index: int                  # position within its own sequence
    node: Optional[Hashable]    # None for the path_start marker
    offset_ms: float            # delay from schedule time


def build_events(visited: Sequence[Hashable], path: Sequence[Hashable],
                 step_delay: float) -> List[PlaybackEvent]:
    """The ordered event list for one replay (see module docstring)."""
    n = len(visited)
    events = [PlaybackEvent(VISIT, i, node, i * step_delay) for i, node in enumerate(visited)]
    events.append(PlaybackEvent(PATH_START, 0, None, n * step_delay))
    events.extend(PlaybackEvent(PATH, j, node, (n + j) * step_delay) for j, node in enumerate(path))
    return events


class PlaybackHandle:
    """One scheduled replay. Returned by PlaybackScheduler.schedule()."""

    def __init__(self, seq: int, events: List[PlaybackEvent], started_at: float,
                 on_visit: Callable, on_path_step: Callable,
                 on_path_start: Optional[Callable] = None):
        self.seq = seq
        self.events = events
        self.started_at = started_at
        self._on_visit = on_visit
        self._on_path_step = on_path_step
        self._on_path_start = on_path_start
        self._next = 0
        self._cancelled = False

    # ----- status ----- #

    @property
    def fired(self) -> int:
        return self._next

    @property
    def pending(self) -> int:
        return 0 if self._cancelled else len(self.events) - self._next

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def done(self) -> bool:
        return self._cancelled or self._next >= len(self.events)

    def next_due(self) -> Optional[float]:
        """Clock time of the next event, or None when nothing is left."""
        if self.done:
            return None
        return self.started_at + self.events[self._next].offset_ms / 1000.0

    # ----- control ----- #

    def cancel(self):
        """Drop every event that has not fired yet. Safe to call repeatedly."""
        self._cancelled = True

    def _fire_next(self):
        event = self.events[self._next]
        self._next += 1
        if event.kind == VISIT:
            self._on_visit(event.node)
        elif event.kind == PATH:
            self._on_path_step(event.node)
        elif self._on_path_start is not None:
            self._on_path_start()

    def __repr__(self):
        state = "cancelled" if self._cancelled else ("done" if self.done else "running")
        return f"PlaybackHandle(#{self.seq}, {self.fired}/{len(self.events)} fired, {state})"


class PlaybackScheduler:
    """
    Cooperative, single-threaded replay scheduler.

    `clock` returns seconds (default time.monotonic); `sleep` is only used by
    run_until_complete. Tests pass a fake clock to step time by hand.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic,
                 sleep: Callable[[float], None] = time.sleep):
        self.clock = clock
        self.sleep = sleep
        self._handles: List[PlaybackHandle] = []
        self._seq = itertools.count()

    def schedule(self, visited: Sequence[Hashable], path: Sequence[Hashable],
                 on_visit: Callable[[Hashable], None],
                 on_path_step: Callable[[Hashable], None],
                 step_delay: float = STEP_DELAY_MS,
                 on_path_start: Optional[Callable[[], None]] = None) -> PlaybackHandle:
        """Queue a replay of `visited` then `path`; `step_delay` is in milliseconds."""
        if step_delay < 0:
            raise ValueError(f"step_delay must be >= 0 ms, got {step_delay}")
        handle = PlaybackHandle(next(self._seq), build_events(list(visited), list(path), step_delay),
                                self.clock(), on_visit, on_path_step, on_path_start)
        self._handles.append(handle)
        return handle

    @property
    def active(self) -> List[PlaybackHandle]:
        return [h for h in self._handles if not h.done]

    def next_due(self) -> Optional[float]:
        dues = [d for d in (h.next_due() for h in self._handles) if d is not None]
        return min(dues) if dues else None

    def run_pending(self, now: Optional[float] = None) -> int:
        """
        Fire every event due at `now` (default: the clock), earliest first;
        events due at the same instant fire in schedule order. Returns the
        number of events fired.
        """
        now = self.clock() if now is None else now
        fired = 0
        while True:
            best = None
            for h in self._handles:
                due = h.next_due()
                if due is None or due > now:
                    continue
                if best is None or due < best[0]:
                    best = (due, h)
            if best is None:
                break
            best[1]._fire_next()
            fired += 1
        self._handles = [h for h in self._handles if not h.done]
        return fired

    def run_until_complete(self) -> int:
        """Block, sleeping between events, until every live handle is done."""
        fired = 0
        while True:
            fired += self.run_pending()
            due = self.next_due()
            if due is None:
                return fired
            wait = due - self.clock()
            if wait > 0:
                self.sleep(wait)

    def cancel_all(self):
        """Cancel every live replay (reset / before starting a new run)."""
        for h in self._handles:
            h.cancel()
        self._handles = []
