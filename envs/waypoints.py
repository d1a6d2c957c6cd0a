#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
waypoints.py
------------
Sparse weighted graph for the map view.

- Vertices are user-placed geographic waypoints (lat, lon in degrees),
  keyed by their index in the input sequence.
- Edges connect every pair of distinct waypoints; the weight is the
  great-circle (Haversine) distance in kilometres.
- Arbitrary weighted graphs can be wrapped with WaypointGraph.from_adjacency.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterator, List, Mapping, Optional, Sequence, Tuple

from config import EARTH_RADIUS_KM

LatLon = Tuple[float, float]


def haversine_km(a: LatLon, b: LatLon, radius: float = EARTH_RADIUS_KM) -> float:
    """Great-circle distance between two (lat, lon) points, in kilometres."""
    lat1, lon1 = math.radians(a[0]), math.radians(a[1])
    lat2, lon2 = math.radians(b[0]), math.radians(b[1])
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    h = (math.sin(dlat / 2) ** 2 +
         math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2)
    # rounding can push h a hair above 1 for antipodal points
    return 2 * radius * math.asin(math.sqrt(min(1.0, h)))


def _check_latlon(i: int, point) -> LatLon:
    try:
        lat, lon = float(point[0]), float(point[1])
    except (TypeError, ValueError, IndexError) as e:
        raise ValueError(f"waypoint {i} is not a (lat, lon) pair: {point!r}") from e
    if not (-90.0 <= lat <= 90.0) or not (-180.0 <= lon <= 180.0):
        raise ValueError(f"waypoint {i} out of range: lat={lat}, lon={lon}")
    return (lat, lon)


@dataclass
class WaypointGraph:
    """Adjacency-map graph: node key -> {neighbour key: weight}."""
    adjacency: Dict[Hashable, Dict[Hashable, float]]
    coords: Dict[Hashable, LatLon] = field(default_factory=dict)

    def __post_init__(self):
        self._incoming: Dict[Hashable, Dict[Hashable, float]] = {u: {} for u in self.adjacency}
        for u, nbrs in self.adjacency.items():
            for v, w in nbrs.items():
                if v not in self.adjacency:
                    raise ValueError(f"edge {u!r}->{v!r} points at an unknown node")
                if w < 0:
                    raise ValueError(f"edge {u!r}->{v!r} has negative weight {w}")
                self._incoming[v][u] = w

    @classmethod
    def from_adjacency(cls, adjacency: Mapping[Hashable, Mapping[Hashable, float]]) -> "WaypointGraph":
        return cls(adjacency={u: {v: float(w) for v, w in nbrs.items()}
                              for u, nbrs in adjacency.items()})

    def __len__(self) -> int:
        return len(self.adjacency)

    def __contains__(self, key) -> bool:
        try:
            return key in self.adjacency
        except TypeError:
            return False

    def keys(self) -> Iterator[Hashable]:
        return iter(self.adjacency)

    def neighbors(self, key) -> Iterator[Tuple[Hashable, float]]:
        return iter(self.adjacency[key].items())

    def predecessors(self, key) -> Iterator[Tuple[Hashable, float]]:
        """Yield (u, weight) for every edge u->key; edges may be one-way."""
        return iter(self._incoming[key].items())

    def weight(self, u, v) -> float:
        return self.adjacency[u][v]

    def validate_endpoints(self, start, goal):
        for name, key in (("start", start), ("goal", goal)):
            if key not in self:
                raise ValueError(f"{name} {key!r} is not a node of the graph")
        return start, goal

    def path_length_km(self, path: Sequence[Hashable]) -> float:
        return sum(self.adjacency[u][v] for u, v in zip(path[:-1], path[1:]))


def build_waypoint_graph(waypoints: Sequence[LatLon]) -> WaypointGraph:
    """Fully connected graph over `waypoints`, Haversine-weighted (km)."""
    if len(waypoints) < 2:
        raise ValueError(f"need at least 2 waypoints to build a graph, got {len(waypoints)}")
    points = [_check_latlon(i, p) for i, p in enumerate(waypoints)]

    adjacency: Dict[int, Dict[int, float]] = {i: {} for i in range(len(points))}
    for i in range(len(points)):
        for j in range(i + 1, len(points)):
            d = haversine_km(points[i], points[j])
            adjacency[i][j] = d
            adjacency[j][i] = d
    return WaypointGraph(adjacency=adjacency, coords=dict(enumerate(points)))


class WaypointSelection:
    """
    Click-driven source/destination picker for the map view.
    The first click sets the source, the second the destination; further
    clicks are ignored until clear().
    """

    def __init__(self):
        self.source: Optional[LatLon] = None
        self.destination: Optional[LatLon] = None

    def click(self, lat: float, lon: float) -> bool:
        """Record a click; returns False when both endpoints are already set."""
        point = _check_latlon(0 if self.source is None else 1, (lat, lon))
        if self.source is None:
            self.source = point
        elif self.destination is None:
            self.destination = point
        else:
            return False
        return True

    @property
    def complete(self) -> bool:
        return self.source is not None and self.destination is not None

    def clear(self):
        self.source = None
        self.destination = None

    def as_waypoints(self) -> List[LatLon]:
        return [p for p in (self.source, self.destination) if p is not None]
