import itertools

import numpy as np
import pytest

from envs.waypoints import WaypointGraph, WaypointSelection, build_waypoint_graph, haversine_km

PARIS = (48.8566, 2.3522)
LONDON = (51.5074, -0.1278)


def test_haversine_symmetric_and_zero_on_self():
    rng = np.random.default_rng(0)
    lats = rng.uniform(-90, 90, 20)
    lons = rng.uniform(-180, 180, 20)
    points = list(zip(lats, lons))
    for a, b in itertools.combinations(points, 2):
        assert haversine_km(a, b) == pytest.approx(haversine_km(b, a), rel=1e-12)
    for p in points:
        assert haversine_km(p, p) == 0.0

def test_haversine_known_distances():
    assert haversine_km(PARIS, LONDON) == pytest.approx(343.5, abs=1.0)
    # a quarter of the meridian
    assert haversine_km((0.0, 0.0), (90.0, 0.0)) == pytest.approx(6371.0 * np.pi / 2)
    # antipodes stay finite
    assert haversine_km((0.0, 0.0), (0.0, 180.0)) == pytest.approx(6371.0 * np.pi)

def test_graph_is_fully_connected_with_symmetric_weights():
    points = [(48.86, 2.3522), (48.85, 2.3522), (48.855, 2.34), (48.87, 2.36)]
    graph = build_waypoint_graph(points)
    assert len(graph) == 4
    for i, j in itertools.permutations(range(4), 2):
        assert graph.weight(i, j) == graph.weight(j, i)
        assert graph.weight(i, j) == pytest.approx(haversine_km(points[i], points[j]))
    for i in range(4):
        assert i not in graph.adjacency[i]
        assert graph.coords[i] == points[i]

def test_graph_needs_two_valid_waypoints():
    with pytest.raises(ValueError):
        build_waypoint_graph([])
    with pytest.raises(ValueError):
        build_waypoint_graph([PARIS])
    with pytest.raises(ValueError):
        build_waypoint_graph([PARIS, (95.0, 0.0)])
    with pytest.raises(ValueError):
        build_waypoint_graph([PARIS, ("north", 0.0)])

def test_adjacency_validation():
    with pytest.raises(ValueError):
        WaypointGraph.from_adjacency({"a": {"b": -1.0}, "b": {}})
    with pytest.raises(ValueError):
        WaypointGraph.from_adjacency({"a": {"z": 1.0}})

def test_selection_source_then_destination_then_ignored():
    sel = WaypointSelection()
    assert sel.click(*PARIS)
    assert not sel.complete
    assert sel.click(*LONDON)
    assert sel.complete
    assert not sel.click(0.0, 0.0)
    assert sel.as_waypoints() == [PARIS, LONDON]
    sel.clear()
    assert sel.as_waypoints() == []

def test_selection_feeds_graph_builder():
    sel = WaypointSelection()
    sel.click(*PARIS)
    sel.click(*LONDON)
    graph = build_waypoint_graph(sel.as_waypoints())
    assert graph.path_length_km([0, 1]) == pytest.approx(haversine_km(PARIS, LONDON))

def test_predecessors_follow_edge_direction():
    graph = WaypointGraph.from_adjacency({"a": {"b": 2.0}, "b": {}, "c": {"b": 3.0}})
    assert dict(graph.predecessors("b")) == {"a": 2.0, "c": 3.0}
    assert list(graph.predecessors("a")) == []
    assert list(graph.neighbors("b")) == []
