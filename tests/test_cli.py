import os

import matplotlib
matplotlib.use("Agg")

from cli import run_bench, run_grid, run_waypoints
from planners import PLANNERS


def test_run_grid_saves_final_picture(tmp_path, capsys):
    out = tmp_path / "bfs.png"
    code = run_grid.main(["--algorithm", "greedy-bfs", "--out", str(out)])
    assert code == 0
    assert out.exists()
    text = capsys.readouterr().out
    assert "31 nodes" in text
    assert "Saved:" in text

def test_run_grid_from_picture_with_frames(tmp_path):
    picture = tmp_path / "maze.txt"
    picture.write_text("S..#\n.#..\n...F\n")
    out = tmp_path / "dfs.png"
    code = run_grid.main(["--walls", str(picture), "--algorithm", "dfs",
                          "--out", str(out), "--frames-every", "2"])
    assert code == 0
    frames = os.listdir(tmp_path / "dfs_frames")
    assert frames and all(f.endswith(".png") for f in frames)

def test_run_grid_reports_missing_path(tmp_path, capsys):
    picture = tmp_path / "blocked.txt"
    picture.write_text("S#.\n##F\n")
    code = run_grid.main(["--walls", str(picture), "--algorithm", "a_star",
                          "--out", str(tmp_path / "a.png")])
    assert code == 1
    assert "no path" in capsys.readouterr().out

def test_run_waypoints_prints_path(tmp_path, capsys):
    out = tmp_path / "wp.png"
    code = run_waypoints.main(["--waypoints", "48.86,2.3522;48.85,2.3522;48.855,2.34",
                               "--algorithm", "a_star", "--destination", "2", "--out", str(out)])
    assert code == 0
    assert "Path: 0 -> 2" in capsys.readouterr().out
    assert out.exists()

def test_benchmark_table_and_summary():
    df = run_bench.run_benchmark([(10, 20)], [0.0, 0.2], seeds=2, progress=False)
    assert len(df) == 2 * 2 * len(PLANNERS)
    assert set(df["planner"]) == set(PLANNERS)
    open_rows = df[df["density"] == 0.0]
    assert open_rows["success"].all()
    summary = run_bench.summarize(df)
    assert list(summary.columns) == ["planner", "success_rate", "mean_visited",
                                     "mean_path_nodes", "mean_time_s"]

def test_benchmark_main_writes_csv(tmp_path):
    code = run_bench.main(["--sizes", "8x16", "--densities", "0", "--seeds", "1",
                           "--planners", "bfs,dijkstra", "--outdir", str(tmp_path), "--no-progress"])
    assert code == 0
    assert any(name.endswith(".csv") for name in os.listdir(tmp_path))

def test_run_grid_start_on_finish(tmp_path, capsys):
    out = tmp_path / "same.png"
    code = run_grid.main(["--start", "10,5", "--finish", "10,5", "--out", str(out)])
    assert code == 0
    text = capsys.readouterr().out
    assert "1 nodes (0 hops), 1 visited" in text
    assert "Replayed 3 events" in text
    assert out.exists()
