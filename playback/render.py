import os
import numpy as np
import matplotlib.pyplot as plt

# --- Colors (RGB, 0..1) -------------------------------------------------------
FREE_RGB = (1.0, 1.0, 1.0)
WALL_RGB = (0.17, 0.24, 0.31)
VISITED_RGB = (0.25, 0.81, 0.85)
PATH_RGB = (1.0, 0.99, 0.33)
START_RGB = (0.10, 0.74, 0.61)
FINISH_RGB = (0.91, 0.30, 0.24)


class GridCanvas:
    """
    RGB picture of a Grid that the playback callbacks paint into.

    Start and finish keep their own colors; visited/path marks only touch
    the other cells, the way the browser grid did.
    """

    def __init__(self, grid):
        self.grid = grid
        self.rgb = np.ones((grid.H, grid.W, 3), dtype=float)
        self.rgb[grid.walls] = WALL_RGB
        self.rgb[grid.start] = START_RGB
        self.rgb[grid.finish] = FINISH_RGB
        self.visited_count = 0
        self.path_count = 0

    def _paintable(self, cell):
        return cell != self.grid.start and cell != self.grid.finish

    def mark_visited(self, cell):
        self.visited_count += 1
        if self._paintable(cell):
            self.rgb[cell] = VISITED_RGB

    def mark_path(self, cell):
        self.path_count += 1
        if self._paintable(cell):
            self.rgb[cell] = PATH_RGB

    def render(self, ax=None, title=None):
        H, W = self.grid.shape
        if ax is None:
            _, ax = plt.subplots(figsize=(max(4, W/5), max(2, H/5)), dpi=120)
        ax.imshow(self.rgb, interpolation="nearest", origin="upper")
        ax.set_xticks([]); ax.set_yticks([])
        if title:
            ax.set_title(title, fontsize=10)
        return ax

    def save(self, path, title=None):
        fig, ax = plt.subplots(figsize=(max(4, self.grid.W/5), max(2, self.grid.H/5)), dpi=120)
        self.render(ax=ax, title=title)
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        fig.tight_layout()
        fig.savefig(path, bbox_inches="tight")
        plt.close(fig)
        return path


def render_waypoints(graph, visited=(), path=(), ax=None, title=None):
    """
    Scatter the waypoints (lon on x, lat on y), highlight the visited ones
    and draw the found path as a polyline.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(5, 5), dpi=120)
    keys = list(graph.coords)
    lats = [graph.coords[k][0] for k in keys]
    lons = [graph.coords[k][1] for k in keys]
    ax.scatter(lons, lats, s=30, color="0.5", zorder=2)

    seen = [k for k in visited if k in graph.coords]
    if seen:
        ax.scatter([graph.coords[k][1] for k in seen], [graph.coords[k][0] for k in seen],
                   s=40, color=VISITED_RGB, zorder=3)
    if path:
        ax.plot([graph.coords[k][1] for k in path], [graph.coords[k][0] for k in path],
                color="lime", lw=2, alpha=0.8, zorder=4)
        first, last = graph.coords[path[0]], graph.coords[path[-1]]
        ax.plot(first[1], first[0], marker="*", markersize=12, markeredgecolor="k", markerfacecolor="lime", lw=0)
        ax.plot(last[1], last[0], marker="*", markersize=12, markeredgecolor="k", markerfacecolor="red", lw=0)
    for k in keys:
        ax.text(graph.coords[k][1], graph.coords[k][0], f" {k}", fontsize=7, va="bottom")

    ax.set_xlabel("longitude"); ax.set_ylabel("latitude")
    if title:
        ax.set_title(title, fontsize=10)
    return ax


def save_figure(ax, path):
    fig = ax.figure
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    fig.tight_layout()
    fig.savefig(path, bbox_inches="tight")
    plt.close(fig)
    print(f"Saved: {path}")
    return path
