"""
Plotly chart components for the grid view and the dashboard.
"""

import numpy as np
import plotly.graph_objects as go

from src.benchmark import AlgorithmSummary, BenchmarkResult
from src.grid import Grid
from src.visualizer import SearchRun, build_animation

# Cell codes used in the heatmap matrix
EMPTY, WALL, VISITED, PATH, START, FINISH = range(6)

CELL_COLORS = ["#ffffff", "#0c3547", "#40cee3", "#fffe6a", "#2ecc71", "#e74c3c"]

ALGORITHM_COLORS = {
    "dijkstra": "#3498db",
    "bellman-ford": "#9b59b6",
    "astar": "#e67e22",
}

# Upper bound on Plotly frames; larger traces are chunked
MAX_FRAMES = 120


def _colorscale() -> list[list]:
    """Discrete colorscale mapping each cell code to one color."""
    n = len(CELL_COLORS)
    scale = []
    for i, color in enumerate(CELL_COLORS):
        scale.append([i / n, color])
        scale.append([(i + 1) / n, color])
    return scale


def grid_matrix(grid: Grid, visited=(), path=()) -> np.ndarray:
    """Cell-code matrix for a grid with optional visited/path overlays."""
    matrix = np.full((grid.rows, grid.cols), EMPTY, dtype=int)
    for node in visited:
        matrix[node.row, node.col] = VISITED
    for node in path:
        matrix[node.row, node.col] = PATH
    for node in grid:
        if node.is_wall:
            matrix[node.row, node.col] = WALL
        if node.is_start:
            matrix[node.row, node.col] = START
        if node.is_finish:
            matrix[node.row, node.col] = FINISH
    return matrix


def _heatmap(matrix: np.ndarray) -> go.Heatmap:
    return go.Heatmap(
        z=matrix,
        zmin=0,
        zmax=len(CELL_COLORS),
        colorscale=_colorscale(),
        showscale=False,
        xgap=1,
        ygap=1,
        hovertemplate="row %{y}, col %{x}<extra></extra>",
    )


def create_grid_figure(grid: Grid, run: SearchRun | None = None, animate: bool = True) -> go.Figure:
    """
    Grid heatmap, optionally replaying a run.

    With `animate`, the figure carries Plotly frames following the run's
    animation schedule (chunked to at most MAX_FRAMES) and a Play button.
    """
    path = run.path if run and run.path_found else ()
    final = grid_matrix(grid, run.visited if run else (), path)

    if run is None or not animate:
        fig = go.Figure(data=[_heatmap(final)])
    else:
        schedule = [f for f in build_animation(run) if f.coord is not None]
        step = max(1, len(schedule) // MAX_FRAMES)
        matrix = grid_matrix(grid)
        frames = []
        for i in range(0, len(schedule), step):
            for frame in schedule[i:i + step]:
                row, col = frame.coord
                if matrix[row, col] in (START, FINISH, WALL):
                    continue
                matrix[row, col] = VISITED if frame.kind == "visited" else PATH
            frames.append(go.Frame(data=[_heatmap(matrix.copy())], name=str(i)))
        frames.append(go.Frame(data=[_heatmap(final)], name="final"))

        fig = go.Figure(data=[_heatmap(grid_matrix(grid))], frames=frames)
        fig.update_layout(
            updatemenus=[dict(
                type="buttons",
                showactive=False,
                x=0,
                y=1.12,
                xanchor="left",
                buttons=[dict(
                    label="▶ Play",
                    method="animate",
                    args=[None, {"frame": {"duration": 30, "redraw": True}, "fromcurrent": True}],
                )],
            )],
        )

    fig.update_yaxes(autorange="reversed", showticklabels=False, scaleanchor="x")
    fig.update_xaxes(showticklabels=False)
    fig.update_layout(height=420, margin=dict(t=40, b=10, l=10, r=10), plot_bgcolor="#e5e5e5")
    return fig


def create_comparison_chart(runs: dict[str, SearchRun]) -> go.Figure:
    """Bar chart of visited nodes per algorithm for one grid."""
    names = list(runs.keys())
    fig = go.Figure(data=[
        go.Bar(
            x=names,
            y=[runs[n].visited_count for n in names],
            marker_color=[ALGORITHM_COLORS.get(n, "#95a5a6") for n in names],
            text=[f"{runs[n].execution_time_ms:.2f} ms" for n in names],
            textposition="outside",
        )
    ])
    fig.update_layout(
        title="Visited Nodes",
        yaxis_title="Nodes",
        showlegend=False,
        height=300,
        margin=dict(t=35, b=45, l=45, r=15),
    )
    return fig


def create_visited_chart(summaries: list[AlgorithmSummary]) -> go.Figure:
    """Bar chart of mean visited nodes."""
    fig = go.Figure(data=[
        go.Bar(
            x=[s.algorithm for s in summaries],
            y=[s.avg_visited for s in summaries],
            marker_color=[ALGORITHM_COLORS.get(s.algorithm, "#95a5a6") for s in summaries],
        )
    ])
    fig.update_layout(
        title="Mean Visited Nodes",
        yaxis_title="Nodes",
        showlegend=False,
        height=280,
        margin=dict(t=35, b=45, l=45, r=15),
    )
    return fig


def create_time_boxplot(results: list[BenchmarkResult]) -> go.Figure:
    """Box plot of execution time by algorithm."""
    by_algorithm: dict[str, list[float]] = {}
    for r in results:
        by_algorithm.setdefault(r.algorithm, []).append(r.time_ms)

    fig = go.Figure()
    for algorithm, times in sorted(by_algorithm.items()):
        fig.add_trace(go.Box(
            y=times,
            name=algorithm,
            marker_color=ALGORITHM_COLORS.get(algorithm, "#95a5a6"),
            boxmean=True,
        ))

    fig.update_layout(
        title="Execution Time",
        yaxis_title="ms",
        showlegend=False,
        height=280,
        margin=dict(t=35, b=45, l=45, r=15),
    )
    return fig
