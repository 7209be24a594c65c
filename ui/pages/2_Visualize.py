"""
Visualize - Run a search on an editable grid and replay it.
"""

import streamlit as st

from src.config import RANDOM_WALL_SEED
from src.grid import LAYOUT_NAMES, InvalidGridError, get_layout, parse_cells
from src.search import ALGORITHM_NAMES
from src.visualizer import (
    ApplyEndpoints,
    ClearWalls,
    LoadWalls,
    RevealCost,
    SelectAlgorithm,
    SetFinish,
    SetStart,
    ToggleWalls,
    Visualize,
    format_execution_time,
    initial_state,
    reduce,
    run_search,
)
from ui.components.charts import create_comparison_chart, create_grid_figure

st.set_page_config(page_title="Visualize", page_icon="🧭", layout="wide")

if "viz" not in st.session_state:
    st.session_state.viz = initial_state()


def dispatch(action) -> None:
    try:
        st.session_state.viz = reduce(st.session_state.viz, action)
    except (InvalidGridError, ValueError) as e:
        st.error(str(e))


state = st.session_state.viz
rows, cols = state.grid.rows, state.grid.cols

st.title("Visualize")

# ENDPOINTS AND ALGORITHM
with st.sidebar:
    st.subheader("Endpoints")
    c1, c2 = st.columns(2)
    start_row = c1.number_input("Start row", 0, rows - 1, state.start_input[0])
    start_col = c2.number_input("Start col", 0, cols - 1, state.start_input[1])
    finish_row = c1.number_input("Finish row", 0, rows - 1, state.finish_input[0])
    finish_col = c2.number_input("Finish col", 0, cols - 1, state.finish_input[1])

    algorithm = st.selectbox(
        "Algorithm",
        ALGORITHM_NAMES,
        index=ALGORITHM_NAMES.index(state.algorithm),
    )

    if st.button("Apply", use_container_width=True):
        dispatch(SetStart(start_row, start_col))
        dispatch(SetFinish(finish_row, finish_col))
        dispatch(ApplyEndpoints())
        st.rerun()

    st.subheader("Walls")
    layout = st.selectbox("Preset", LAYOUT_NAMES)
    seed = st.number_input("Seed", value=RANDOM_WALL_SEED, step=1)
    if st.button("Load preset", use_container_width=True):
        walls = get_layout(
            layout, rows, cols, state.grid.start.coord, state.grid.finish.coord, seed=int(seed)
        )
        dispatch(LoadWalls(tuple(walls)))
        st.rerun()

    cells = st.text_area(
        "Toggle cells",
        placeholder="7,20\n2,5:12,5",
        help="One row,col per line (or separated by ;). row,col:row,col toggles a rectangle.",
    )
    if st.button("Toggle walls", use_container_width=True) and cells.strip():
        try:
            dispatch(ToggleWalls(tuple(parse_cells(cells))))
            st.rerun()
        except ValueError as e:
            st.error(str(e))

    if st.button("Clear walls", use_container_width=True):
        dispatch(ClearWalls())
        st.rerun()

if algorithm != state.algorithm:
    dispatch(SelectAlgorithm(algorithm))
    state = st.session_state.viz

if state.has_pending_endpoints:
    st.info("Endpoints changed. Press Apply to rebuild the grid.")

col1, col2 = st.columns([1, 1])
with col1:
    visualize_clicked = st.button(f"Visualize {state.algorithm}", type="primary", use_container_width=True)
with col2:
    compare_clicked = st.button("Compare all algorithms", use_container_width=True)

if visualize_clicked:
    dispatch(Visualize())
    dispatch(RevealCost())
    state = st.session_state.viz

st.plotly_chart(create_grid_figure(state.grid, state.last_run), use_container_width=True)

if state.show_cost and state.last_run:
    run = state.last_run
    c1, c2, c3 = st.columns(3)
    c1.metric("Cost", run.cost if run.path_found else "No path")
    c2.metric("Visited", run.visited_count)
    c3.metric("Time", format_execution_time(run.execution_time_ms))
    if run.negative_cycle:
        st.warning("Negative weight cycle detected")

if compare_clicked:
    runs = {name: run_search(state.grid, name) for name in ALGORITHM_NAMES}
    st.plotly_chart(create_comparison_chart(runs), use_container_width=True)
    st.caption(
        " · ".join(
            f"{name}: cost {run.cost}" if run.path_found else f"{name}: no path"
            for name, run in runs.items()
        )
    )
