"""
Grid Pathfinding Visualizer
"""

import streamlit as st

st.set_page_config(page_title="Pathfinding", page_icon="🧭", layout="wide")

st.title("Grid Pathfinding Visualizer")
st.caption("Watch Dijkstra, Bellman-Ford and A* search a grid.")

col1, col2 = st.columns(2)

with col1:
    if st.button("📊 Dashboard", use_container_width=True):
        st.switch_page("pages/1_Dashboard.py")

with col2:
    if st.button("🧭 Visualize", use_container_width=True, type="primary"):
        st.switch_page("pages/2_Visualize.py")

st.divider()

try:
    from ui.components.data_loader import get_results, get_summaries

    summaries = get_summaries()
    results = get_results()

    if summaries:
        c1, c2, c3 = st.columns(3)
        c1.metric("Algorithms", len(summaries))
        c2.metric("Runs", len(results))
        best = summaries[0]
        c3.metric("Fewest visits", f"{best.avg_visited:.0f}", best.algorithm)
except ImportError as e:
    st.error(f"Missing: {e}")
