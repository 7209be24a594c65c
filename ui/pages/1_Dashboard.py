"""
Dashboard - Benchmark results and visualizations.
"""

import streamlit as st

st.set_page_config(page_title="Dashboard", page_icon="📊", layout="wide")

st.title("Dashboard")

try:
    from ui.components.charts import create_time_boxplot, create_visited_chart
    from ui.components.data_loader import (
        clear_cache,
        get_layouts,
        get_results,
        get_results_for_layouts,
    )

    if st.button("Reload results"):
        clear_cache()

    results = get_results()
    if not results:
        st.warning("No results. Run: `python scripts/benchmark.py`")
        st.stop()

    layouts = get_layouts()
    chosen = st.multiselect("Layouts", layouts, default=layouts)
    results, summaries = get_results_for_layouts(chosen)
    if not results:
        st.info("Select at least one layout.")
        st.stop()

    # Metrics
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Algorithms", len(summaries))
    c2.metric("Runs", len(results))
    c3.metric("Paths found", sum(s.paths_found for s in summaries))
    if summaries:
        c4.metric("Fewest visits", f"{summaries[0].avg_visited:.0f}", summaries[0].algorithm)

    st.divider()

    rows = [
        {
            "Algorithm": s.algorithm,
            "Runs": s.runs,
            "Paths": s.paths_found,
            "Avg length": f"{s.avg_path_length:.1f}",
            "Avg visited": f"{s.avg_visited:.1f}",
            "Avg ms": f"{s.avg_time_ms:.2f}",
            "Median ms": f"{s.median_time_ms:.2f}",
        }
        for s in summaries
    ]
    st.dataframe(rows, use_container_width=True, hide_index=True)

    st.divider()

    col1, col2 = st.columns(2)

    with col1:
        st.plotly_chart(create_visited_chart(summaries), use_container_width=True)

    with col2:
        st.plotly_chart(create_time_boxplot(results), use_container_width=True)

except ImportError as e:
    st.error(f"Missing: {e}")
