"""
Streamlit UI module.

Provides the web interface for the Grid Pathfinding Visualizer:
- Dashboard: Benchmark results per algorithm
- Visualize: Editable grid with animated search replay
"""
