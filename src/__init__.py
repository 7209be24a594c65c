"""
Grid Pathfinding Visualizer.

An educational tool that runs Dijkstra, Bellman-Ford and A* on a
4-connected grid and replays each search as an animation.
"""

__version__ = "0.1.0"
