"""Scene graph, node registry, vertex layouts and 2D quad batching for a small game engine."""

__version__ = "0.1.0"