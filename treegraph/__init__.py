"""Search trees, heaps, graph search, shortest paths and spanning trees."""

__version__ = "0.1.0"