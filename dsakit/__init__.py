"""Classic data structures and algorithms in plain Python: graphs, shortest paths, linked lists and trees."""

__version__ = "0.1.0"