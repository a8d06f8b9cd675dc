"""Command-line course planner: load a course catalog, list it, and compute a study order."""

__version__ = "1.0.0"
