"""Linear TODOs - scan, classify and link task-marker comments to tracker issues."""

__version__ = "0.3.0"
