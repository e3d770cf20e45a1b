"""Lab sample throughput metrics."""

__version__ = "1.0.0"
