"""Formatting and presentation helpers for performance profiling results."""

__version__ = "0.1.0"

__all__ = ["processlist", "resultsutil", "settings", "sourcemap", "summary", "util"]