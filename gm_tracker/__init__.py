"""Tracker GM: project-tracking management console backend."""

__version__ = "0.1.0"
