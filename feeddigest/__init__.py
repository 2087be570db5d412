"""Fetch recent articles from RSS/Atom feeds into a single JSON digest."""

__version__ = "1.0.0"
