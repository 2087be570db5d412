"""Digest pipeline."""

from .digest import build_digest, fetch_digest, in_window, write_digest

__all__ = ["build_digest", "fetch_digest", "in_window", "write_digest"]
