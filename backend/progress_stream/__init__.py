"""Incremental progress streaming over Server-Sent Events."""

__version__ = "1.0.0"
