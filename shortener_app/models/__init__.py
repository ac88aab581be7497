"""
Data models for the URL shortener.

These are plain value objects: the mapping store keeps everything in memory,
there is no ORM layer.
"""

from .mapping import AddOutcome, AddResult, UrlMapping

__all__ = ["AddOutcome", "AddResult", "UrlMapping"]
