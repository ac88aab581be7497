"""
Mapping store module for URL shortener.

Implements Strategy Pattern so the service layer only depends on MappingStore.
"""

from .strategies import MappingStore, InMemoryMappingStore

__all__ = [
    "MappingStore",
    "InMemoryMappingStore",
]
