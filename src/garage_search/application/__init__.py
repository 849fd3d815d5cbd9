"""Application layer: the search engine orchestrating matching and enrichment."""

from .search_engine import SearchEngine

__all__ = ["SearchEngine"]
