"""HTTP surface for the garage search service."""

from .api import create_app, get_search_engine, router

__all__ = ["create_app", "get_search_engine", "router"]
