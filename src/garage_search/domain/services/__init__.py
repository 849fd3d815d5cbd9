from . import string_matcher
from .plate_cache import CacheEntry, PlateCache

__all__ = ["string_matcher", "CacheEntry", "PlateCache"]
