"""License plate search and fuzzy matching for a parking garage operations API."""

from .application.search_engine import SearchEngine
from .domain.exceptions import LookupFailedError, MissingArgumentError, SearchEngineError
from .domain.value_objects.match_mode import MatchMode, MatchType
from .domain.value_objects.search_options import SearchOptions

__version__ = "1.0.0"

__all__ = [
    "SearchEngine",
    "SearchEngineError",
    "MissingArgumentError",
    "LookupFailedError",
    "MatchMode",
    "MatchType",
    "SearchOptions",
]
