from .match_mode import MatchMode, MatchType, is_valid_search_mode
from .search_options import SearchOptions
from .validation_result import ValidationResult

__all__ = [
    "MatchMode",
    "MatchType",
    "is_valid_search_mode",
    "SearchOptions",
    "ValidationResult",
]
