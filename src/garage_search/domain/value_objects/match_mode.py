"""Match mode and match type value objects."""

from enum import Enum
from typing import Any


class MatchMode(str, Enum):
    """Strategy selector for license plate search."""
    EXACT = "exact"
    PARTIAL = "partial"
    FUZZY = "fuzzy"
    ALL = "all"

    @property
    def includes_exact(self) -> bool:
        return self in (MatchMode.EXACT, MatchMode.ALL)

    @property
    def includes_partial(self) -> bool:
        return self in (MatchMode.PARTIAL, MatchMode.ALL)

    @property
    def includes_fuzzy(self) -> bool:
        return self in (MatchMode.FUZZY, MatchMode.ALL)


class MatchType(str, Enum):
    """Strategy that produced a scored match."""
    EXACT = "exact"
    PARTIAL = "partial"
    FUZZY = "fuzzy"

    @property
    def priority(self) -> int:
        """Sort priority, lower ranks first."""
        return _MATCH_TYPE_PRIORITY[self]


_MATCH_TYPE_PRIORITY = {
    MatchType.EXACT: 0,
    MatchType.PARTIAL: 1,
    MatchType.FUZZY: 2,
}


def is_valid_search_mode(mode: Any) -> bool:
    """Check if a value names one of the supported search modes."""
    if isinstance(mode, MatchMode):
        return True
    return isinstance(mode, str) and mode in {m.value for m in MatchMode}
