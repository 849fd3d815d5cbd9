"""Search options value object."""

from dataclasses import dataclass
from typing import Union

from .match_mode import MatchMode


@dataclass(frozen=True)
class SearchOptions:
    """Immutable options for a single plate search.

    Bounds on ``threshold`` and ``max_results`` are enforced by the request
    layer before the options reach the engine.
    """

    mode: Union[MatchMode, str] = MatchMode.ALL
    threshold: float = 0.6
    max_results: int = 20

    def __post_init__(self):
        """Coerce mode strings into MatchMode."""
        if not isinstance(self.mode, MatchMode):
            object.__setattr__(self, 'mode', MatchMode(self.mode))

    @classmethod
    def from_settings(cls, settings) -> 'SearchOptions':
        """Create options from the configured defaults."""
        return cls(
            mode=settings.default_search_mode,
            threshold=settings.default_threshold,
            max_results=settings.default_max_results
        )

    def __str__(self) -> str:
        return f"SearchOptions({self.mode.value}, threshold={self.threshold}, max_results={self.max_results})"
