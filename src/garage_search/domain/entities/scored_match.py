"""Scored match domain entities."""

from dataclasses import dataclass
from typing import Union

from ..value_objects.match_mode import MatchType


@dataclass(frozen=True)
class FuzzyMatch:
    """A candidate string with its tiered similarity score."""

    value: str
    score: float


@dataclass(frozen=True)
class ScoredMatch:
    """A license plate matched by one search strategy."""

    license_plate: str
    score: float
    match_type: Union[MatchType, str]

    def __post_init__(self):
        """Validate entity invariants."""
        if not isinstance(self.match_type, MatchType):
            object.__setattr__(self, 'match_type', MatchType(self.match_type))

        if not (0.0 <= self.score <= 1.0):
            raise ValueError(f"Match score must be between 0.0 and 1.0: {self.score}")

        if self.match_type is MatchType.EXACT and self.score != 1:
            raise ValueError(f"Exact matches must score 1.0: {self.score}")

    @property
    def sort_key(self):
        """Ranking key: match type priority first, then score descending."""
        return (self.match_type.priority, -self.score)

    def __str__(self) -> str:
        return f"ScoredMatch({self.license_plate}, {self.score:.3f}, {self.match_type.value})"
