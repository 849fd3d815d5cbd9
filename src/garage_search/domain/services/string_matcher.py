"""String matching for partial and fuzzy license plate search.

Everything in this module is pure: no I/O and no shared state. Plates are
compared case-insensitively and are assumed to be ASCII alphanumeric.
"""

import re
from typing import Any, Iterable, List, Optional, Sequence, Union

from rapidfuzz.distance import Levenshtein

from ..entities.scored_match import FuzzyMatch, ScoredMatch
from ..value_objects.match_mode import MatchMode, MatchType
from ..value_objects.validation_result import ValidationResult

MAX_SEARCH_TERM_LENGTH = 20
MIN_SUGGESTION_LENGTH = 2

# Tiered scores for string containment
EXACT_SCORE = 1.0
PREFIX_SCORE = 0.9
CONTAINS_SCORE = 0.8

_NON_PLATE_CHARS = re.compile(r'[^A-Z0-9]')
_SEARCH_TERM_CHARS = re.compile(r'[A-Za-z0-9 \-]*')

ERROR_NOT_A_STRING = "Search term is required and must be a string"
ERROR_EMPTY = "Search term cannot be empty"
ERROR_INVALID_CHARACTERS = "Search term contains invalid characters for license plates"


def levenshtein_distance(a: str, b: str) -> int:
    """Minimum number of single-character edits turning ``a`` into ``b``."""
    return Levenshtein.distance(a, b)


def calculate_similarity(a: str, b: str) -> float:
    """
    Normalized inverse edit distance between two strings.

    Returns:
        1.0 for identical strings, 0.0 when exactly one side is empty,
        otherwise ``1 - distance / max(len(a), len(b))``.
    """
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0

    distance = levenshtein_distance(a, b)
    return 1.0 - distance / max(len(a), len(b))


def contains_partial(target: str, search: str) -> bool:
    """Check if target contains search term (case insensitive)."""
    if not target or not search:
        return False
    return search.upper() in target.upper()


def starts_with(target: str, search: str) -> bool:
    """Check if target starts with search term (case insensitive)."""
    if not target or not search:
        return False
    return target.upper().startswith(search.upper())


def ends_with(target: str, search: str) -> bool:
    """Check if target ends with search term (case insensitive)."""
    if not target or not search:
        return False
    return target.upper().endswith(search.upper())


def _tiered_score(search_upper: str, candidate_upper: str) -> float:
    """Score a candidate by the highest containment tier it reaches."""
    if candidate_upper == search_upper:
        return EXACT_SCORE
    if candidate_upper.startswith(search_upper):
        return PREFIX_SCORE
    if search_upper in candidate_upper:
        return CONTAINS_SCORE
    return calculate_similarity(search_upper, candidate_upper)


def find_fuzzy_matches(search: str,
                       candidates: Optional[Iterable[str]],
                       threshold: float = 0.3,
                       max_results: int = 50,
                       exact_first: bool = True) -> List[FuzzyMatch]:
    """
    Rank candidates against a search term using tiered scoring.

    Args:
        search: Search term
        candidates: Candidate strings; empty entries are skipped
        threshold: Minimum score for a candidate to be kept
        max_results: Maximum number of matches returned
        exact_first: Place every exact match ahead of all other matches

    Returns:
        Matches sorted by score, highest first
    """
    if not search or not candidates:
        return []

    search_upper = search.upper()
    matches = []

    for candidate in candidates:
        if not candidate:
            continue

        score = _tiered_score(search_upper, candidate.upper())
        if score >= threshold:
            matches.append(FuzzyMatch(value=candidate, score=score))

    def sort_key(match: FuzzyMatch):
        is_exact = exact_first and match.score == EXACT_SCORE
        return (0 if is_exact else 1, -match.score)

    matches.sort(key=sort_key)
    return matches[:max_results]


def _match_plate(search_upper: str,
                 plate: str,
                 mode: MatchMode,
                 threshold: float) -> Optional[ScoredMatch]:
    """Apply the enabled strategies in priority order; the first that fires wins."""
    plate_upper = plate.upper()

    if mode.includes_exact and plate_upper == search_upper:
        return ScoredMatch(license_plate=plate, score=EXACT_SCORE, match_type=MatchType.EXACT)

    if mode.includes_partial and search_upper in plate_upper:
        score = PREFIX_SCORE if plate_upper.startswith(search_upper) else CONTAINS_SCORE
        return ScoredMatch(license_plate=plate, score=score, match_type=MatchType.PARTIAL)

    if mode.includes_fuzzy:
        similarity = calculate_similarity(search_upper, plate_upper)
        if similarity >= threshold:
            return ScoredMatch(license_plate=plate, score=similarity, match_type=MatchType.FUZZY)

    return None


def search_license_plates(search: str,
                          license_plates: Optional[Sequence[str]],
                          mode: Union[MatchMode, str] = MatchMode.ALL,
                          threshold: float = 0.6,
                          max_results: int = 20) -> List[ScoredMatch]:
    """
    Search license plates with the strategies selected by ``mode``.

    Each plate contributes at most one match. In ``all`` mode an exact hit
    hides the partial and fuzzy strategies for that plate, and a partial hit
    hides the fuzzy one.

    Args:
        search: Search term
        license_plates: Plates to search
        mode: exact, partial, fuzzy or all
        threshold: Minimum similarity for a fuzzy match
        max_results: Maximum number of matches returned

    Returns:
        Matches ordered by match type (exact, partial, fuzzy) then score
    """
    if not search or not license_plates:
        return []

    mode = MatchMode(mode)
    search_upper = search.upper()
    results = []

    for plate in license_plates:
        if not plate:
            continue

        match = _match_plate(search_upper, plate, mode, threshold)
        if match is not None:
            results.append(match)

    results.sort(key=lambda m: m.sort_key)
    return results[:max_results]


def normalize_license_plate(license_plate: Any) -> str:
    """Uppercase a plate and strip everything but A-Z and 0-9.

    Never raises; non-string input normalizes to an empty string.
    """
    if not isinstance(license_plate, str):
        return ""
    return _NON_PLATE_CHARS.sub('', license_plate.upper())


def validate_search_term(search: Any,
                         max_length: int = MAX_SEARCH_TERM_LENGTH) -> ValidationResult:
    """
    Validate a license plate search term.

    All problems are collected rather than stopping at the first one.
    ``normalized`` is only populated for valid terms.
    """
    errors = []

    if not isinstance(search, str):
        errors.append(ERROR_NOT_A_STRING)
    else:
        trimmed = search.strip()

        if len(trimmed) == 0:
            errors.append(ERROR_EMPTY)

        if len(trimmed) > max_length:
            errors.append(f"Search term cannot exceed {max_length} characters")

        # Partial searches may keep separators
        if not _SEARCH_TERM_CHARS.fullmatch(trimmed):
            errors.append(ERROR_INVALID_CHARACTERS)

    is_valid = not errors
    return ValidationResult(
        is_valid=is_valid,
        errors=errors,
        normalized=normalize_license_plate(search) if is_valid else None
    )


def create_search_suggestions(text: str,
                              candidates: Iterable[str],
                              max_suggestions: int = 5) -> List[str]:
    """Suggest candidates for partial input, exact hits first."""
    if not isinstance(text, str) or len(text) < MIN_SUGGESTION_LENGTH:
        return []

    matches = find_fuzzy_matches(
        text,
        candidates,
        threshold=0.4,
        max_results=max_suggestions,
        exact_first=True
    )
    return [match.value for match in matches]


def highlight_matches(text: str,
                      search: str,
                      highlight_start: str = "<mark>",
                      highlight_end: str = "</mark>") -> str:
    """Wrap every case-insensitive occurrence of ``search`` in ``text``."""
    if not text or not search:
        return text

    pattern = re.compile(re.escape(search), re.IGNORECASE)
    return pattern.sub(lambda m: f"{highlight_start}{m.group(0)}{highlight_end}", text)


def get_search_statistics(search_term: str,
                          results: Sequence[ScoredMatch],
                          execution_time_ms: float) -> dict:
    """Summarize a result list for performance monitoring."""
    counts = {match_type: 0 for match_type in MatchType}
    for result in results:
        counts[result.match_type] += 1

    average_score = sum(r.score for r in results) / len(results) if results else 0.0

    return {
        "search_term": search_term,
        "result_count": len(results),
        "execution_time_ms": execution_time_ms,
        "exact_matches": counts[MatchType.EXACT],
        "partial_matches": counts[MatchType.PARTIAL],
        "fuzzy_matches": counts[MatchType.FUZZY],
        "average_score": round(average_score, 2)
    }
