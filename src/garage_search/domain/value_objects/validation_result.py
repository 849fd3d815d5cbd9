"""Validation result value object."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a search term."""

    is_valid: bool
    errors: List[str] = field(default_factory=list)
    normalized: Optional[str] = None
