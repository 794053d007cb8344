"""Result types for the matcher.

A match either resolves to one canonical candidate or fails in one of
two ways. The boundary layer turns failures into exceptions.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional


class MatchOutcome(Enum):
    """How a match call ended."""
    MATCHED = auto()     # Resolved to a single canonical candidate
    NO_MATCH = auto()    # Input is not a prefix of any candidate
    AMBIGUOUS = auto()   # Several matches that the shortest one doesn't reconcile


@dataclass(frozen=True)
class MatchResult:
    """Tagged result of a single match call."""

    outcome: MatchOutcome

    value: Optional[str] = None
    """Canonical candidate string (only when MATCHED)."""

    candidates: List[str] = field(default_factory=list)
    """Full candidate list for NO_MATCH, matched subset otherwise."""

    @property
    def ok(self) -> bool:
        """Return True if the match resolved to a single candidate."""
        return self.outcome is MatchOutcome.MATCHED

    def unwrap(self) -> str:
        """Return the canonical string.

        Raises:
            ValueError: If the match did not resolve.
        """
        if not self.ok:
            raise ValueError(f"Match did not resolve: {self.outcome.name}")
        return self.value
