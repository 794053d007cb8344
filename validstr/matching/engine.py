"""Prefix matching with shortest-match disambiguation.

Given an input string and an ordered list of candidates, the engine
collects every candidate the input is a case-insensitive prefix of and
resolves that set:

- no candidates: NO_MATCH
- one candidate: that candidate
- several: the shortest one wins if it is a prefix of all the others,
  otherwise AMBIGUOUS

Only ASCII letters fold case. Each call is independent; nothing is cached.
"""

from typing import List, Sequence

from .result import MatchOutcome, MatchResult

_ASCII_LOWER = str.maketrans(
    'ABCDEFGHIJKLMNOPQRSTUVWXYZ',
    'abcdefghijklmnopqrstuvwxyz',
)


def ascii_lower(text: str) -> str:
    """Lower-case ASCII letters only, leaving every other character as is."""
    return text.translate(_ASCII_LOWER)


def prefix_equal(prefix: str, text: str, length: int) -> bool:
    """Compare the first ``length`` characters of two strings, ignoring case.

    Both strings must be at least ``length`` characters long, so a
    candidate shorter than the input never matches it.

    Args:
        prefix: First string (usually the input).
        text: Second string (usually a candidate).
        length: Number of leading characters to compare.

    Returns:
        True if the leading characters are equal ignoring ASCII case.
    """
    if len(prefix) < length or len(text) < length:
        return False
    return ascii_lower(prefix[:length]) == ascii_lower(text[:length])


def find_matches(value: str, candidates: Sequence[str]) -> List[int]:
    """Return indices of candidates that ``value`` is a prefix of.

    An empty ``value`` matches every candidate.

    Args:
        value: The string to look up.
        candidates: Allowed strings, in order.

    Returns:
        Indices into ``candidates`` in list order.
    """
    length = len(value)
    return [
        i for i, candidate in enumerate(candidates)
        if prefix_equal(value, candidate, length)
    ]


def match(value: str, candidates: Sequence[str]) -> MatchResult:
    """Resolve ``value`` to a single canonical candidate.

    Args:
        value: The string to validate.
        candidates: Non-empty ordered list of allowed strings.

    Returns:
        MatchResult. On success ``value`` holds the candidate in its
        original casing and ``candidates`` the whole match set.

    Example:
        match("oct", ["octave", "Oct", "octopus", "octaves"]).value  # "Oct"
        match("abc", ["abc1", "def", "abc2"]).outcome  # AMBIGUOUS
    """
    indices = find_matches(value, candidates)
    matched = [candidates[i] for i in indices]

    if not matched:
        return MatchResult(MatchOutcome.NO_MATCH, candidates=list(candidates))

    if len(matched) == 1:
        return MatchResult(MatchOutcome.MATCHED, value=matched[0], candidates=matched)

    # First of the shortest matches is the pivot; later ties are not compared
    # with each other, only with the pivot.
    pivot_idx = 0
    for i, candidate in enumerate(matched):
        if len(candidate) < len(matched[pivot_idx]):
            pivot_idx = i
    pivot = matched[pivot_idx]

    for i, candidate in enumerate(matched):
        if i != pivot_idx and not prefix_equal(pivot, candidate, len(pivot)):
            return MatchResult(MatchOutcome.AMBIGUOUS, candidates=matched)

    return MatchResult(MatchOutcome.MATCHED, value=pivot, candidates=matched)
