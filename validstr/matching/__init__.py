"""Case-insensitive prefix matching against a fixed list of strings.

The matcher expands abbreviated input to its canonical form:

- "r" against ["red", "green", "blue"] resolves to "red"
- "b" against ["blue", "black"] is ambiguous
- "x" against ["red", "green"] matches nothing

Example:
    from validstr.matching import match

    result = match("oct", ["octave", "Oct", "octopus", "octaves"])
    if result.ok:
        print(result.value)  # "Oct"
"""

from .result import MatchOutcome, MatchResult
from .engine import ascii_lower, prefix_equal, find_matches, match

__all__ = [
    # Result types
    'MatchOutcome',
    'MatchResult',
    # Comparison helpers
    'ascii_lower',
    'prefix_equal',
    # Matcher
    'find_matches',
    'match',
]
