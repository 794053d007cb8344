"""Expand abbreviated strings to one of a fixed set of choices.

Matching is a case-insensitive prefix test. When several choices match,
the shortest one wins if it is a prefix of all the others; otherwise the
input is ambiguous and rejected.

Example:
    from validstr import validatestring

    validatestring("r", ["red", "green", "blue"])            # "red"
    validatestring("oct", ["octave", "Oct", "octopus"])      # "Oct"
    validatestring("b", ["blue", "black"], "paint", "color")
    # AmbiguousMatchError: validatestring: paint: color allows multiple
    # unique matches:
    # blue, black
"""

from .matching import MatchOutcome, MatchResult, find_matches, match
from .validate import (
    ValidationError,
    InvalidArgumentCount,
    InvalidArgumentType,
    InvalidArgumentShape,
    MatchError,
    NoMatchError,
    AmbiguousMatchError,
    format_context,
    validate_string,
    validatestring,
)

__version__ = '0.1.0'

__all__ = [
    # Matcher
    'MatchOutcome',
    'MatchResult',
    'find_matches',
    'match',
    # Validation
    'validate_string',
    'validatestring',
    'format_context',
    # Errors
    'ValidationError',
    'InvalidArgumentCount',
    'InvalidArgumentType',
    'InvalidArgumentShape',
    'MatchError',
    'NoMatchError',
    'AmbiguousMatchError',
]
