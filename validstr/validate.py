"""Argument validation and error reporting around the matcher.

``validate_string`` is the keyword entry point. ``validatestring`` keeps
the positional convention of 2 to 5 arguments::

    validatestring(value, choices)
    validatestring(value, choices, funcname)
    validatestring(value, choices, funcname, varname)
    validatestring(..., position)

Extra string arguments fill ``funcname`` then ``varname``; a trailing
number is the argument ``position`` used in error messages.

Example:
    validatestring("r", ["red", "green", "blue"])           # "red"
    validatestring("b", ["red", "green", "blue", "black"])  # AmbiguousMatchError
"""

import math
from numbers import Real
from typing import Any, List, Optional, Sequence

from .matching import MatchOutcome, match

ERROR_PREFIX = 'validatestring: '


class ValidationError(ValueError):
    """Base class for every error raised by this module."""
    pass


class InvalidArgumentCount(ValidationError):
    """Wrong number of arguments, or too many string arguments."""
    pass


class InvalidArgumentType(ValidationError):
    """An argument has the wrong type."""
    pass


class InvalidArgumentShape(ValidationError):
    """An argument has the right type but an unusable shape or value."""
    pass


class MatchError(ValidationError):
    """The input could not be resolved to a single candidate."""

    def __init__(self, message: str, value: str, context: str):
        super().__init__(message)
        self.value = value
        self.context = context


class NoMatchError(MatchError):
    """The input is not a prefix of any candidate."""

    def __init__(self, value: str, candidates: Sequence[str], context: str = ''):
        self.candidates = list(candidates)
        message = (
            f"{ERROR_PREFIX}{context}does not match any of\n"
            f"{', '.join(self.candidates)}"
        )
        super().__init__(message, value, context)


class AmbiguousMatchError(MatchError):
    """The input matches several candidates that don't share a shortest prefix."""

    def __init__(self, value: str, matches: Sequence[str], context: str = ''):
        self.matches = list(matches)
        message = (
            f"{ERROR_PREFIX}{context}allows multiple unique matches:\n"
            f"{', '.join(self.matches)}"
        )
        super().__init__(message, value, context)


def format_context(
    value: str,
    funcname: Optional[str] = None,
    varname: Optional[str] = None,
    position: int = 0,
) -> str:
    """Build the context part of an error message.

    Produces ``[funcname: ][varname | 'value' ][(argument #N) ]``. Empty
    names count as absent and a position of 0 is omitted.

    Args:
        value: The string being validated.
        funcname: Name of the calling function.
        varname: Name of the variable being validated.
        position: Argument position in the caller's signature.

    Returns:
        Context string, ending with a space.
    """
    parts = []
    if funcname:
        parts.append(f"{funcname}: ")
    if varname:
        parts.append(f"{varname} ")
    else:
        parts.append(f"'{value}' ")
    if position > 0:
        parts.append(f"(argument #{position}) ")
    return ''.join(parts)


def _is_single_line(text: str) -> bool:
    # Any line boundary str.splitlines recognises, trailing ones included
    return len((text + 'x').splitlines()) == 1


def _fail(cls, message: str):
    raise cls(ERROR_PREFIX + message)


def _check_arguments(
    value: Any,
    choices: Any,
    funcname: Any,
    varname: Any,
    position: Any,
) -> None:
    """Validate argument types and shapes, in a fixed order.

    Raises:
        InvalidArgumentType: If an argument has the wrong type.
        InvalidArgumentShape: If an argument has an unusable shape.
    """
    if not isinstance(value, str):
        _fail(InvalidArgumentType, "STR must be a character string")
    if not _is_single_line(value):
        _fail(InvalidArgumentShape, "STR must be a single row vector")

    if isinstance(choices, (str, list, tuple)) and len(choices) == 0:
        _fail(InvalidArgumentShape, "STRARRAY must be non-empty")
    if not isinstance(choices, (list, tuple)) or not all(
        isinstance(c, str) for c in choices
    ):
        _fail(InvalidArgumentType, "STRARRAY must be a cellstr")

    for label, name in (('FUNCNAME', funcname), ('VARNAME', varname)):
        if name is None:
            continue
        if not isinstance(name, str):
            _fail(InvalidArgumentType, f"{label} must be a character string")
        if name and not _is_single_line(name):
            _fail(InvalidArgumentShape, f"{label} must be a single row vector")

    if isinstance(position, bool) or not isinstance(position, int):
        _fail(InvalidArgumentType, "POSITION must be an integer")
    if position < 0:
        _fail(InvalidArgumentShape, "POSITION must be >= 0")


def validate_string(
    value: str,
    choices: Sequence[str],
    funcname: Optional[str] = None,
    varname: Optional[str] = None,
    position: int = 0,
) -> str:
    """Expand ``value`` to the one entry of ``choices`` it abbreviates.

    Matching is case-insensitive. When several choices match, the
    shortest wins if it is a prefix of all the others.

    Args:
        value: The string to validate.
        choices: Non-empty list of allowed strings.
        funcname: Calling function name, used in error messages.
        varname: Variable name, used in error messages instead of the value.
        position: Argument position, used in error messages when > 0.

    Returns:
        The matching choice in its original casing.

    Raises:
        InvalidArgumentType: If an argument has the wrong type.
        InvalidArgumentShape: If an argument has an unusable shape.
        NoMatchError: If ``value`` matches no choice.
        AmbiguousMatchError: If ``value`` matches unrelated choices.
    """
    _check_arguments(value, choices, funcname, varname, position)

    result = match(value, choices)
    if result.outcome is MatchOutcome.MATCHED:
        return result.value

    context = format_context(value, funcname, varname, position)
    if result.outcome is MatchOutcome.NO_MATCH:
        raise NoMatchError(value, result.candidates, context)
    raise AmbiguousMatchError(value, result.candidates, context)


def _split_optional(extra: List[Any]):
    """Sort optional positional arguments into names and position.

    Returns:
        Tuple of (funcname, varname, position).

    Raises:
        InvalidArgumentCount: If more than two strings are given.
        InvalidArgumentType: If an argument is neither a string nor a
            trailing number.
        InvalidArgumentShape: If the position is infinite or NaN.
    """
    position: Any = 0
    if extra and isinstance(extra[-1], Real) and not isinstance(extra[-1], bool):
        number = extra.pop()
        if not math.isfinite(number):
            _fail(InvalidArgumentShape, "POSITION must be a finite number")
        # Non-integral positions are truncated toward zero
        position = int(number)

    names = []
    for offset, arg in enumerate(extra):
        if not isinstance(arg, str):
            _fail(
                InvalidArgumentType,
                f"argument #{offset + 3} must be a character string "
                f"or a trailing position",
            )
        names.append(arg)

    if len(names) > 2:
        _fail(
            InvalidArgumentCount,
            f"invalid number of character inputs ({len(names)})",
        )

    names += [None] * (2 - len(names))
    return names[0], names[1], position


def validatestring(*args: Any) -> str:
    """Validate a string using the positional calling convention.

    Args:
        *args: ``value, choices[, funcname[, varname]][, position]``

    Optional arguments must each be a string or the trailing number.
    Anything else (``None``, a number before a name) is rejected rather
    than skipped, so a misplaced argument can't silently drop context
    from the error message.

    Returns:
        The matching choice in its original casing.

    Raises:
        InvalidArgumentCount: If fewer than 2 or more than 5 arguments
            are given, or more than two names.
        InvalidArgumentType: If an argument has the wrong type, or an
            optional argument is neither a string nor the trailing number.
        InvalidArgumentShape: If an argument has an unusable shape,
            including an infinite or NaN position.
        NoMatchError: If the value matches no choice.
        AmbiguousMatchError: If the value matches unrelated choices.
    """
    if len(args) < 2 or len(args) > 5:
        _fail(
            InvalidArgumentCount,
            f"expected 2 to 5 arguments, got {len(args)}",
        )

    value, choices = args[0], args[1]
    funcname, varname, position = _split_optional(list(args[2:]))
    return validate_string(value, choices, funcname, varname, position)
