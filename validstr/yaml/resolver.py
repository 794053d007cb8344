"""Resolve configured values to their canonical choices.

This module takes a parsed YAMLConfig and expands every value (and
every abbreviated option name) with the string validator.
"""

from typing import Dict, Optional

from validstr.validate import (
    ERROR_PREFIX,
    NoMatchError,
    ValidationError,
    format_context,
    validate_string,
)

from .parser import YAMLConfig


class ConflictingValuesError(ValidationError):
    """Two keys in one set of values name the same option."""

    def __init__(self, config_name: str, option: str, first: str, second: str):
        self.option = option
        self.keys = [first, second]
        super().__init__(
            f"{ERROR_PREFIX}{config_name}: keys '{first}' and '{second}' "
            f"both set option '{option}'"
        )


def canonical_keys(config: YAMLConfig, values: Dict[str, str]) -> Dict[str, str]:
    """Replace abbreviated keys with the option names they stand for.

    Args:
        config: Parsed YAML configuration
        values: Values keyed by (possibly abbreviated) option name

    Returns:
        The same values keyed by full option name

    Raises:
        NoMatchError: If a key matches no option
        AmbiguousMatchError: If a key is ambiguous
        ConflictingValuesError: If two keys expand to the same option
    """
    option_names = list(config.options)
    given = {}
    source_keys = {}
    for key, value in values.items():
        if not option_names:
            context = format_context(key, config.name, 'option name')
            raise NoMatchError(key, option_names, context)
        name = validate_string(key, option_names, config.name, 'option name')
        if name in given:
            raise ConflictingValuesError(config.name, name, source_keys[name], key)
        given[name] = value
        source_keys[name] = key
    return given


def resolve_values(
    config: YAMLConfig,
    values: Optional[Dict[str, str]] = None,
) -> Dict[str, str]:
    """Resolve values against the options declared in a config.

    Keys may be abbreviated option names. Options without a value take
    their default; options with neither are left out.

    Args:
        config: Parsed YAML configuration
        values: Values to resolve (defaults to config.values)

    Returns:
        Mapping of option name to canonical choice, in declaration order

    Raises:
        NoMatchError: If a key or value matches nothing
        AmbiguousMatchError: If a key or value is ambiguous
        ConflictingValuesError: If two keys expand to the same option
    """
    if values is None:
        values = config.values

    given = canonical_keys(config, values)

    resolved = {}
    for name, spec in config.options.items():
        if name in given:
            resolved[name] = validate_string(given[name], spec.choices, config.name, name)
        elif spec.default is not None:
            resolved[name] = resolve_default(config, name)
    return resolved


def resolve_default(config: YAMLConfig, name: str) -> str:
    """Resolve the default of one option to its canonical choice.

    Args:
        config: Parsed YAML configuration
        name: Option name (exact)

    Returns:
        Canonical choice for the default

    Raises:
        KeyError: If the option is unknown or has no default
    """
    spec = config.options[name]
    if spec.default is None:
        raise KeyError(f"Option '{name}' has no default")
    return validate_string(spec.default, spec.choices, config.name, f"{name} default")


def check_defaults(config: YAMLConfig) -> None:
    """Ensure every declared default resolves against its choices.

    Raises:
        NoMatchError: If a default matches nothing
        AmbiguousMatchError: If a default is ambiguous
    """
    for name, spec in config.options.items():
        if spec.default is not None:
            resolve_default(config, name)
