"""YAML-based option definitions for validstr.

This module provides a declarative YAML format for listing options and
the strings each accepts, and for validating configured values against
them with abbreviation expansion.

Example options.yaml:
    options:
      color:
        choices: [red, green, blue]
        default: red
      mode: [fast, slow]

    values:
      color: g
      mode: FA

Usage:
    from validstr.yaml import parse_yaml_file, resolve_values
    resolved = resolve_values(parse_yaml_file('options.yaml'))
    # {'color': 'green', 'mode': 'fast'}
"""

from .parser import (
    parse_yaml_file,
    parse_yaml_string,
    OptionSpec,
    YAMLConfig,
    YAMLParseError,
)
from .resolver import (
    ConflictingValuesError,
    canonical_keys,
    resolve_values,
    resolve_default,
    check_defaults,
)

__all__ = [
    'parse_yaml_file',
    'parse_yaml_string',
    'OptionSpec',
    'YAMLConfig',
    'YAMLParseError',
    'ConflictingValuesError',
    'canonical_keys',
    'resolve_values',
    'resolve_default',
    'check_defaults',
]
