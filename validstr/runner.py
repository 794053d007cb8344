"""Command line interface for validating strings.

Two commands:

    python -m validstr match VALUE CHOICE [CHOICE ...]
    python -m validstr check options.yaml [--set KEY=VALUE ...]
"""

import sys
from pathlib import Path
from typing import Dict, List, Optional

from .validate import ValidationError, validate_string


def run_match(
    value: str,
    choices: List[str],
    funcname: Optional[str] = None,
    varname: Optional[str] = None,
    position: int = 0,
    verbose: bool = False,
) -> str:
    """Expand a single value and report progress when verbose."""
    if verbose:
        print(f"Matching '{value}' against {len(choices)} choice(s)", file=sys.stderr)

    resolved = validate_string(value, choices, funcname, varname, position)

    if verbose:
        print(f"Resolved '{value}' to '{resolved}'", file=sys.stderr)
    return resolved


def run_check(
    yaml_path: Path,
    overrides: Optional[Dict[str, str]] = None,
    verbose: bool = False,
) -> Dict[str, str]:
    """Load an options file and resolve its values.

    Args:
        yaml_path: Path to the YAML options file
        overrides: Values replacing or extending the file's values
        verbose: Print progress information

    Returns:
        Mapping of option name to canonical choice
    """
    from .yaml import (
        parse_yaml_file,
        canonical_keys,
        check_defaults,
        resolve_values,
    )

    config = parse_yaml_file(yaml_path)

    if verbose:
        print(f"Loaded {len(config.options)} option(s) from {yaml_path}", file=sys.stderr)
        for spec in config.options.values():
            print(f"  - {spec.name}: {', '.join(spec.choices)}", file=sys.stderr)

    check_defaults(config)

    # Merge by full option name so 'c' overrides 'color'
    values = canonical_keys(config, config.values)
    if overrides:
        values.update(canonical_keys(config, overrides))

    return resolve_values(config, values)


def _parse_assignments(assignments: List[str]) -> Dict[str, str]:
    """Split KEY=VALUE strings.

    Raises:
        ValueError: If an assignment has no '='.
    """
    result = {}
    for item in assignments:
        key, sep, value = item.partition('=')
        if not sep or not key:
            raise ValueError(f"Expected KEY=VALUE, got '{item}'")
        result[key] = value
    return result


def main(args: Optional[List[str]] = None) -> int:
    """CLI entry point.

    Usage:
        python -m validstr [-v] match VALUE CHOICE [CHOICE ...]
        python -m validstr [-v] check options.yaml [--set KEY=VALUE ...]

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    import argparse

    parser = argparse.ArgumentParser(
        description='Expand abbreviated strings to one of a set of choices',
        prog='python -m validstr',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Print progress information',
    )
    commands = parser.add_subparsers(dest='command', required=True)

    match_cmd = commands.add_parser('match', help='Expand a single value')
    match_cmd.add_argument('value', help='Value to expand')
    match_cmd.add_argument('choices', nargs='+', help='Allowed strings')
    match_cmd.add_argument(
        '--funcname',
        default=None,
        help='Function name for error messages',
    )
    match_cmd.add_argument(
        '--varname',
        default=None,
        help='Variable name for error messages',
    )
    match_cmd.add_argument(
        '--position',
        type=int,
        default=0,
        help='Argument position for error messages (default: 0, omitted)',
    )

    check_cmd = commands.add_parser('check', help='Resolve values in a YAML file')
    check_cmd.add_argument('yaml_file', help='Path to the YAML options file')
    check_cmd.add_argument(
        '--set',
        dest='assignments',
        action='append',
        default=[],
        metavar='KEY=VALUE',
        help='Set or override a value (repeatable)',
    )

    parsed = parser.parse_args(args)

    try:
        if parsed.command == 'match':
            print(run_match(
                parsed.value,
                parsed.choices,
                funcname=parsed.funcname,
                varname=parsed.varname,
                position=parsed.position,
                verbose=parsed.verbose,
            ))
            return 0

        resolved = run_check(
            Path(parsed.yaml_file),
            overrides=_parse_assignments(parsed.assignments),
            verbose=parsed.verbose,
        )
        for name, value in resolved.items():
            print(f"{name}={value}")
        return 0

    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if parsed.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
