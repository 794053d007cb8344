"""YAML parsing and validation for option definitions.

This module handles parsing option files and validating their structure.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Any, Optional, Union

try:
    import yaml
except ImportError:
    yaml = None


@dataclass
class OptionSpec:
    """A named option and the strings it accepts."""
    name: str
    choices: List[str]
    default: Optional[str] = None
    doc: Optional[str] = None


@dataclass
class YAMLConfig:
    """Parsed YAML configuration."""
    options: Dict[str, OptionSpec] = field(default_factory=dict)
    values: Dict[str, str] = field(default_factory=dict)
    name: str = 'config'
    """Label used as the function name in validation messages."""


class YAMLParseError(Exception):
    """Error parsing or validating YAML file."""
    pass


def _ensure_yaml_available():
    """Raise ImportError if PyYAML is not installed."""
    if yaml is None:
        raise ImportError(
            "PyYAML is required for YAML option files. "
            "Install it with: pip install pyyaml"
        )


def parse_yaml_file(path: Union[str, Path]) -> YAMLConfig:
    """Parse and validate an options YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        YAMLConfig with parsed options and values. Its name is the file stem.

    Raises:
        YAMLParseError: If the file is invalid or missing required fields
        FileNotFoundError: If the file doesn't exist
        ImportError: If PyYAML is not installed
    """
    _ensure_yaml_available()

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")

    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise YAMLParseError(f"Invalid YAML syntax: {e}")

    return _validate_yaml_data(data, name=path.stem)


def parse_yaml_string(content: str, name: str = 'config') -> YAMLConfig:
    """Parse YAML content from a string.

    Args:
        content: YAML content as string
        name: Label used in validation messages

    Returns:
        YAMLConfig with parsed options and values
    """
    _ensure_yaml_available()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise YAMLParseError(f"Invalid YAML syntax: {e}")

    return _validate_yaml_data(data, name=name)


def _validate_yaml_data(data: Any, name: str) -> YAMLConfig:
    """Validate parsed YAML data structure.

    Args:
        data: Parsed YAML document
        name: Label for the resulting config

    Returns:
        Validated YAMLConfig

    Raises:
        YAMLParseError: If validation fails
    """
    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise YAMLParseError("YAML root must be a mapping")

    options = data.get('options', {})
    if not isinstance(options, dict):
        raise YAMLParseError("'options' must be a mapping")

    values = data.get('values', {})
    if values is None:
        values = {}
    if not isinstance(values, dict):
        raise YAMLParseError("'values' must be a mapping")

    specs = {}
    for opt_name, spec in options.items():
        specs[str(opt_name)] = _validate_option(str(opt_name), spec)

    validated_values = {}
    for key, value in values.items():
        if not isinstance(value, str):
            raise YAMLParseError(f"Value for '{key}' must be a string")
        validated_values[str(key)] = value

    return YAMLConfig(options=specs, values=validated_values, name=name)


def _validate_option(name: str, spec: Any) -> OptionSpec:
    """Validate a single option definition.

    Args:
        name: Option name (for error messages)
        spec: Option specification (list of choices or mapping)

    Returns:
        OptionSpec

    Raises:
        YAMLParseError: If validation fails
    """
    if isinstance(spec, list):
        # Short form: just the choices
        return OptionSpec(name=name, choices=_validate_choices(name, spec))

    if not isinstance(spec, dict):
        raise YAMLParseError(
            f"Option '{name}' must be a list of choices or a mapping"
        )

    # Long form: dict with choices and options
    if 'choices' not in spec:
        raise YAMLParseError(f"Option '{name}' missing required field 'choices'")
    if not isinstance(spec['choices'], list):
        raise YAMLParseError(f"Option '{name}': 'choices' must be a list")

    default = spec.get('default')
    if default is not None and not isinstance(default, str):
        raise YAMLParseError(f"Option '{name}': 'default' must be a string")

    doc = spec.get('doc')
    if doc is not None and not isinstance(doc, str):
        raise YAMLParseError(f"Option '{name}': 'doc' must be a string")

    return OptionSpec(
        name=name,
        choices=_validate_choices(name, spec['choices']),
        default=default,
        doc=doc,
    )


def _validate_choices(name: str, choices: List[Any]) -> List[str]:
    if not choices:
        raise YAMLParseError(f"Option '{name}': 'choices' must be non-empty")
    for i, choice in enumerate(choices):
        if not isinstance(choice, str) or not choice:
            raise YAMLParseError(
                f"Option '{name}': choice {i} must be a non-empty string"
            )
    return list(choices)
