"""Tests for resolving configured values."""

import pytest

pytest.importorskip("yaml")

from validstr import AmbiguousMatchError, NoMatchError
from validstr.yaml import (
    ConflictingValuesError,
    canonical_keys,
    check_defaults,
    parse_yaml_string,
    resolve_default,
    resolve_values,
)


OPTIONS = """
options:
  color:
    choices: [red, green, blue, black]
    default: r
  mode: [fast, slow]
  level: [low, Lower, lowest]
"""


@pytest.fixture
def config():
    return parse_yaml_string(OPTIONS, name='plot')


class TestResolveValues:
    """Tests for resolve_values."""

    def test_values_from_config(self):
        """Test values section is resolved."""
        config = parse_yaml_string(OPTIONS + "values:\n  mode: FA\n  level: low\n")
        assert resolve_values(config) == {
            'color': 'red',
            'mode': 'fast',
            'level': 'low',
        }

    def test_default_used_when_missing(self, config):
        """Test missing value falls back to the resolved default."""
        assert resolve_values(config, {}) == {'color': 'red'}

    def test_explicit_value_overrides_default(self, config):
        """Test given value wins over default."""
        assert resolve_values(config, {'color': 'gr'})['color'] == 'green'

    def test_abbreviated_key(self, config):
        """Test option names may be abbreviated."""
        assert resolve_values(config, {'m': 's'})['mode'] == 'slow'

    def test_declaration_order(self, config):
        """Test result follows option declaration order."""
        result = resolve_values(config, {'level': 'LOWER', 'mode': 'f'})
        assert list(result) == ['color', 'mode', 'level']
        assert result['level'] == 'Lower'

    def test_ambiguous_value(self, config):
        """Test ambiguous value names the option."""
        with pytest.raises(AmbiguousMatchError) as excinfo:
            resolve_values(config, {'color': 'b'})
        assert str(excinfo.value) == (
            "validatestring: plot: color allows multiple unique matches:\n"
            "blue, black"
        )

    def test_unknown_value(self, config):
        """Test value matching nothing."""
        with pytest.raises(NoMatchError, match="plot: mode does not match any of\nfast, slow"):
            resolve_values(config, {'mode': 'medium'})

    def test_unknown_key(self, config):
        """Test key matching no option."""
        with pytest.raises(NoMatchError, match="plot: option name does not match"):
            resolve_values(config, {'size': 'big'})

    def test_abbreviation_and_full_key_conflict(self):
        """Test two keys naming the same option are rejected."""
        config = parse_yaml_string(
            "options:\n  color: [red, blue]\nvalues:\n  c: red\n  color: blue\n"
        )
        with pytest.raises(ConflictingValuesError) as excinfo:
            resolve_values(config)
        assert excinfo.value.option == 'color'
        assert excinfo.value.keys == ['c', 'color']
        assert str(excinfo.value) == (
            "validatestring: config: keys 'c' and 'color' both set option 'color'"
        )

    def test_two_abbreviations_conflict(self, config):
        """Test different abbreviations of one option conflict."""
        with pytest.raises(ConflictingValuesError):
            resolve_values(config, {'mo': 'fast', 'mod': 'slow'})

    def test_canonical_keys(self, config):
        """Test keys are expanded to full option names."""
        assert canonical_keys(config, {'c': 'r', 'l': 'low'}) == {
            'color': 'r',
            'level': 'low',
        }

    def test_no_options_declared(self):
        """Test any key is unknown when nothing is declared."""
        config = parse_yaml_string("values:\n  mode: fast\n")
        with pytest.raises(NoMatchError) as excinfo:
            resolve_values(config)
        assert excinfo.value.candidates == []


class TestDefaults:
    """Tests for default resolution."""

    def test_resolve_default(self, config):
        """Test abbreviated default is expanded."""
        assert resolve_default(config, 'color') == 'red'

    def test_no_default(self, config):
        """Test option without default."""
        with pytest.raises(KeyError):
            resolve_default(config, 'mode')

    def test_check_defaults_passes(self, config):
        """Test valid defaults."""
        check_defaults(config)

    def test_check_defaults_bad_default(self):
        """Test default that is not a valid choice."""
        config = parse_yaml_string("""
options:
  mode:
    choices: [fast, slow]
    default: medium
""")
        with pytest.raises(NoMatchError, match="mode default does not match"):
            check_defaults(config)
