"""
Configuration management for enumgen.
"""
import copy
from typing import Any

from pydantic import BaseModel

from enumgen.core.error_handling import ConfigurationError

_DEFAULTS = {
    'generation': {
        'marker': '@enumGenerated',
        'values_method': 'Values',
        'string_method': 'String',
        'receiver_name': 'g',
        'format_verb': '%v',
        'include_vars': False,
        'ensure_fmt_import': True
    },
    'writing': {
        'atomic': True,
        'encoding': 'utf8'
    },
    'logging': {
        'level': 'WARNING'
    }
}


class Configuration:
    """Configuration manager for enumgen."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Configuration, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        """Initialize the configuration with defaults."""
        self._config = copy.deepcopy(_DEFAULTS)

    def reset(self):
        """Restore every section to its default values."""
        self._initialize()

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        try:
            return self._config[section][key]
        except KeyError:
            return default

    def set(self, section: str, key: str, value: Any):
        """Set a configuration value. Only known settings can be changed."""
        if section not in self._config:
            raise ConfigurationError(section)
        if key not in self._config[section]:
            raise ConfigurationError(section, key)
        self._config[section][key] = value


class GenerationOptions(BaseModel):
    """Per-run settings, snapshotted from the configuration."""
    marker: str = _DEFAULTS['generation']['marker']
    values_method: str = _DEFAULTS['generation']['values_method']
    string_method: str = _DEFAULTS['generation']['string_method']
    receiver_name: str = _DEFAULTS['generation']['receiver_name']
    format_verb: str = _DEFAULTS['generation']['format_verb']
    include_vars: bool = _DEFAULTS['generation']['include_vars']
    ensure_fmt_import: bool = _DEFAULTS['generation']['ensure_fmt_import']
    atomic_write: bool = _DEFAULTS['writing']['atomic']
    encoding: str = _DEFAULTS['writing']['encoding']

    @classmethod
    def from_config(cls, **overrides) -> 'GenerationOptions':
        """Build options from the global configuration, applying ``overrides``."""
        values = dict(config._config['generation'])
        values['atomic_write'] = config.get('writing', 'atomic')
        values['encoding'] = config.get('writing', 'encoding')
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

# Initialize configuration
config = Configuration()
