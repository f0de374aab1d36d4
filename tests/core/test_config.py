import pytest

from enumgen.core.config import Configuration, GenerationOptions, config
from enumgen.core.error_handling import ConfigurationError


def test_configuration_is_singleton():
    assert Configuration() is config


def test_defaults():
    assert config.get('generation', 'marker') == '@enumGenerated'
    assert config.get('writing', 'atomic') is True
    assert config.get('missing', 'key', 'fallback') == 'fallback'


def test_set_and_reset():
    config.set('generation', 'receiver_name', 'e')
    assert config.get('generation', 'receiver_name') == 'e'
    config.reset()
    assert config.get('generation', 'receiver_name') == 'g'


def test_unknown_setting_rejected():
    with pytest.raises(ConfigurationError):
        config.set('generation', 'no_such_key', 1)
    with pytest.raises(ConfigurationError):
        config.set('no_such_section', 'key', 1)


def test_options_snapshot_configuration():
    config.set('generation', 'include_vars', True)
    config.set('writing', 'atomic', False)
    options = GenerationOptions.from_config(marker='@enum', receiver_name=None)
    assert options.include_vars is True
    assert options.atomic_write is False
    assert options.marker == '@enum'
    assert options.receiver_name == 'g'
