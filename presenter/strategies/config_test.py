import json
from pathlib import Path

import pytest

from presenter.domain.types import StrategyConfig
from presenter.strategies.config import dump_strategies
from presenter.strategies.config import load_strategies
from presenter.strategies.config import strategies_from_dict


class TestStrategiesFromDict:
  """Tests for strategies_from_dict."""

  def test_builds_configs(self):
    """Each entry becomes a StrategyConfig."""
    result = strategies_from_dict({
        'public': {
            'blacklist': ['ssn']
        },
        'card': {
            'whitelist': ['firstName'],
            'customAttributes': ['salutation'],
        },
    })

    assert result['public'] == StrategyConfig(blacklist=['ssn'])
    assert result['card'].custom_attributes == ('salutation',)

  def test_not_a_mapping(self):
    """Top-level lists are rejected."""
    with pytest.raises(ValueError, match='mapping of name'):
      strategies_from_dict([{'blacklist': ['ssn']}])

  def test_invalid_entry_named(self):
    """Errors name the offending strategy."""
    with pytest.raises(ValueError, match="Invalid strategy 'broken'"):
      strategies_from_dict({'broken': {'greylist': ['a']}})

  def test_non_mapping_entry(self):
    """An entry that is not a mapping is reported as invalid."""
    with pytest.raises(ValueError, match="Invalid strategy 'broken'"):
      strategies_from_dict({'broken': ['ssn']})


class TestLoadStrategies:
  """Tests for load_strategies and dump_strategies."""

  def test_load_file(self, tmp_path):
    """Strategies load from a JSON file."""
    path = tmp_path / 'strategies.json'
    path.write_text(json.dumps({'public': {'blacklist': ['ssn']}}))

    result = load_strategies(path)

    assert result == {'public': StrategyConfig(blacklist=['ssn'])}

  def test_missing_file(self):
    """A missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError, match='Strategy file not found'):
      load_strategies(Path('does/not/exist.json'))

  def test_dump_then_load(self, tmp_path):
    """Dumped strategies load back equal."""
    strategies = {
        'card':
            StrategyConfig(whitelist=['firstName'],
                           custom_attributes=['salutation', 'fullName']),
        'public':
            StrategyConfig(blacklist=['ssn']),
    }
    path = tmp_path / 'nested' / 'strategies.json'

    dump_strategies(strategies, path)

    assert load_strategies(path) == strategies
