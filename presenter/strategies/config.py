"""
Strategy files.

Named strategies can live outside the code in a JSON file mapping strategy
names to configurations, e.g.:

  {
    "stationery": {
      "whitelist": ["firstName"],
      "custom_attributes": ["salutation", "fullNameWithSalutation"]
    },
    "public": {"blacklist": ["ssn"]}
  }

Loaded strategies are merged into a presenter with
PresenterDefinition.extend(strategies=...).
"""

import json
import logging
from pathlib import Path
from typing import Dict, Mapping

from presenter.domain.types import StrategyConfig

logger = logging.getLogger(__name__)


def strategies_from_dict(
    data: Mapping[str, Mapping]) -> Dict[str, StrategyConfig]:
  """
  Build named strategies from a name -> configuration dictionary.

  Raises:
    ValueError: If the data is not a mapping or a configuration is invalid
  """
  if not isinstance(data, Mapping):
    raise ValueError('Strategies must be a mapping of name -> configuration, '
                     f'got {type(data).__name__}')

  strategies: Dict[str, StrategyConfig] = {}
  for name, config in data.items():
    try:
      strategies[name] = StrategyConfig.coerce(config)
    except (TypeError, ValueError) as e:
      raise ValueError(f"Invalid strategy '{name}': {e}") from e
  return strategies


def load_strategies(path: Path) -> Dict[str, StrategyConfig]:
  """
  Load named strategies from a JSON file.

  Args:
    path: Path to the JSON strategy file

  Returns:
    Dictionary of strategy name -> StrategyConfig

  Raises:
    FileNotFoundError: If the file does not exist
    ValueError: If the file content is not a valid strategy mapping
  """
  if not path.exists():
    raise FileNotFoundError(f'Strategy file not found: {path}')

  with open(path, 'r', encoding='utf-8') as f:
    data = json.load(f)

  strategies = strategies_from_dict(data)
  logger.debug('Loaded %d strategies from %s', len(strategies), path.name)
  return strategies


def dump_strategies(strategies: Mapping[str, StrategyConfig],
                    path: Path) -> None:
  """Write named strategies to a JSON file readable by load_strategies."""
  data = {name: config.to_dict() for name, config in strategies.items()}
  path.parent.mkdir(parents=True, exist_ok=True)
  with open(path, 'w', encoding='utf-8') as f:
    json.dump(data, f, indent=2)
