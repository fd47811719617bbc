"""
Strategy resolution.

Turns a strategy reference into a StrategyConfig:
  - None: the empty strategy (default presentation)
  - str: a strategy registered on the presenter definition
  - StrategyConfig or mapping: an inline strategy, used as-is

Unknown names are deliberately not an error. Presenters evolve, and a caller
asking for a strategy that no longer exists gets the default presentation
instead of a crash.
"""

from collections.abc import Mapping
import logging
from typing import Any, List

from presenter.domain.types import PresenterDefinition
from presenter.domain.types import StrategyConfig

logger = logging.getLogger(__name__)

EMPTY_STRATEGY = StrategyConfig()


def resolve_strategy(definition: PresenterDefinition,
                     strategy_ref: Any = None) -> StrategyConfig:
  """
  Resolve a strategy reference against a presenter definition.

  Args:
    definition: Presenter whose named strategies are searched
    strategy_ref: None, a strategy name, or an inline configuration

  Returns:
    StrategyConfig to apply (EMPTY_STRATEGY for the default presentation)

  Raises:
    TypeError: If strategy_ref is of an unsupported type
    ValueError: If an inline mapping has unknown fields
  """
  if strategy_ref is None:
    return EMPTY_STRATEGY

  if isinstance(strategy_ref, str):
    strategies = definition.strategies
    if strategies is None:
      logger.debug("%s: no strategies defined, ignoring '%s'",
                   definition.name, strategy_ref)
      return EMPTY_STRATEGY
    if strategy_ref not in strategies:
      logger.debug("%s: unknown strategy '%s', using default presentation",
                   definition.name, strategy_ref)
      return EMPTY_STRATEGY
    return strategies[strategy_ref]

  if isinstance(strategy_ref, (StrategyConfig, Mapping)):
    return StrategyConfig.coerce(strategy_ref)

  raise TypeError('Strategy must be a name, a StrategyConfig or a mapping, '
                  f'got {type(strategy_ref).__name__}')


def list_strategies(definition: PresenterDefinition) -> List[str]:
  """List the strategy names registered on a presenter definition."""
  return list(definition.strategies or {})
