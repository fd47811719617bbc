"""
Consistency checks for presenter definitions.

A strategy that names a custom attribute the presenter does not declare only
fails when a model is presented with it. check_definition() finds these
mismatches up front, one CheckResult per named strategy.
"""
from dataclasses import dataclass
import logging
from typing import List

from presenter.domain.types import PresenterDefinition
from presenter.domain.types import StrategyConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckResult:
  """Result of a single definition check."""

  name: str
  ok: bool
  details: str

  def __str__(self) -> str:
    status = '✓' if self.ok else '✗'
    return f'{status} {self.name}: {self.details}'


def pass_result(name: str, details: str) -> CheckResult:
  """Create a passing CheckResult."""
  return CheckResult(name=name, ok=True, details=details)


def fail_result(name: str, details: str) -> CheckResult:
  """Create a failing CheckResult."""
  return CheckResult(name=name, ok=False, details=details)


def check_strategy(definition: PresenterDefinition, strategy_name: str,
                   config: StrategyConfig) -> CheckResult:
  """Check that a strategy only names declared custom attributes."""
  check_name = f'strategy:{strategy_name}'
  declared = definition.custom_attributes or {}
  missing = [
      name for name in (config.custom_attributes or ()) if name not in declared
  ]
  if missing:
    return fail_result(
        check_name, f'unknown custom attributes {missing}, '
        f'declared: {list(declared)}')

  details = 'ok'
  if config.whitelist and config.blacklist:
    details = 'ok (blacklist ignored, whitelist takes precedence)'
  return pass_result(check_name, details)


def check_definition(definition: PresenterDefinition) -> List[CheckResult]:
  """
  Run all checks for a presenter definition.

  Returns:
    One CheckResult per named strategy (empty if none are defined)
  """
  return [
      check_strategy(definition, name, config)
      for name, config in (definition.strategies or {}).items()
  ]


def log_results(definition: PresenterDefinition,
                results: List[CheckResult]) -> bool:
  """
  Log check results.

  Returns:
    True if every check passed
  """
  passed = sum(1 for r in results if r.ok)
  logger.info('%s: %d/%d strategy checks passed', definition.name, passed,
              len(results))
  for result in results:
    if result.ok:
      logger.info('  %s', result)
    else:
      logger.error('  %s', result)
  return passed == len(results)
