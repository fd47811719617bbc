'''
Domain types for the presenter engine.

These dataclasses are plain immutable configuration values: a presenter is
declared by constructing a PresenterDefinition, and "extending" one builds a
new definition that copies and overrides the fields of its base.
'''

from collections.abc import Mapping
from dataclasses import dataclass
import enum
import json
from types import MappingProxyType
from typing import (TYPE_CHECKING, Any, Callable, Dict, FrozenSet, Iterable,
                    Optional, Tuple, Union)

if TYPE_CHECKING:
  from presenter.engine.evaluator import EvaluationContext


class Missing(enum.Enum):
  '''Marker for a model that was not supplied at all (distinct from None).'''
  MISSING = 'MISSING'

  def __repr__(self) -> str:
    return 'MISSING'

  def __bool__(self) -> bool:
    return False


MISSING = Missing.MISSING

Record = Mapping[str, Any]
CustomAttributeFn = Callable[['EvaluationContext'], Any]

_CUSTOM_ATTRIBUTE_KEYS = ('custom_attributes', 'customAttributes')
_STRATEGY_KEYS = frozenset(('whitelist', 'blacklist') + _CUSTOM_ATTRIBUTE_KEYS)


def _name_set(value: Optional[Iterable[str]],
              field_name: str) -> Optional[FrozenSet[str]]:
  if value is None:
    return None
  if isinstance(value, str):
    raise TypeError(f'{field_name} must be a collection of attribute names, '
                    f'got string {value!r}')
  return frozenset(value)


@dataclass(frozen=True)
class StrategyConfig:
  '''
  Rule set selecting which attributes appear in a presentation.

  All fields are optional. When both lists are given the whitelist wins and
  the blacklist is ignored.

  Attributes:
    whitelist: Raw attribute names to copy (only these)
    blacklist: Raw attribute names to drop (everything else is copied)
    custom_attributes: Ordered custom attribute names to compute
  '''
  whitelist: Optional[FrozenSet[str]] = None
  blacklist: Optional[FrozenSet[str]] = None
  custom_attributes: Optional[Tuple[str, ...]] = None

  def __post_init__(self):
    object.__setattr__(self, 'whitelist',
                       _name_set(self.whitelist, 'whitelist'))
    object.__setattr__(self, 'blacklist',
                       _name_set(self.blacklist, 'blacklist'))
    if self.custom_attributes is not None:
      if isinstance(self.custom_attributes, str):
        raise TypeError('custom_attributes must be a sequence of names, '
                        f'got string {self.custom_attributes!r}')
      object.__setattr__(self, 'custom_attributes',
                         tuple(self.custom_attributes))

  @property
  def is_empty(self) -> bool:
    '''True when no whitelist, blacklist or custom attribute list applies.'''
    return not (self.whitelist or self.blacklist or self.custom_attributes)

  def to_dict(self) -> Dict[str, Any]:
    '''Convert to a JSON-friendly dictionary, omitting unset fields.'''
    result: Dict[str, Any] = {}
    if self.whitelist is not None:
      result['whitelist'] = sorted(self.whitelist)
    if self.blacklist is not None:
      result['blacklist'] = sorted(self.blacklist)
    if self.custom_attributes is not None:
      result['custom_attributes'] = list(self.custom_attributes)
    return result

  def to_json(self) -> str:
    '''Serialize to JSON string.'''
    return json.dumps(self.to_dict(), indent=2)

  @classmethod
  def from_dict(cls, data: Mapping[str, Any]) -> 'StrategyConfig':
    '''
    Create from dictionary.

    Accepts both `custom_attributes` and the camelCase `customAttributes`
    spelling.

    Raises:
      ValueError: If the dictionary has keys other than the strategy fields
    '''
    unknown = sorted(set(data) - _STRATEGY_KEYS)
    if unknown:
      raise ValueError(f'Unknown strategy fields: {unknown}. '
                       f'Expected: {sorted(_STRATEGY_KEYS)}')
    if all(key in data for key in _CUSTOM_ATTRIBUTE_KEYS):
      raise ValueError('Strategy sets both custom_attributes and '
                       'customAttributes')

    custom_attributes = data.get('custom_attributes',
                                 data.get('customAttributes'))
    return cls(
        whitelist=data.get('whitelist'),
        blacklist=data.get('blacklist'),
        custom_attributes=custom_attributes,
    )

  @classmethod
  def from_json(cls, json_str: str) -> 'StrategyConfig':
    '''Create from JSON string.'''
    return cls.from_dict(json.loads(json_str))

  @classmethod
  def coerce(
      cls, value: Union['StrategyConfig', Mapping[str, Any]]
  ) -> 'StrategyConfig':
    '''Return value as a StrategyConfig, converting plain mappings.'''
    if isinstance(value, StrategyConfig):
      return value
    if isinstance(value, Mapping):
      return cls.from_dict(value)
    raise TypeError('Strategy configuration must be a StrategyConfig or a '
                    f'mapping, got {type(value).__name__}')


@dataclass(frozen=True)
class PresenterDefinition:
  '''
  Static description of how to present a model.

  Both mappings are optional. A definition without custom attributes copies
  raw attributes only; a definition without strategies presents every named
  strategy with the default rules.

  Attributes:
    name: Human-readable presenter name (used in logs)
    custom_attributes: Attribute name -> function taking an
      EvaluationContext and returning the computed value
    strategies: Strategy name -> StrategyConfig (plain dicts are converted)
  '''
  name: str = 'presenter'
  custom_attributes: Optional[Mapping[str, CustomAttributeFn]] = None
  strategies: Optional[Mapping[str, StrategyConfig]] = None

  def __post_init__(self):
    if self.custom_attributes is not None:
      for attr_name, fn in self.custom_attributes.items():
        if not callable(fn):
          raise TypeError(f"Custom attribute '{attr_name}' is not callable")
      object.__setattr__(self, 'custom_attributes',
                         MappingProxyType(dict(self.custom_attributes)))
    if self.strategies is not None:
      strategies = {
          strategy_name: StrategyConfig.coerce(config)
          for strategy_name, config in self.strategies.items()
      }
      object.__setattr__(self, 'strategies', MappingProxyType(strategies))

  def extend(
      self,
      name: Optional[str] = None,
      custom_attributes: Optional[Mapping[str, CustomAttributeFn]] = None,
      strategies: Optional[Mapping[str, Any]] = None,
  ) -> 'PresenterDefinition':
    '''
    Build a new definition on top of this one.

    Entries passed here are added to (or replace) the base entries with the
    same name. The base definition is left untouched.
    '''
    return PresenterDefinition(
        name=name or self.name,
        custom_attributes=_merged(self.custom_attributes, custom_attributes),
        strategies=_merged(self.strategies, strategies),
    )

  def present(self, model: Any = MISSING, strategy: Any = None) -> Any:
    '''Present model with this definition. See presenter.run.present.'''
    from presenter.run import present  # pylint: disable=import-outside-toplevel
    return present(self, model, strategy)


def _merged(base: Optional[Mapping[str, Any]],
            overrides: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
  if base is None and overrides is None:
    return None
  merged = dict(base or {})
  merged.update(overrides or {})
  return merged
