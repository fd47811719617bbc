'''
Custom attribute evaluator.

Custom attribute functions receive an EvaluationContext bound to one record.
Through it they read the record's raw attributes and request sibling custom
attributes by name, which are computed on demand and memoized for the rest
of that record's presentation:

  def full_name_with_salutation(ctx):
    salutation = ctx.custom_attribute('salutation')
    return f"{salutation}. {ctx.custom_attribute('fullName')}"

Dependencies between custom attributes may form any acyclic graph. Cycles
are not detected: a function that (directly or indirectly) requests itself
recurses until Python raises RecursionError.
'''

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Sequence

from presenter.domain.errors import UnknownCustomAttributeError
from presenter.domain.types import CustomAttributeFn
from presenter.domain.types import Record


class EvaluationContext:
  '''
  Per-record view handed to custom attribute functions.

  Attributes:
    attributes: Read-only view of the record's raw attributes
  '''

  def __init__(self, record: Record,
               custom_attributes: Mapping[str, CustomAttributeFn]):
    self.attributes: Mapping[str, Any] = MappingProxyType(record)
    self._custom_attributes = custom_attributes
    self._computed: Dict[str, Any] = {}

  def custom_attribute(self, name: str) -> Any:
    '''
    Return the computed value of another custom attribute.

    Raises:
      UnknownCustomAttributeError: If the presenter does not declare name
    '''
    if name in self._computed:
      return self._computed[name]

    try:
      fn = self._custom_attributes[name]
    except KeyError as e:
      raise UnknownCustomAttributeError(name, self._custom_attributes) from e

    value = fn(self)
    self._computed[name] = value
    return value


def evaluate_custom_attributes(
    record: Record,
    names: Sequence[str],
    custom_attributes: Optional[Mapping[str, CustomAttributeFn]],
) -> Dict[str, Any]:
  '''
  Compute the requested custom attributes for one record.

  All names are checked before any function runs, so an unknown name never
  leaves a half-computed result behind.

  Args:
    record: Raw model record
    names: Custom attribute names to compute, in output order
    custom_attributes: The presenter's name -> function mapping (may be None)

  Returns:
    Dictionary of name -> computed value, in the order of names

  Raises:
    UnknownCustomAttributeError: If a name is not declared on the presenter
  '''
  declared = custom_attributes or {}
  for name in names:
    if name not in declared:
      raise UnknownCustomAttributeError(name, declared)

  context = EvaluationContext(record, declared)
  return {name: context.custom_attribute(name) for name in names}
