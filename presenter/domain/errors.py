"""Exceptions raised by the presenter engine."""

from typing import Iterable


class UnknownCustomAttributeError(KeyError):
  """
  A custom attribute name could not be resolved on the presenter.

  Raised when a strategy lists a custom attribute the presenter does not
  declare, or when a custom attribute function asks the evaluation context
  for an unknown sibling. Both are presenter/strategy definition mismatches.
  """

  def __init__(self, name: str, available: Iterable[str]):
    self.name = name
    self.available = list(available)
    super().__init__(f"Unknown custom attribute: '{name}'. "
                     f'Available: {self.available}')

  def __str__(self) -> str:
    return str(self.args[0])
