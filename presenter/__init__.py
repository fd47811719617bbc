'''
Declarative model presenters.

A presenter definition pairs named custom attribute functions with named
strategies (whitelist / blacklist / custom attribute lists). Presenting a
model copies the attributes a strategy selects and merges in the computed
custom attributes, for a single record or a whole collection.

Usage:
  from presenter import PresenterDefinition, present

  people = PresenterDefinition(
      name='people',
      custom_attributes={
          'fullName': lambda ctx: '{firstName} {lastName}'.format(
              **ctx.attributes),
      },
      strategies={'public': {'blacklist': ['ssn']}},
  )

  view = present(people, {'firstName': 'John', 'lastName': 'Smith',
                          'ssn': '111-11-1111'}, 'public')
'''

from presenter.domain.errors import UnknownCustomAttributeError
from presenter.domain.types import MISSING
from presenter.domain.types import PresenterDefinition
from presenter.domain.types import StrategyConfig
from presenter.engine.evaluator import EvaluationContext
from presenter.run import present
from presenter.run import present_frame

__all__ = [
    'EvaluationContext',
    'MISSING',
    'PresenterDefinition',
    'StrategyConfig',
    'UnknownCustomAttributeError',
    'present',
    'present_frame',
]
