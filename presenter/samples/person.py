"""
Person presenter.

A worked example of a presenter definition: three custom attributes, one of
which builds on the other two, and three named strategies.

  >>> from presenter.samples.person import PERSON_PRESENTER
  >>> view = PERSON_PRESENTER.present(
  ...     {'firstName': 'John', 'lastName': 'Smith', 'gender': 'male',
  ...      'married': True}, 'stationery')
  >>> list(view)
  ['firstName', 'salutation', 'fullNameWithSalutation']
  >>> view['fullNameWithSalutation']
  'Mr. John Smith'
"""

from typing import Optional

from presenter.domain.types import PresenterDefinition
from presenter.engine.evaluator import EvaluationContext

SALUTATIONS = {
    'male': 'Mr',
    'female': {
        'married': 'Mrs',
        'notMarried': 'Ms',
    },
}


def salutation(ctx: EvaluationContext) -> Optional[str]:
  by_gender = SALUTATIONS.get(ctx.attributes.get('gender'))
  if by_gender is None or isinstance(by_gender, str):
    return by_gender
  married_status = 'married' if ctx.attributes.get('married') else 'notMarried'
  return by_gender[married_status]


def full_name(ctx: EvaluationContext) -> str:
  names = [ctx.attributes.get('firstName'), ctx.attributes.get('lastName')]
  return ' '.join(str(name) for name in names if name)


def full_name_with_salutation(ctx: EvaluationContext) -> str:
  title = ctx.custom_attribute('salutation')
  name = ctx.custom_attribute('fullName')
  if not title:
    return name
  return f'{title}. {name}'


PERSON_PRESENTER = PresenterDefinition(
    name='person',
    custom_attributes={
        'salutation': salutation,
        'fullName': full_name,
        'fullNameWithSalutation': full_name_with_salutation,
    },
    strategies={
        'stationery': {
            'whitelist': ['firstName'],
            'custom_attributes': ['salutation', 'fullNameWithSalutation'],
        },
        'whitelisted': {
            'whitelist': ['firstName'],
        },
        'blacklisted': {
            'blacklist': ['ssn'],
        },
    },
)
