import pytest

from presenter.domain.types import PresenterDefinition
from presenter.samples.person import PERSON_PRESENTER


@pytest.fixture
def person() -> dict:
  """The person record used across presenter tests."""
  return {
      'firstName': 'John',
      'lastName': 'Smith',
      'gender': 'male',
      'married': True,
      'ssn': '111-11-1111',
  }


@pytest.fixture
def people(person) -> list[dict]:
  """Three distinct person records."""
  return [
      person,
      {
          'firstName': 'Jane',
          'lastName': 'Doe',
          'gender': 'female',
          'married': True,
          'ssn': '222-22-2222',
      },
      {
          'firstName': 'Ann',
          'lastName': 'Lee',
          'gender': 'female',
          'married': False,
          'ssn': '333-33-3333',
      },
  ]


@pytest.fixture
def person_presenter() -> PresenterDefinition:
  """Person presenter with custom attributes and strategies."""
  return PERSON_PRESENTER


@pytest.fixture
def bare_presenter() -> PresenterDefinition:
  """Presenter declaring neither custom attributes nor strategies."""
  return PresenterDefinition(name='bare')
