from presenter.engine.evaluator import EvaluationContext
from presenter.samples.person import full_name
from presenter.samples.person import PERSON_PRESENTER
from presenter.samples.person import salutation


def _context(record):
  return EvaluationContext(record, PERSON_PRESENTER.custom_attributes)


class TestPersonCustomAttributes:
  """Tests for the person presenter's custom attributes."""

  def test_salutation_male(self):
    """Men are Mr regardless of marital status."""
    assert salutation(_context({'gender': 'male', 'married': False})) == 'Mr'

  def test_salutation_female(self):
    """Women are Mrs when married and Ms otherwise."""
    assert salutation(_context({'gender': 'female', 'married': True})) == 'Mrs'
    assert salutation(_context({'gender': 'female'})) == 'Ms'

  def test_salutation_unknown_gender(self):
    """No salutation without a known gender."""
    assert salutation(_context({})) is None

  def test_full_name(self):
    """First and last names are joined with a space."""
    ctx = _context({'firstName': 'John', 'lastName': 'Smith'})

    assert full_name(ctx) == 'John Smith'
    assert full_name(_context({'lastName': 'Smith'})) == 'Smith'

  def test_full_name_with_salutation(self):
    """The combined attribute builds on its siblings."""
    ctx = _context({
        'firstName': 'Jane',
        'lastName': 'Doe',
        'gender': 'female',
        'married': False,
    })

    assert ctx.custom_attribute('fullNameWithSalutation') == 'Ms. Jane Doe'

  def test_full_name_with_salutation_without_gender(self):
    """Without a salutation only the name remains."""
    ctx = _context({'firstName': 'Sam', 'lastName': 'Lee'})

    assert ctx.custom_attribute('fullNameWithSalutation') == 'Sam Lee'
