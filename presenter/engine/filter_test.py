from presenter.engine.filter import filter_attributes
from presenter.engine.filter import include_attribute


class TestIncludeAttribute:
  """Tests for include_attribute."""

  def test_no_lists(self):
    """Everything is included without a whitelist or blacklist."""
    assert include_attribute('a')
    assert include_attribute('a', None, None)
    assert include_attribute('a', frozenset(), frozenset())

  def test_whitelist(self):
    """Only whitelisted keys are included."""
    assert include_attribute('a', whitelist={'a'})
    assert not include_attribute('b', whitelist={'a'})

  def test_blacklist(self):
    """Blacklisted keys are excluded."""
    assert not include_attribute('a', blacklist={'a'})
    assert include_attribute('b', blacklist={'a'})

  def test_whitelist_wins_over_blacklist(self):
    """A key on both lists is included; the blacklist is ignored."""
    assert include_attribute('a', whitelist={'a'}, blacklist={'a', 'b'})
    assert not include_attribute('b', whitelist={'a'}, blacklist={'a', 'b'})
    assert not include_attribute('c', whitelist={'a'}, blacklist={'a', 'b'})

  def test_empty_whitelist_falls_through_to_blacklist(self):
    """An empty whitelist does not apply."""
    assert not include_attribute('a', whitelist=set(), blacklist={'a'})
    assert include_attribute('b', whitelist=set(), blacklist={'a'})


class TestFilterAttributes:
  """Tests for filter_attributes."""

  def test_copies_all_without_lists(self, person):
    """A full shallow copy is returned."""
    result = filter_attributes(person)

    assert result == person
    assert result is not person

  def test_never_invents_keys(self):
    """Whitelisted keys missing from the record are not added."""
    result = filter_attributes({'a': 1}, whitelist={'a', 'b'})

    assert result == {'a': 1}

  def test_blacklist(self, person):
    """Blacklisted keys are dropped."""
    result = filter_attributes(person, blacklist={'ssn'})

    assert 'ssn' not in result
    assert list(result) == ['firstName', 'lastName', 'gender', 'married']

  def test_preserves_key_order(self):
    """Keys keep the record's order, not the whitelist's."""
    record = {'c': 3, 'a': 1, 'b': 2}

    result = filter_attributes(record, whitelist=['b', 'c'])

    assert list(result) == ['c', 'b']

  def test_does_not_mutate_record(self, person):
    """The input record is left untouched."""
    original = dict(person)

    filter_attributes(person, whitelist={'firstName'})

    assert person == original

  def test_shallow_copy(self):
    """Nested values are shared, not copied."""
    nested = {'city': 'Springfield'}

    result = filter_attributes({'address': nested})

    assert result['address'] is nested
