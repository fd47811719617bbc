"""
Attribute filter.

Decides which raw attributes of a record are copied into the presentation.
A non-empty whitelist takes precedence over the blacklist; with neither,
every attribute is copied. Only keys present on the record are considered.
"""

from typing import AbstractSet, Any, Dict, Optional

from presenter.domain.types import Record


def include_attribute(
    key: str,
    whitelist: Optional[AbstractSet[str]] = None,
    blacklist: Optional[AbstractSet[str]] = None,
) -> bool:
  """Return True if the attribute key should be copied."""
  if whitelist:
    return key in whitelist
  if blacklist:
    return key not in blacklist
  return True


def filter_attributes(
    record: Record,
    whitelist: Optional[AbstractSet[str]] = None,
    blacklist: Optional[AbstractSet[str]] = None,
) -> Dict[str, Any]:
  """
  Shallow-copy the record's included attributes into a new dict.

  Args:
    record: Raw model record (not modified)
    whitelist: Attribute names to keep, if any
    blacklist: Attribute names to drop, if any (ignored with a whitelist)

  Returns:
    New dictionary preserving the record's key order
  """
  return {
      key: value
      for key, value in record.items()
      if include_attribute(key, whitelist, blacklist)
  }
