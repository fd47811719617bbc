"""Example presenter definitions."""

from presenter.samples.person import PERSON_PRESENTER

__all__ = ['PERSON_PRESENTER']
