"""Domain types for the presenter engine."""

from presenter.domain.errors import UnknownCustomAttributeError
from presenter.domain.types import MISSING
from presenter.domain.types import PresenterDefinition
from presenter.domain.types import StrategyConfig

__all__ = [
    'MISSING',
    'PresenterDefinition',
    'StrategyConfig',
    'UnknownCustomAttributeError',
]
