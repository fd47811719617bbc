"""Strategy resolution and strategy files."""

from presenter.strategies.config import dump_strategies
from presenter.strategies.config import load_strategies
from presenter.strategies.config import strategies_from_dict
from presenter.strategies.resolver import EMPTY_STRATEGY
from presenter.strategies.resolver import list_strategies
from presenter.strategies.resolver import resolve_strategy

__all__ = [
    'EMPTY_STRATEGY',
    'dump_strategies',
    'list_strategies',
    'load_strategies',
    'resolve_strategy',
    'strategies_from_dict',
]
