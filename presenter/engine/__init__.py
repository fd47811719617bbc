'''Projection engine: attribute filtering and custom attribute evaluation.'''

from presenter.engine.evaluator import EvaluationContext
from presenter.engine.evaluator import evaluate_custom_attributes
from presenter.engine.filter import filter_attributes
from presenter.engine.filter import include_attribute

__all__ = [
    'EvaluationContext',
    'evaluate_custom_attributes',
    'filter_attributes',
    'include_attribute',
]
