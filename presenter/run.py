'''
Presentation entrypoint.

This module provides the main entry point for presenting models. It:
1. Classifies the model (absent, None, single record, collection)
2. Resolves the strategy once per call
3. For each record, copies the filtered raw attributes and merges in the
   computed custom attributes

Usage:
  from presenter.run import present
  from presenter.samples.person import PERSON_PRESENTER

  view = present(PERSON_PRESENTER, person, 'stationery')
  views = present(PERSON_PRESENTER, [person, person], {'blacklist': ['ssn']})

Usage (CLI):
  python -m presenter.run \
    --presenter presenter.samples.person:PERSON_PRESENTER \
    --input people.json \
    --strategy stationery \
    --output out/people.csv
'''

import argparse
from collections.abc import Mapping
import enum
import importlib
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from presenter.checks import check_definition
from presenter.checks import log_results
from presenter.domain.types import MISSING
from presenter.domain.types import PresenterDefinition
from presenter.domain.types import Record
from presenter.domain.types import StrategyConfig
from presenter.engine.evaluator import evaluate_custom_attributes
from presenter.engine.filter import filter_attributes
from presenter.strategies.config import load_strategies
from presenter.strategies.resolver import resolve_strategy

logger = logging.getLogger(__name__)


class ModelShape(enum.Enum):
  '''Shape of a model passed to present().'''
  ABSENT = 'absent'
  NULL = 'null'
  SINGLE = 'single'
  COLLECTION = 'collection'


def classify_model(model: Any) -> ModelShape:
  '''
  Classify a model by shape.

  Mappings are single records; lists, tuples and DataFrames are collections.

  Raises:
    TypeError: For any other model type
  '''
  if model is MISSING:
    return ModelShape.ABSENT
  if model is None:
    return ModelShape.NULL
  if isinstance(model, pd.DataFrame):
    return ModelShape.COLLECTION
  if isinstance(model, Mapping):
    return ModelShape.SINGLE
  if isinstance(model, (list, tuple)):
    return ModelShape.COLLECTION
  raise TypeError('Model must be a mapping, a sequence of mappings, a '
                  f'DataFrame, None or MISSING, got {type(model).__name__}')


def present_record(definition: PresenterDefinition, record: Record,
                   strategy: StrategyConfig) -> Dict[str, Any]:
  '''
  Present a single record with an already resolved strategy.

  The empty strategy copies every attribute and computes every declared
  custom attribute. Otherwise only the strategy's custom attributes are
  computed. Computed values replace raw attributes of the same name.
  '''
  presented = filter_attributes(record, strategy.whitelist, strategy.blacklist)

  if strategy.is_empty:
    names = list(definition.custom_attributes or ())
  else:
    names = list(strategy.custom_attributes or ())

  if names:
    presented.update(
        evaluate_custom_attributes(record, names,
                                   definition.custom_attributes))
  return presented


def _collection_records(model: Any) -> List[Any]:
  if isinstance(model, pd.DataFrame):
    return model.to_dict(orient='records')
  return list(model)


def present(definition: PresenterDefinition,
            model: Any = MISSING,
            strategy: Any = None) -> Any:
  '''
  Present a model.

  Args:
    definition: Presenter definition (custom attributes and strategies)
    model: A record, a sequence of records, a DataFrame, None or MISSING
    strategy: None, a strategy name registered on the definition, or an
      inline StrategyConfig / mapping

  Returns:
    - MISSING if the model is MISSING
    - None if the model is None
    - A new dict for a single record
    - A list of new dicts (same length and order) for a collection; None
      elements stay None

  Raises:
    UnknownCustomAttributeError: If a strategy or custom attribute refers to
      an undeclared custom attribute
    TypeError: If the model, an element of it, or the strategy has an
      unsupported type
  '''
  shape = classify_model(model)
  if shape is ModelShape.ABSENT:
    return MISSING
  if shape is ModelShape.NULL:
    return None

  resolved = resolve_strategy(definition, strategy)

  if shape is ModelShape.SINGLE:
    return present_record(definition, model, resolved)

  records = _collection_records(model)
  logger.debug('%s: presenting %d records', definition.name, len(records))
  presented: List[Optional[Dict[str, Any]]] = []
  for i, record in enumerate(records):
    if record is None:
      presented.append(None)
    elif isinstance(record, Mapping):
      presented.append(present_record(definition, record, resolved))
    else:
      raise TypeError(f'Collection element {i} must be a mapping or None, '
                      f'got {type(record).__name__}')
  return presented


def present_frame(definition: PresenterDefinition,
                  frame: pd.DataFrame,
                  strategy: Any = None) -> pd.DataFrame:
  '''
  Present every row of a DataFrame and return the presentations as a frame.

  Columns follow the presented key order of the rows.
  '''
  rows = present(definition, frame, strategy)
  return pd.DataFrame(rows)


def load_presenter(reference: str) -> PresenterDefinition:
  '''
  Import a presenter definition from a 'module:ATTRIBUTE' reference.

  Raises:
    ValueError: If the reference is malformed
    TypeError: If the attribute is not a PresenterDefinition
  '''
  module_name, sep, attr_name = reference.partition(':')
  if not sep or not module_name or not attr_name:
    raise ValueError(f"Presenter reference must be 'module:ATTRIBUTE', "
                     f'got {reference!r}')

  module = importlib.import_module(module_name)
  try:
    definition = getattr(module, attr_name)
  except AttributeError as e:
    raise ValueError(f"Module '{module_name}' has no attribute "
                     f"'{attr_name}'") from e

  if not isinstance(definition, PresenterDefinition):
    raise TypeError(f'{reference} is a {type(definition).__name__}, '
                    'not a PresenterDefinition')
  return definition


def load_model(input_path: Path) -> Any:
  '''
  Load a model from a JSON or CSV file.

  JSON files may hold a record, a list of records or null. CSV files are
  read into a DataFrame (one record per row).
  '''
  if not input_path.exists():
    raise FileNotFoundError(f'Input not found: {input_path}')

  suffix = input_path.suffix.lower()
  if suffix == '.json':
    with open(input_path, 'r', encoding='utf-8') as f:
      return json.load(f)
  if suffix == '.csv':
    return pd.read_csv(input_path)
  raise ValueError(f'Unsupported input format: {input_path.suffix} '
                   '(expected .json or .csv)')


def write_presentation(presentation: Any, output_path: Path) -> None:
  '''Write a presentation to a JSON or CSV file.'''
  output_path.parent.mkdir(parents=True, exist_ok=True)
  suffix = output_path.suffix.lower()
  if suffix == '.json':
    with open(output_path, 'w', encoding='utf-8') as f:
      json.dump(presentation, f, indent=2, default=str)
  elif suffix == '.csv':
    if presentation is None:
      rows = []
    elif isinstance(presentation, list):
      rows = presentation
    else:
      rows = [presentation]
    pd.DataFrame(rows).to_csv(output_path, index=False)
  else:
    raise ValueError(f'Unsupported output format: {output_path.suffix} '
                     '(expected .json or .csv)')


def main(argv: Optional[List[str]] = None) -> None:
  '''CLI entrypoint.'''
  parser = argparse.ArgumentParser(description='Present models with a '
                                   'presenter definition')
  parser.add_argument('--presenter',
                      type=str,
                      required=True,
                      help="Presenter definition as 'module:ATTRIBUTE'")
  parser.add_argument('--input',
                      type=Path,
                      help='Model file (.json or .csv)')

  strategy_group = parser.add_mutually_exclusive_group()
  strategy_group.add_argument('--strategy',
                              type=str,
                              help='Named strategy')
  strategy_group.add_argument('--strategy-json',
                              type=str,
                              help='Inline strategy as a JSON object')

  parser.add_argument('--strategies-file',
                      type=Path,
                      help='JSON file with extra named strategies')
  parser.add_argument('--output',
                      type=Path,
                      help='Output file (.json or .csv); logs JSON if omitted')
  parser.add_argument('--check',
                      action='store_true',
                      help='Check the presenter definition and exit')
  parser.add_argument('-v',
                      '--verbose',
                      action='store_true',
                      help='Enable debug logging')
  args = parser.parse_args(argv)

  if args.verbose:
    logging.getLogger().setLevel(logging.DEBUG)

  definition = load_presenter(args.presenter)
  if args.strategies_file:
    definition = definition.extend(
        strategies=load_strategies(args.strategies_file))

  if args.check:
    if not log_results(definition, check_definition(definition)):
      raise SystemExit(1)
    return

  if args.input is None:
    parser.error('--input is required unless --check is given')

  strategy: Any = args.strategy
  if args.strategy_json:
    strategy = StrategyConfig.from_json(args.strategy_json)

  model = load_model(args.input)
  presentation = present(definition, model, strategy)

  if args.output:
    write_presentation(presentation, args.output)
    if isinstance(presentation, list):
      count = len(presentation)
    else:
      count = 0 if presentation is None else 1
    logger.info('Wrote %d presented records to %s', count, args.output)
  else:
    logger.info('%s', json.dumps(presentation, indent=2, default=str))


if __name__ == '__main__':
  logging.basicConfig(
      level=logging.INFO,
      format='%(message)s',
  )
  main()
