from __future__ import annotations

from .types import *

# --- operation groups ---
from .extensions.search import _SearchOperations
from .extensions.predicates import _PredicateOperations
from .extensions.transform import _TransformOperations
from .extensions.aggregate import _AggregateOperations
from .extensions.ordering import _OrderingOperations
from .extensions.terminal import _TerminalOperations

# every name the trait can contribute to a target
DERIVED_OPERATIONS: Tuple[str, ...] = (
    'contains',
    'every',
    'filter',
    'find',
    'find_last',
    'first',
    'group_by',
    'index_of',
    'last',
    'last_index_of',
    'map',
    'max',
    'min',
    'range',
    'reduce',
    'reduce_right',
    'reject',
    'size',
    'some',
    'tail',
    'to_array',
    'to',
)


# --- the trait ---

class Enumerable(
    _SearchOperations[T],
    _PredicateOperations[T],
    _TransformOperations[T],
    _AggregateOperations[T],
    _OrderingOperations[T],
    _TerminalOperations[T],
):
    """
    sequence operations derived from a single traversal primitive.

    a subclass (or a class passed through the `enumerable` decorator) provides
    `for_each(callback, context=None)`, calling `callback(value, key, container)`
    for each element and stopping as soon as the callback returns Step.STOP.
    everything else is built on top of that one method. the trait holds no state.
    """
