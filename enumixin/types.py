from enum import Enum
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set
)

from .errors import NotCallableError

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Callback = Callable[..., Any]
Predicate = Callable[..., bool]
KeySelector = Callable[[T], K]
Compare = Callable[[T, T], int]
Accumulator = Callable[..., U]


class Step(Enum):
    """what a traversal callback asks the traversal to do next"""
    CONTINUE = 'continue'
    STOP = 'stop'


class _Missing:
    """marker for an argument that was not passed at all (None is a valid value)"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "<missing>"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


class KeyOrder(Generic[T, K]):
    """orders elements by the natural order of a one-argument key extractor"""

    def __init__(self, key: KeySelector[T, K]):
        if not callable(key):
            raise NotCallableError(f"key extractor must be callable, got {type(key).__name__}")
        self.key = key

    def __repr__(self) -> str:
        return f"KeyOrder({getattr(self.key, '__name__', self.key)!r})"


class Comparator(Generic[T]):
    """orders elements with a two-argument three-way comparison (negative, zero, positive)"""

    def __init__(self, compare: Compare[T]):
        if not callable(compare):
            raise NotCallableError(f"comparator must be callable, got {type(compare).__name__}")
        self.compare = compare

    def __repr__(self) -> str:
        return f"Comparator({getattr(self.compare, '__name__', self.compare)!r})"


Ordering = Union[None, KeyOrder, Comparator, Callable[[Any], Any]]


def by_key(key: KeySelector[T, K]) -> KeyOrder[T, K]:
    return KeyOrder(key)


def by_compare(compare: Compare[T]) -> Comparator[T]:
    return Comparator(compare)
