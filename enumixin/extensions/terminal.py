from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from ..helpers import adapt_callback, traverse

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class TerminalAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _pairs(self) -> List[Tuple[Any, T]]:
        """collect (key, value) pairs in traversal order"""
        pairs = []
        traverse(self._enumerable, lambda value, key, container: pairs.append((key, value)))
        return pairs

    def list(self) -> List[T]:
        """convert to list"""
        return self._enumerable.to_array()

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._enumerable.to_array())

    def dict(self, value_selector: Optional[Callable[..., V]] = None) -> Dict[Any, V]:
        """map traversal keys to values (or to value_selector results)"""
        if value_selector is None:
            return {key: value for key, value in self._pairs()}
        select = adapt_callback(value_selector)
        return {key: select(value, key, self._enumerable) for key, value in self._pairs()}

    def numpy(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._enumerable.to_array())

    def series(self, name: Optional[str] = None) -> pd.Series:
        """convert to pandas series indexed by the traversal keys"""
        pairs = self._pairs()
        return pd.Series([value for _, value in pairs],
                         index=[key for key, _ in pairs],
                         name=name,
                         dtype=None if pairs else object)

    def frame(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._enumerable.to_array())


class _TerminalOperations(Generic[T]):
    @property
    def to(self: 'Enumerable[T]') -> TerminalAccessor[T]:
        """conversions to concrete containers: .to.list(), .to.numpy(), .to.series() ..."""
        return TerminalAccessor(self)
