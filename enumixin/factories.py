from .types import *
from .enumerable import Enumerable
from .helpers import adapt_callback


class EnumerableList(Enumerable[T]):
    """list-backed target. keys are the element indexes"""

    def __init__(self, items: Iterable[T] = ()):
        self._items: List[T] = list(items)

    def for_each(self, callback: Callable[..., Any], context: Any = None) -> None:
        visit = adapt_callback(callback, context)
        for index, item in enumerate(self._items):
            if visit(item, index, self) is Step.STOP:
                break

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, EnumerableList):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"EnumerableList({self._items!r})"


class EnumerableMapping(Enumerable[V]):
    """mapping-backed target. keys are the mapping keys, values its values"""

    def __init__(self, data: Optional[Dict[K, V]] = None):
        self._data: Dict[K, V] = dict(data or {})

    def for_each(self, callback: Callable[..., Any], context: Any = None) -> None:
        visit = adapt_callback(callback, context)
        for key, value in self._data.items():
            if visit(value, key, self) is Step.STOP:
                break

    def __iter__(self) -> Iterator[K]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, key: K) -> V:
        return self._data[key]

    def __repr__(self) -> str:
        return f"EnumerableMapping({self._data!r})"


def from_iterable(data: Iterable[T]) -> EnumerableList[T]:
    """create enumerable from iterable"""
    return EnumerableList(data)


def from_mapping(data: Dict[K, V]) -> EnumerableMapping[V]:
    """create enumerable over a mapping's values, keyed by its keys"""
    return EnumerableMapping(data)


def from_range(start: int, count: int) -> EnumerableList[int]:
    """create enumerable from range"""
    return EnumerableList(range(start, start + count))


def repeat(item: T, count: int) -> EnumerableList[T]:
    """create enumerable with repeated item"""
    return EnumerableList([item] * count)


def empty() -> EnumerableList[Any]:
    """create empty enumerable"""
    return EnumerableList()


# --- aliases ---
E = from_iterable
