from __future__ import annotations
import typing
from ..types import *
from ..errors import EmptyEnumerableError, NotYetImplementedError
from ..helpers import adapt_callback, require_callable, traverse

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class _AggregateOperations(Generic[T]):
    def reduce(self: 'Enumerable[T]', callback: Accumulator, initial: Any = MISSING) -> Any:
        """
        left fold over the elements. the callback gets (accumulator, value, key, container).
        without an initial value the first element seeds the accumulator and is not
        passed to the callback.
        """
        require_callable(self, callback, 'reduce')
        accumulate = adapt_callback(callback, width=4)
        has_value = initial is not MISSING
        result = initial

        def visit(value, key, container):
            nonlocal has_value, result
            if has_value:
                result = accumulate(result, value, key, container)
            else:
                has_value = True
                result = value

        traverse(self, visit)
        if not has_value:
            raise EmptyEnumerableError("reduce of empty enumerable with no initial value")
        return result

    def reduce_right(self: 'Enumerable[T]', callback: Accumulator, initial: Any = MISSING) -> Any:
        """right-to-left fold. not available: enumeration only runs forwards"""
        raise NotYetImplementedError("enumerable.reduce_right not yet implemented")

    def size(self: 'Enumerable[T]') -> int:
        """count elements by enumerating them"""
        count = 0

        def visit(value, key, container):
            nonlocal count
            count += 1

        traverse(self, visit)
        return count

    def group_by(self: 'Enumerable[T]', callback: KeySelector, context: Any = None) -> Dict[Any, List[T]]:
        """group elements by the key the callback returns"""
        require_callable(self, callback, 'group_by')
        key_selector = adapt_callback(callback, context)
        groups = {}

        def visit(value, key, container):
            group_key = key_selector(value, key, container)
            if group_key not in groups:
                groups[group_key] = []
            groups[group_key].append(value)

        traverse(self, visit)
        return groups
