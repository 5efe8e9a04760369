from __future__ import annotations
import typing
from ..types import *
from ..helpers import adapt_callback, negate, require_callable, traverse

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class _TransformOperations(Generic[T]):
    def filter(self: 'Enumerable[T]', callback: Predicate, context: Any = None) -> List[T]:
        """new list of the elements the callback accepts, in traversal order"""
        require_callable(self, callback, 'filter')
        predicate = adapt_callback(callback, context)
        result = []

        def visit(value, key, container):
            if predicate(value, key, container):
                result.append(value)

        traverse(self, visit)
        return result

    def reject(self: 'Enumerable[T]', callback: Predicate, context: Any = None) -> List[T]:
        """complement of filter: the elements the callback refuses"""
        require_callable(self, callback, 'reject')
        # with strict mode off a non-callable reaches filter as is and fails when called
        predicate = negate(callback) if callable(callback) else callback
        return self.filter(predicate, context)

    def map(self: 'Enumerable[T]', callback: Callable[..., U], context: Any = None) -> List[U]:
        """new list holding the callback result for each element"""
        require_callable(self, callback, 'map')
        selector = adapt_callback(callback, context)
        result = []

        def visit(value, key, container):
            result.append(selector(value, key, container))

        traverse(self, visit)
        return result

    def tail(self: 'Enumerable[T]') -> List[T]:
        """every element except the first"""
        result = []
        seen_first = False

        def visit(value, key, container):
            nonlocal seen_first
            if seen_first:
                result.append(value)
            seen_first = True

        traverse(self, visit)
        return result

    def to_array(self: 'Enumerable[T]') -> List[T]:
        """convert to list"""
        result = []

        def visit(value, key, container):
            result.append(value)

        traverse(self, visit)
        return result
