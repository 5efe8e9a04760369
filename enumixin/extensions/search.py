from __future__ import annotations
import typing
from ..types import *
from ..helpers import adapt_callback, require_callable, strict_equals, traverse

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class _SearchOperations(Generic[T]):
    def contains(self: 'Enumerable[T]', item: Any) -> bool:
        """check whether some element is strictly equal to item"""
        found = False

        def visit(value, key, container):
            nonlocal found
            if not found:
                found = strict_equals(item, value)
            return Step.STOP if found else Step.CONTINUE

        traverse(self, visit)
        return found

    def find(self: 'Enumerable[T]', callback: Predicate, context: Any = None) -> Optional[T]:
        """first element the callback accepts, or None"""
        require_callable(self, callback, 'find')
        predicate = adapt_callback(callback, context)
        result, found = None, False

        def visit(value, key, container):
            nonlocal result, found
            if not found and predicate(value, key, container):
                result, found = value, True
            if found:
                return Step.STOP
            return Step.CONTINUE

        traverse(self, visit)
        return result

    def find_last(self: 'Enumerable[T]', callback: Predicate, context: Any = None) -> Optional[T]:
        """last element the callback accepts, or None"""
        require_callable(self, callback, 'find_last')
        predicate = adapt_callback(callback, context)
        result = None

        def visit(value, key, container):
            nonlocal result
            if predicate(value, key, container):
                result = value

        traverse(self, visit)
        return result

    def first(self: 'Enumerable[T]') -> Optional[T]:
        """first element, or None when empty"""
        result, seen = None, False

        def visit(value, key, container):
            nonlocal result, seen
            if not seen:
                result, seen = value, True
            return Step.STOP

        traverse(self, visit)
        return result

    def last(self: 'Enumerable[T]') -> Optional[T]:
        """last element, or None when empty"""
        result = None

        def visit(value, key, container):
            nonlocal result
            result = value

        traverse(self, visit)
        return result

    def index_of(self: 'Enumerable[T]', search_element: Any) -> Optional[Any]:
        """key of the first element strictly equal to search_element, or None"""
        result, found = None, False

        def visit(value, key, container):
            nonlocal result, found
            if not found and strict_equals(search_element, value):
                result, found = key, True
            if found:
                return Step.STOP
            return Step.CONTINUE

        traverse(self, visit)
        return result

    def last_index_of(self: 'Enumerable[T]', search_element: Any) -> Optional[Any]:
        """key of the last element strictly equal to search_element, or None"""
        result = None

        def visit(value, key, container):
            nonlocal result
            if strict_equals(value, search_element):
                result = key

        traverse(self, visit)
        return result
