from __future__ import annotations
import typing
from ..types import *
from ..helpers import adapt_callback, require_callable, traverse

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class _PredicateOperations(Generic[T]):
    def every(self: 'Enumerable[T]', callback: Predicate, context: Any = None) -> bool:
        """check if all elements satisfy the callback. true for an empty target"""
        require_callable(self, callback, 'every')
        predicate = adapt_callback(callback, context)
        result = True

        def visit(value, key, container):
            nonlocal result
            # once false, stays false even if the target keeps going
            result = result and bool(predicate(value, key, container))
            return Step.CONTINUE if result else Step.STOP

        traverse(self, visit)
        return result

    def some(self: 'Enumerable[T]', callback: Predicate, context: Any = None) -> bool:
        """check if any element satisfies the callback. false for an empty target"""
        require_callable(self, callback, 'some')
        predicate = adapt_callback(callback, context)
        result = False

        def visit(value, key, container):
            nonlocal result
            result = result or bool(predicate(value, key, container))
            return Step.STOP if result else Step.CONTINUE

        traverse(self, visit)
        return result
