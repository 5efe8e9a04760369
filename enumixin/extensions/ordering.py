from __future__ import annotations
import typing
from ..types import *
from ..errors import EmptyEnumerableError
from ..helpers import resolve_comparison, traverse

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class _OrderingOperations(Generic[T]):
    def max(self: 'Enumerable[T]', compare: Ordering = None) -> T:
        """
        highest-valued element. compare may be None (natural order), a KeyOrder or
        plain callable (order by extracted key) or a Comparator (three-way compare).
        among equal maxima the first one wins.
        """
        compare_fn = resolve_comparison(compare)
        try:
            return self.reduce(lambda best, value: value if compare_fn(value, best) > 0 else best)
        except EmptyEnumerableError:
            raise EmptyEnumerableError("cannot find maximum of empty enumerable") from None

    def min(self: 'Enumerable[T]', compare: Ordering = None) -> T:
        """lowest-valued element, see max for the accepted orderings"""
        compare_fn = resolve_comparison(compare)
        try:
            return self.reduce(lambda best, value: value if compare_fn(value, best) < 0 else best)
        except EmptyEnumerableError:
            raise EmptyEnumerableError("cannot find minimum of empty enumerable") from None

    def range(self: 'Enumerable[T]', compare: Ordering = None) -> List[T]:
        """[min, max] computed in a single pass"""
        compare_fn = resolve_comparison(compare)
        seed = self.first()
        bounds = [seed, seed]
        seen = False

        def visit(value, key, container):
            nonlocal seen
            seen = True
            if compare_fn(value, bounds[0]) < 0:
                bounds[0] = value
            elif compare_fn(value, bounds[1]) > 0:
                bounds[1] = value

        traverse(self, visit)
        if not seen:
            raise EmptyEnumerableError("cannot find range of empty enumerable")
        return bounds
