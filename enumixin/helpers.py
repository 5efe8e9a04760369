import inspect
from functools import partial
from numbers import Number
from .types import T, U, Any, Callable, Optional, Step, Ordering, Compare, Comparator, KeyOrder
from .errors import NotCallableError, PreconditionError, MissingTraversalError
from .config import get_settings

# value, key, container
_TRAVERSAL_WIDTH = 3

_VALUE_ONLY = inspect.Signature([inspect.Parameter("value", inspect.Parameter.POSITIONAL_ONLY)])


def ident(value: T) -> T:
    """return the argument unchanged"""
    return value


def negate(func: Callable[..., Any]) -> Callable[..., bool]:
    """wrap a predicate so it returns the logical opposite"""
    if not callable(func):
        raise NotCallableError(f"cannot negate non-callable {type(func).__name__}")

    def negated(*args, **kwargs) -> bool:
        return not func(*args, **kwargs)

    # keep the positional width visible so negated callbacks adapt the same way
    negated.__signature__ = _signature_or_none(func) or _VALUE_ONLY
    negated.__name__ = f"not_{getattr(func, '__name__', 'callback')}"
    return negated


def strict_equals(a: Any, b: Any) -> bool:
    """
    identity-based equality. scalars (numbers, strings, bytes) compare by value
    within their own kind, bools never equal non-bool numbers, nan equals nothing,
    and every other object is only equal to itself.
    """
    if isinstance(a, Number) and a != a:
        return False
    if a is b:
        return True
    if isinstance(a, bool) or isinstance(b, bool):
        return False
    if isinstance(a, Number) and isinstance(b, Number):
        return a == b
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    if isinstance(a, bytes) and isinstance(b, bytes):
        return a == b
    return False


def natural_compare(a: Any, b: Any) -> int:
    """three-way comparison from the values' own > and < operators"""
    if a > b:
        return 1
    if a < b:
        return -1
    return 0


def resolve_comparison(compare: Ordering = None) -> Compare:
    """
    turn an ordering argument into a three-way compare function.

    None orders values naturally, a KeyOrder (or a bare callable) orders by the
    extracted key and a Comparator is used as is.
    """
    if compare is None:
        key = ident
    elif isinstance(compare, Comparator):
        return compare.compare
    elif isinstance(compare, KeyOrder):
        key = compare.key
    elif callable(compare):
        key = compare
    else:
        raise NotCallableError(f"ordering must be a KeyOrder, Comparator or callable, got {type(compare).__name__}")

    def compare_keys(a, b) -> int:
        return natural_compare(key(a), key(b))

    return compare_keys


def require_callable(target: Any, callback: Any, operation: str) -> None:
    """precondition checks shared by every strict operation"""
    if not get_settings().strict:
        return
    if target is None:
        raise PreconditionError(f"{operation} called on a null target")
    if not callable(callback):
        raise NotCallableError(f"{operation} requires a callable, got {type(callback).__name__}")


def _signature_or_none(func: Callable) -> Optional[inspect.Signature]:
    try:
        return inspect.signature(func)
    except (TypeError, ValueError):
        # some builtins and extension types carry no introspectable signature
        return None


def _positional_arity(func: Callable, width: int) -> int:
    signature = _signature_or_none(func)
    if signature is None:
        # value alone, or (accumulator, value) for folds
        return max(1, width - 2)
    required, optional = 0, 0
    for param in signature.parameters.values():
        if param.kind is param.VAR_POSITIONAL:
            return width
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            if param.default is param.empty:
                required += 1
            else:
                optional += 1
    # optional parameters (str.strip's chars, round's ndigits) are never filled,
    # except that a callable requiring nothing, like bool, still gets the value
    if required == 0 and optional:
        return 1
    return min(required, width)


def adapt_callback(callback: Callable[..., U], context: Any = None,
                   width: int = _TRAVERSAL_WIDTH) -> Callable[..., U]:
    """
    adapt a user callback to the (value, key, container) calling convention.

    the callback receives only as many leading arguments as it requires, so
    `lambda v: ...`, `lambda v, k, c: ...` and `str.strip` all work. a context, when given,
    is bound as the first positional argument.
    """
    func = partial(callback, context) if context is not None else callback
    arity = _positional_arity(func, width)

    def invoke(*args):
        return func(*args[:arity])

    return invoke


def traverse(target: Any, visitor: Callable[[Any, Any, Any], Optional[Step]]) -> None:
    """run the target's for_each primitive, failing loudly when it has none"""
    for_each = getattr(target, 'for_each', None)
    if not callable(for_each):
        raise MissingTraversalError(f"{type(target).__name__} does not implement for_each")
    for_each(visitor)
