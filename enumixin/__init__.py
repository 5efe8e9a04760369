"""
enumixin: sequence operations for anything that can enumerate itself.

implement `for_each(callback, context=None)` on a class, subclass Enumerable
(or decorate the class with @enumerable) and it gains contains, every, some,
filter, reject, find, map, reduce, group_by, min, max, range and friends.
"""

# expose the trait
from .enumerable import Enumerable, DERIVED_OPERATIONS

# expose composition
from .compose import enumerable, create

# expose the factory functions and concrete targets
from .factories import (
    EnumerableList,
    EnumerableMapping,
    from_iterable,
    from_mapping,
    from_range,
    repeat,
    empty,
    E
)

# expose supporting types, helpers and errors
from .types import Step, KeyOrder, Comparator, by_key, by_compare, MISSING
from .helpers import negate, ident, strict_equals
from .extensions.terminal import TerminalAccessor
from .config import Settings, get_settings, strict_mode
from .errors import (
    EnumerableError,
    PreconditionError,
    NotCallableError,
    EmptyEnumerableError,
    MissingTraversalError,
    NotYetImplementedError
)

__version__ = "0.1.0"

# define what `import *` does
__all__ = [
    "Enumerable",
    "DERIVED_OPERATIONS",
    "enumerable",
    "create",
    "EnumerableList",
    "EnumerableMapping",
    "from_iterable",
    "from_mapping",
    "from_range",
    "repeat",
    "empty",
    "E",
    "Step",
    "KeyOrder",
    "Comparator",
    "by_key",
    "by_compare",
    "MISSING",
    "negate",
    "ident",
    "strict_equals",
    "TerminalAccessor",
    "Settings",
    "get_settings",
    "strict_mode",
    "EnumerableError",
    "PreconditionError",
    "NotCallableError",
    "EmptyEnumerableError",
    "MissingTraversalError",
    "NotYetImplementedError"
]
