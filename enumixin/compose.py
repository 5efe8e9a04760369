import inspect
import logging
from .types import *
from .enumerable import Enumerable, DERIVED_OPERATIONS

logger = logging.getLogger(__name__)

C = TypeVar('C', bound=type)


def enumerable(cls: C) -> C:
    """
    class decorator that merges the Enumerable operations into cls.

    an operation is attached only when cls does not already expose a member of
    the same name, so whatever the class (or its bases) defines always wins.
    the merge happens once, here, not per instance.
    """
    if not isinstance(cls, type):
        raise TypeError(f"enumerable() expects a class, got {type(cls).__name__}")

    attached, kept = [], []
    for name in DERIVED_OPERATIONS:
        if hasattr(cls, name):
            kept.append(name)
            continue
        # static lookup keeps properties and plain functions unbound
        setattr(cls, name, inspect.getattr_static(Enumerable, name))
        attached.append(name)

    if not callable(getattr(cls, 'for_each', None)):
        logger.debug(f"{cls.__name__} has no for_each; derived operations will fail when used")
    logger.debug(f"composed {cls.__name__}: attached {len(attached)} operations, kept {kept}")
    return cls


def create(name: str = "Enumerated",
           members: Optional[Dict[str, Any]] = None,
           bases: Tuple[type, ...] = (object,)) -> type:
    """build a new class from a member mapping and compose it with Enumerable"""
    return enumerable(type(name, bases, dict(members or {})))
