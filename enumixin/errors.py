class EnumerableError(Exception):
    """base class for every error raised by enumixin"""
    pass


class PreconditionError(EnumerableError, TypeError):
    """an operation was called with arguments it cannot work with"""
    pass


class NotCallableError(PreconditionError):
    """a callback or ordering argument is not callable"""
    pass


class EmptyEnumerableError(PreconditionError):
    """an operation needs at least one element and the target has none"""
    pass


class MissingTraversalError(EnumerableError, TypeError):
    """the target does not provide the for_each traversal primitive"""
    pass


class NotYetImplementedError(EnumerableError, NotImplementedError):
    """raised by operations that exist only as placeholders"""
    pass
