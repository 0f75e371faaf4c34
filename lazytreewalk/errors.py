"""Exceptions raised by lazytreewalk.

Only two things can go wrong inside a traversal itself: pulling past the
end and trying to mutate through the iterator. Anything raised by a
filter, a node or an adapter propagates unchanged.
"""


class TraversalError(Exception):
    """Base class for all lazytreewalk errors."""
    pass


class TraversalExhaustedError(TraversalError, LookupError):
    """Raised by ``next_node()`` when the traversal has no more nodes.

    The iterator protocol (``next(it)``) raises ``StopIteration`` instead.
    """
    pass


class UnsupportedOperationError(TraversalError, NotImplementedError):
    """Raised for any attempt to remove or mutate through a traversal."""
    pass


class InvalidConfigurationError(TraversalError, ValueError):
    """Raised when a TraversalConfig fails validation."""
    pass
