"""
Exceptions raised by the path engine.
"""

from typing import Any, Optional


class PathEngineError(Exception):
    """Base class for path engine errors."""


class MalformedPath(PathEngineError, ValueError):
    """Raised when a path has no steps."""

    def __init__(self, message: str = "A path needs at least one step"):
        super().__init__(message)


class PredicateFailure(PathEngineError):
    """
    Raised when a caller-supplied predicate fails during selection.

    The selection that was running is abandoned; no partial result is
    returned. The predicate's own exception is available as ``original``
    and as ``__cause__``.
    """

    def __init__(self, step: Any, node: Any, original: BaseException):
        """
        Initialize the failure.

        Args:
            step: The PredicateTest whose function failed
            node: The node the function was called with
            original: The exception the function raised
        """
        self.step = step
        self.node = node
        self.original = original
        self.logged = False
        super().__init__(
            f"Predicate {self._describe(step)} failed on {node!r}: "
            f"{type(original).__name__}: {original}"
        )

    @staticmethod
    def _describe(step: Optional[Any]) -> str:
        function = getattr(step, 'function', None)
        return getattr(function, '__qualname__', None) or repr(step)
