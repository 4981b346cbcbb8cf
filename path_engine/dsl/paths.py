"""
Path construction for the path DSL.
This module implements Path, an immutable non-empty sequence of steps, and
the literal shorthand used to build one.

Literal shorthand accepted wherever a step is expected:

    "room"                   -> NameTest("room")
    {"type": "single"}       -> AttributeTest({"type": "single"})
    some_callable            -> PredicateTest(some_callable)
    ["room", {"type": "x"}]  -> Conjunction([NameTest("room"), AttributeTest(...)])

Lists and tuples may nest, so a group can hold another group.
"""

from typing import Any, Iterable, Iterator, List, Mapping, Tuple, Union, overload

from ..errors import MalformedPath
from .steps import Step, NameTest, AttributeTest, PredicateTest, Conjunction


def as_step(value: Any) -> Step:
    """
    Turn a step or step literal into a Step.

    Args:
        value: A Step, a name string, an attribute mapping, a callable or a
            list/tuple of any of these

    Returns:
        The corresponding Step

    Raises:
        TypeError: If the value cannot be read as a step
    """
    if isinstance(value, Step):
        return value
    if isinstance(value, str):
        return NameTest(value)
    if isinstance(value, Mapping):
        return AttributeTest(value)
    if isinstance(value, (list, tuple)):
        return Conjunction(as_step(item) for item in value)
    if callable(value):
        return PredicateTest(value)
    raise TypeError(f"Cannot build a path step from {type(value).__name__}: {value!r}")


class Path:
    """
    An ordered, non-empty sequence of steps.

    Step i is tested against elements at depth i+1 below the node the path
    is applied to. A Path never changes after construction and can be
    reused across any number of selections.
    """

    __slots__ = ('_steps',)

    def __init__(self, *steps: Any):
        """
        Initialize a path.

        Args:
            *steps: Steps or step literals, outermost first

        Raises:
            MalformedPath: If no steps are given
            TypeError: If a step literal is not understood
        """
        if not steps:
            raise MalformedPath()
        object.__setattr__(self, '_steps', tuple(as_step(step) for step in steps))

    @classmethod
    def of(cls, steps: Union['Path', Iterable[Any]]) -> 'Path':
        """
        Build a path from an iterable of steps, passing Paths through.

        Args:
            steps: A Path or an iterable of steps or step literals

        Returns:
            The Path
        """
        if isinstance(steps, Path):
            return steps
        if isinstance(steps, (str, Mapping)) or isinstance(steps, Step) or callable(steps):
            # A single step, not a sequence of them.
            return cls(steps)
        return cls(*steps)

    @property
    def steps(self) -> Tuple[Step, ...]:
        return self._steps

    @property
    def head(self) -> Step:
        """The first (outermost) step."""
        return self._steps[0]

    @property
    def rest(self) -> Tuple[Step, ...]:
        """The steps after the head, possibly empty."""
        return self._steps[1:]

    def select(self, node: 'Node') -> List['Element']:
        """
        Select elements below a node with this path.

        Args:
            node: The node to start from

        Returns:
            The matched elements in document order
        """
        from .selector_engine import select
        return select(node, self)

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps)

    @overload
    def __getitem__(self, index: int) -> Step: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[Step, ...]: ...

    def __getitem__(self, index):
        return self._steps[index]

    def __add__(self, other: Any) -> 'Path':
        if isinstance(other, Path):
            return Path(*self._steps, *other._steps)
        if isinstance(other, (list, tuple)):
            return Path(*self._steps, *other)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Path):
            return NotImplemented
        return self._steps == other._steps

    def __hash__(self):
        return hash((Path, self._steps))

    def __setattr__(self, name, value):
        raise AttributeError("Path is immutable")

    def __repr__(self):
        return f"Path({', '.join(repr(step) for step in self._steps)})"


def path(*steps: Any) -> Path:
    """
    Build a Path from steps or step literals.

    Example:
        path(["room", {"type": "single"}], "rate")

    Args:
        *steps: Steps or step literals, outermost first

    Returns:
        The Path
    """
    return Path(*steps)
