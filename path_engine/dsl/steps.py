"""
Step model for the path DSL.
This module implements the four step variants and the matches() dispatch.

A step is one unit of match criteria applied to a single element. There are
exactly four kinds:

    NameTest("room")                  element name equals "room"
    AttributeTest({"type": "single"}) every listed attribute is present and equal
    PredicateTest(func)               func(element) is true
    Conjunction([s1, s2, ...])        every sub-step matches

Steps are immutable and matching is a pure function of (element, step).
"""

import logging
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Tuple

from ..errors import PredicateFailure

logger = logging.getLogger(__name__)


class Step:
    """
    Base class of the step variants.

    Only NameTest, AttributeTest, PredicateTest and Conjunction derive from
    it; matches() rejects anything else.
    """

    __slots__ = ()

    def matches(self, node: 'Element') -> bool:
        """
        Check whether an element satisfies this step.

        Args:
            node: The element to test

        Returns:
            True if the element matches, False otherwise
        """
        return matches(node, self)

    def __and__(self, other: 'Step') -> 'Conjunction':
        if not isinstance(other, Step):
            return NotImplemented
        return Conjunction(_flatten_conjunction(self) + _flatten_conjunction(other))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")


class NameTest(Step):
    """Matches an element whose name equals the given name."""

    __slots__ = ('name',)

    def __init__(self, name: str):
        if not isinstance(name, str) or not name:
            raise TypeError(f"NameTest needs a non-empty string name, got {name!r}")
        object.__setattr__(self, 'name', name)

    def __eq__(self, other):
        if not isinstance(other, NameTest):
            return NotImplemented
        return self.name == other.name

    def __hash__(self):
        return hash((NameTest, self.name))

    def __repr__(self):
        return f"NameTest({self.name!r})"


class AttributeTest(Step):
    """
    Matches an element carrying every listed attribute with the listed value.

    Extra attributes on the element never cause a mismatch. An empty mapping
    matches every element. Values are compared as strings; there is no
    numeric coercion.
    """

    __slots__ = ('attributes',)

    def __init__(self, attributes: Mapping[str, str]):
        if not isinstance(attributes, Mapping):
            raise TypeError(f"AttributeTest needs a mapping, got {type(attributes).__name__}")
        copied = {}
        for key, value in attributes.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise TypeError(
                    f"AttributeTest keys and values must be strings, got {key!r}: {value!r}"
                )
            copied[key] = value
        object.__setattr__(self, 'attributes', MappingProxyType(copied))

    def __eq__(self, other):
        if not isinstance(other, AttributeTest):
            return NotImplemented
        return dict(self.attributes) == dict(other.attributes)

    def __hash__(self):
        return hash((AttributeTest, frozenset(self.attributes.items())))

    def __repr__(self):
        return f"AttributeTest({dict(self.attributes)!r})"


class PredicateTest(Step):
    """
    Matches an element for which a caller-supplied function returns true.

    The function is opaque to the engine. It may inspect the element's
    subtree, but must not mutate the tree. If it raises, the error surfaces
    as PredicateFailure.
    """

    __slots__ = ('function',)

    def __init__(self, function: Callable[['Element'], bool]):
        if not callable(function):
            raise TypeError(f"PredicateTest needs a callable, got {type(function).__name__}")
        object.__setattr__(self, 'function', function)

    def __eq__(self, other):
        if not isinstance(other, PredicateTest):
            return NotImplemented
        return self.function is other.function

    def __hash__(self):
        return hash((PredicateTest, id(self.function)))

    def __repr__(self):
        name = getattr(self.function, '__qualname__', None) or repr(self.function)
        return f"PredicateTest({name})"


class Conjunction(Step):
    """
    Matches an element that satisfies every sub-step.

    Sub-steps may be of any variant, including nested conjunctions. An empty
    conjunction is vacuously true.
    """

    __slots__ = ('steps',)

    def __init__(self, steps: Iterable[Step]):
        steps = tuple(steps)
        for step in steps:
            if not isinstance(step, Step):
                raise TypeError(f"Conjunction members must be steps, got {step!r}")
        if not steps:
            logger.warning("Empty Conjunction matches every element")
        object.__setattr__(self, 'steps', steps)

    def __eq__(self, other):
        if not isinstance(other, Conjunction):
            return NotImplemented
        return self.steps == other.steps

    def __hash__(self):
        return hash((Conjunction, self.steps))

    def __iter__(self):
        return iter(self.steps)

    def __len__(self):
        return len(self.steps)

    def __repr__(self):
        return f"Conjunction([{', '.join(repr(step) for step in self.steps)}])"


def _flatten_conjunction(step: Step) -> Tuple[Step, ...]:
    if isinstance(step, Conjunction):
        return step.steps
    return (step,)


def _attributes_match(node: 'Element', wanted: Mapping[str, str]) -> bool:
    attributes = node.attributes
    for key, value in wanted.items():
        if key not in attributes or attributes[key] != value:
            return False
    return True


def _call_predicate(node: 'Element', step: PredicateTest) -> bool:
    try:
        return bool(step.function(node))
    except PredicateFailure:
        # A predicate that runs its own selection: keep the innermost failure.
        raise
    except Exception as e:
        raise PredicateFailure(step, node, e) from e


def matches(node: 'Element', step: Step) -> bool:
    """
    Check whether an element satisfies a step.

    Args:
        node: The element to test
        step: Any of the four step variants

    Returns:
        True if the element matches, False otherwise

    Raises:
        PredicateFailure: If a predicate function raised
        TypeError: If step is not one of the four step variants
    """
    if isinstance(step, NameTest):
        return node.name == step.name

    elif isinstance(step, AttributeTest):
        return _attributes_match(node, step.attributes)

    elif isinstance(step, PredicateTest):
        return _call_predicate(node, step)

    elif isinstance(step, Conjunction):
        return all(matches(node, sub_step) for sub_step in step.steps)

    raise TypeError(f"Not a path step: {step!r}")
