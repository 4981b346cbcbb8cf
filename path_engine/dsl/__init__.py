"""
Path DSL: steps, paths and the selector engine.
"""

from .steps import Step, NameTest, AttributeTest, PredicateTest, Conjunction, matches
from .paths import Path, path, as_step
from .selector_engine import SelectorEngine, select

__all__ = [
    'Step', 'NameTest', 'AttributeTest', 'PredicateTest', 'Conjunction', 'matches',
    'Path', 'path', 'as_step',
    'SelectorEngine', 'select',
]
