"""
Path Engine - a small path DSL for selecting elements from parsed markup trees.
"""

import logging

from path_engine.errors import PathEngineError, MalformedPath, PredicateFailure
from path_engine.dom import Node, NodeType, Element, Text, Comment, Document
from path_engine.dsl import (
    Step, NameTest, AttributeTest, PredicateTest, Conjunction, matches,
    Path, path, as_step, SelectorEngine, select,
)
from path_engine.parser import TreeBuilder, parse_markup

__version__ = "0.1.0"
__author__ = "Path Engine Team"
__description__ = "A small path DSL for selecting elements from parsed markup trees"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'PathEngineError', 'MalformedPath', 'PredicateFailure',
    'Node', 'NodeType', 'Element', 'Text', 'Comment', 'Document',
    'Step', 'NameTest', 'AttributeTest', 'PredicateTest', 'Conjunction', 'matches',
    'Path', 'path', 'as_step', 'SelectorEngine', 'select',
    'TreeBuilder', 'parse_markup',
]
