"""
Element tree for the path engine.
This package provides the node model that paths are evaluated against.
"""

from .node import Node, NodeType
from .element import Element
from .text import Text
from .comment import Comment
from .document import Document

__all__ = [
    'Node', 'NodeType', 'Element', 'Text', 'Comment', 'Document'
]
