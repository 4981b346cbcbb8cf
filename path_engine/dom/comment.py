"""
Comment node implementation for the element tree.
"""

from typing import Optional
from .node import Node, NodeType


class Comment(Node):
    """Comment node; like text, it is never a selection candidate."""

    def __init__(self, data: str, owner_document: Optional['Document'] = None):
        """
        Initialize a comment node.

        Args:
            data: The comment text
            owner_document: The document that owns this node
        """
        super().__init__(NodeType.COMMENT_NODE, owner_document)

        if data is None:
            data = ""

        self.node_name = "#comment"
        self.node_value = data

    @property
    def data(self) -> str:
        return self.node_value

    def __repr__(self) -> str:
        return f"<Comment {self.node_value[:30]!r}>"
