"""
Text node implementation for the element tree.
"""

from typing import Optional
from .node import Node, NodeType


class Text(Node):
    """
    Text node implementation.

    Text is non-element content: it is kept in the tree but never matched
    by a path step.
    """

    def __init__(self, data: str, owner_document: Optional['Document'] = None):
        """
        Initialize a text node.

        Args:
            data: The text content
            owner_document: The document that owns this node
        """
        super().__init__(NodeType.TEXT_NODE, owner_document)

        if data is None:
            data = ""

        self.node_name = "#text"
        self.node_value = data

    @property
    def data(self) -> str:
        return self.node_value

    @property
    def is_whitespace(self) -> bool:
        """Whether the text is whitespace only."""
        return not self.node_value.strip()

    def __repr__(self) -> str:
        return f"<Text {self.node_value[:30]!r}>"
