"""
Document implementation for the element tree.
This module implements the root container produced by the tree builder.
"""

import logging
from typing import List, Optional, Mapping, Iterable

from .node import Node, NodeType
from .element import Element
from .text import Text
from .comment import Comment

logger = logging.getLogger(__name__)


class Document(Node):
    """
    Document node implementation.

    The document is the root of a parsed tree. Its element children are the
    top-level elements of the source, so the first step of a path applied to
    a document tests those top-level elements.
    """

    def __init__(self):
        """Initialize a new, empty Document."""
        super().__init__(NodeType.DOCUMENT_NODE)
        self.owner_document = None
        self.node_name = "#document"

        self._errors: List[str] = []

    @property
    def document_element(self) -> Optional[Element]:
        """The first top-level element, if any."""
        for child in self.child_nodes:
            if child.is_element:
                return child
        return None

    def create_element(self, tag_name: str, attributes: Optional[Mapping[str, str]] = None) -> Element:
        """
        Create a new element with the specified tag name.

        Args:
            tag_name: The tag name of the element
            attributes: Optional initial attributes

        Returns:
            The new element
        """
        return Element(tag_name, attributes, self)

    def create_text_node(self, data: str) -> Text:
        """
        Create a new text node.

        Args:
            data: The text content

        Returns:
            The new text node
        """
        return Text(data, self)

    def create_comment(self, data: str) -> Comment:
        """
        Create a new comment node.

        Args:
            data: The comment content

        Returns:
            The new comment node
        """
        return Comment(data, self)

    def select(self, path: Iterable) -> List[Element]:
        """
        Select elements from this document with a path.

        Args:
            path: A Path, or an iterable of steps or step literals

        Returns:
            The matched elements in document order
        """
        from ..dsl.selector_engine import select
        return select(self, path)

    def handle_error(self, error_message: str) -> None:
        """
        Record a problem met while building this document.

        Args:
            error_message: The error message
        """
        logger.warning(error_message)
        self._errors.append(error_message)

    def get_errors(self) -> List[str]:
        """
        Get the problems recorded while building this document.

        Returns:
            List of error messages
        """
        return list(self._errors)

    def debug_structure(self, max_level: int = 10) -> str:
        """
        Generate a debug representation of the document structure.

        Args:
            max_level: Deepest element level to print

        Returns:
            A string representation of the document structure
        """
        element_count = 0
        text_count = 0
        comment_count = 0

        def count_nodes(node: Node) -> None:
            nonlocal element_count, text_count, comment_count
            for child in node.child_nodes:
                if child.node_type == NodeType.ELEMENT_NODE:
                    element_count += 1
                    count_nodes(child)
                elif child.node_type == NodeType.TEXT_NODE:
                    text_count += 1
                elif child.node_type == NodeType.COMMENT_NODE:
                    comment_count += 1

        count_nodes(self)

        result = ["Document Structure:"]
        result.append(f"Element count: {element_count}")
        result.append(f"Text node count: {text_count}")
        result.append(f"Comment count: {comment_count}")

        def print_element_tree(element: Element, level: int) -> None:
            if level > max_level:
                return
            result.append(f"{'  ' * level}{element.tag_name}")
            for child in element.children:
                print_element_tree(child, level + 1)

        if self.child_element_count:
            result.append("\nElement tree:")
            for top in self.children:
                print_element_tree(top, 0)

        return "\n".join(result)
