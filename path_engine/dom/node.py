"""
Node implementation for the element tree.
This module implements the base Node shared by elements, text and comments.
"""

from enum import IntEnum
from typing import List, Optional, Iterator


class NodeType(IntEnum):
    """Node types as defined by the DOM."""
    ELEMENT_NODE = 1
    ATTRIBUTE_NODE = 2
    TEXT_NODE = 3
    CDATA_SECTION_NODE = 4
    PROCESSING_INSTRUCTION_NODE = 7
    COMMENT_NODE = 8
    DOCUMENT_NODE = 9
    DOCUMENT_TYPE_NODE = 10
    DOCUMENT_FRAGMENT_NODE = 11


class Node:
    """
    Base Node implementation for the element tree.

    A node owns an ordered list of child nodes. Only element children take
    part in path selection; text and comment children are carried along so
    the tree mirrors its source.
    """

    def __init__(self, node_type: NodeType, owner_document: Optional['Document'] = None):
        """
        Initialize a new Node.

        Args:
            node_type: The type of this node
            owner_document: The document that owns this node
        """
        self.node_type = node_type
        self.owner_document = owner_document

        # Node relationships
        self.parent_node: Optional['Node'] = None
        self.child_nodes: List['Node'] = []
        self.previous_sibling: Optional['Node'] = None
        self.next_sibling: Optional['Node'] = None

        self.node_name: str = "#node"
        self.node_value: Optional[str] = None

    @property
    def is_element(self) -> bool:
        """Whether this node is an element (and so a selection candidate)."""
        return self.node_type == NodeType.ELEMENT_NODE

    @property
    def children(self) -> List['Element']:
        """Get a list of child elements, in document order."""
        return [child for child in self.child_nodes if child.is_element]

    @property
    def child_element_count(self) -> int:
        """Get the number of child elements."""
        return sum(1 for child in self.child_nodes if child.is_element)

    @property
    def first_child(self) -> Optional['Node']:
        return self.child_nodes[0] if self.child_nodes else None

    @property
    def last_child(self) -> Optional['Node']:
        return self.child_nodes[-1] if self.child_nodes else None

    def append_child(self, child: 'Node') -> 'Node':
        """
        Append a child node to this node.

        A child that already has a parent is detached from it first, so every
        node keeps exactly one parent.

        Args:
            child: The node to append

        Returns:
            The appended node
        """
        if child is self or child.contains(self):
            raise ValueError("A node cannot be appended to itself or its descendants")

        if child.parent_node:
            child.parent_node.remove_child(child)

        child.parent_node = self

        if self.child_nodes:
            last_child = self.child_nodes[-1]
            last_child.next_sibling = child
            child.previous_sibling = last_child

        self.child_nodes.append(child)

        if child.owner_document is None and self.owner_document is not None:
            child.owner_document = self.owner_document

        return child

    def insert_before(self, new_child: 'Node', reference_child: Optional['Node'] = None) -> 'Node':
        """
        Insert a node before a reference node.

        Args:
            new_child: The node to insert
            reference_child: The reference node to insert before, or None to append

        Returns:
            The inserted node
        """
        if reference_child is None:
            return self.append_child(new_child)

        if reference_child.parent_node is not self:
            raise ValueError("Reference child not found in child nodes")

        if new_child is reference_child:
            return new_child

        if new_child is self or new_child.contains(self):
            raise ValueError("A node cannot be inserted into itself or its descendants")

        if new_child.parent_node:
            new_child.parent_node.remove_child(new_child)

        new_child.parent_node = self

        index = self._index_of(reference_child)
        prev_sibling = reference_child.previous_sibling

        new_child.next_sibling = reference_child
        new_child.previous_sibling = prev_sibling
        reference_child.previous_sibling = new_child

        if prev_sibling:
            prev_sibling.next_sibling = new_child

        self.child_nodes.insert(index, new_child)

        return new_child

    def remove_child(self, child: 'Node') -> 'Node':
        """
        Remove a child node from this node.

        Args:
            child: The node to remove

        Returns:
            The removed node
        """
        if child.parent_node is not self:
            raise ValueError("Child not found in child nodes")

        prev_sibling = child.previous_sibling
        next_sibling = child.next_sibling

        if prev_sibling:
            prev_sibling.next_sibling = next_sibling

        if next_sibling:
            next_sibling.previous_sibling = prev_sibling

        del self.child_nodes[self._index_of(child)]

        child.parent_node = None
        child.previous_sibling = None
        child.next_sibling = None

        return child

    def _index_of(self, child: 'Node') -> int:
        # Identity lookup; list.index() would compare by equality.
        for index, node in enumerate(self.child_nodes):
            if node is child:
                return index
        raise ValueError("Child not found in child nodes")

    def has_child_nodes(self) -> bool:
        """Check if this node has any child nodes."""
        return len(self.child_nodes) > 0

    def contains(self, other: Optional['Node']) -> bool:
        """
        Check if this node contains another node.

        Args:
            other: The node to check

        Returns:
            True if other is this node or one of its descendants
        """
        current = other
        while current is not None:
            if current is self:
                return True
            current = current.parent_node
        return False

    def iter_elements(self) -> Iterator['Element']:
        """Yield every element below this node, depth-first in document order."""
        for child in self.child_nodes:
            if child.is_element:
                yield child
                yield from child.iter_elements()

    @property
    def text_content(self) -> str:
        """
        Get the text content of this node and all its descendants.

        Returns:
            The concatenated text of every descendant text node
        """
        if self.node_type == NodeType.TEXT_NODE:
            return self.node_value or ""

        return "".join(
            child.text_content for child in self.child_nodes
            if child.node_type in (NodeType.TEXT_NODE, NodeType.ELEMENT_NODE)
        )
