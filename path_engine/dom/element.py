"""
Element implementation for the element tree.
This module implements named elements carrying string attributes.
"""

from typing import Dict, Optional, Mapping

from .node import Node, NodeType


class Element(Node):
    """
    Element node implementation.

    An element has a name (its tag), a mapping of string attributes and an
    ordered list of child nodes. The tag name is kept exactly as given and
    compared verbatim. Which case reaches it from markup depends on the
    parser backend (see TreeBuilder).
    """

    def __init__(self,
                 tag_name: str,
                 attributes: Optional[Mapping[str, str]] = None,
                 owner_document: Optional['Document'] = None):
        """
        Initialize a new Element.

        Args:
            tag_name: Name of the element tag (e.g., "room", "rate")
            attributes: Optional initial attributes
            owner_document: The document that owns this element
        """
        super().__init__(NodeType.ELEMENT_NODE, owner_document)

        if not isinstance(tag_name, str) or not tag_name:
            raise ValueError(f"Element name must be a non-empty string, got {tag_name!r}")

        self.tag_name = tag_name
        self.node_name = tag_name

        self.attributes: Dict[str, str] = {}
        for name, value in (attributes or {}).items():
            self.set_attribute(name, value)

    @property
    def name(self) -> str:
        """The element's tag name."""
        return self.tag_name

    def has_attribute(self, name: str) -> bool:
        """
        Check if the element has the specified attribute.

        Args:
            name: The attribute name

        Returns:
            True if the attribute exists, False otherwise
        """
        return name in self.attributes

    def get_attribute(self, name: str) -> Optional[str]:
        """
        Get the value of an attribute.

        Args:
            name: The attribute name

        Returns:
            The attribute value, or None if the attribute doesn't exist
        """
        return self.attributes.get(name)

    def set_attribute(self, name: str, value: str) -> None:
        """
        Set an attribute value.

        Args:
            name: The attribute name
            value: The attribute value

        Raises:
            TypeError: If the name or value is not a string
        """
        if not isinstance(name, str) or not isinstance(value, str):
            raise TypeError(
                f"Attributes are string to string, got {type(name).__name__}={type(value).__name__}"
            )
        self.attributes[name] = value

    def remove_attribute(self, name: str) -> None:
        """
        Remove an attribute if present.

        Args:
            name: The attribute name
        """
        self.attributes.pop(name, None)

    def has_attributes(self) -> bool:
        """Check if the element has any attributes."""
        return bool(self.attributes)

    def __repr__(self) -> str:
        attrs = "".join(f' {k}="{v}"' for k, v in self.attributes.items())
        return f"<Element {self.tag_name}{attrs}>"
