"""
Tree builder.
This module turns markup into a path_engine Document, using BeautifulSoup
for the actual parsing: lxml for XML, html.parser or html5lib for HTML.
"""

import logging
from typing import Optional, Union

from bs4 import BeautifulSoup, Tag, NavigableString
from bs4 import Comment as SoupComment, CData, Declaration, Doctype, ProcessingInstruction

from ..dom import Document, Element, Node

logger = logging.getLogger(__name__)

HTML_PARSER = "html.parser"
HTML5LIB = "html5lib"
XML = "xml"
BACKENDS = (XML, HTML_PARSER, HTML5LIB)


class TreeBuilder:
    """
    Builds element trees from markup.

    "xml" parses with lxml and keeps element and attribute names exactly as
    written, so camelCase data feeds match by their real names. The two
    HTML backends lowercase names: "html.parser" otherwise keeps the source
    structure, while "html5lib" applies full HTML5 tree construction
    (adding html/head/body as a browser would).

    With no backend given, markup that opens with an XML declaration goes
    to "xml" and everything else to "html.parser".
    """

    def __init__(self, backend: Optional[str] = None, keep_whitespace: bool = False):
        """
        Initialize the tree builder.

        Args:
            backend: BeautifulSoup parser feature, "xml", "html.parser" or
                "html5lib"; None picks one per document
            keep_whitespace: Whether whitespace-only text is kept as Text nodes
        """
        if backend is not None and backend not in BACKENDS:
            raise ValueError(f"Unknown parser backend {backend!r}, expected one of {BACKENDS}")

        self.backend = backend
        self.keep_whitespace = keep_whitespace

        logger.debug(f"TreeBuilder initialized (backend: {backend or 'auto'})")

    @classmethod
    def from_config(cls, config: 'Config') -> 'TreeBuilder':
        """
        Create a builder from the "parser" section of a configuration.

        Args:
            config: The configuration to read

        Returns:
            The configured builder
        """
        return cls(
            backend=config.get('parser.backend'),
            keep_whitespace=bool(config.get('parser.keep_whitespace', False)),
        )

    def build(self, markup: Union[str, bytes]) -> Document:
        """
        Parse markup into a Document.

        Args:
            markup: Markup text, or bytes for BeautifulSoup to decode

        Returns:
            The parsed Document
        """
        if markup is None:
            raise TypeError("Cannot build a tree from None")

        backend = self.backend or detect_backend(markup)
        soup = BeautifulSoup(markup, backend, multi_valued_attributes=None)
        document = self.from_soup(soup)

        if not markup.strip():
            document.handle_error("Empty markup provided")

        return document

    def from_soup(self, soup: Tag) -> Document:
        """
        Convert an already parsed BeautifulSoup tree into a Document.

        Args:
            soup: A BeautifulSoup object, or a single Tag to use as the
                document's only top-level element

        Returns:
            The converted Document
        """
        document = Document()

        if isinstance(soup, BeautifulSoup):
            for child in soup.contents:
                self._convert_node(child, document, document)
        else:
            self._convert_node(soup, document, document)

        logger.debug(f"Built document with {sum(1 for _ in document.iter_elements())} element(s)")
        return document

    def _convert_node(self, node, parent: Node, document: Document) -> None:
        """
        Recursively convert a BeautifulSoup node into our tree.

        Args:
            node: The BeautifulSoup node
            parent: The parent node in our tree
            document: The document being built
        """
        if isinstance(node, Tag):
            element = self._convert_element(node, document)
            parent.append_child(element)
            for child in node.contents:
                self._convert_node(child, element, document)

        elif isinstance(node, SoupComment):
            parent.append_child(document.create_comment(str(node)))

        elif isinstance(node, (Doctype, Declaration, ProcessingInstruction)):
            logger.debug(f"Skipping {type(node).__name__}: {str(node)[:50]}")

        elif isinstance(node, (CData, NavigableString)):
            text = str(node)
            if text and (self.keep_whitespace or text.strip()):
                parent.append_child(document.create_text_node(text))

    def _convert_element(self, tag: Tag, document: Document) -> Element:
        """
        Convert a BeautifulSoup tag into an Element.

        Args:
            tag: The tag to convert

        Returns:
            The new element, without children
        """
        element = document.create_element(tag.name)
        for name, value in tag.attrs.items():
            element.set_attribute(name, _attribute_text(value))
        return element


def _attribute_text(value) -> str:
    # bs4 hands back lists for multi-valued attributes unless told otherwise.
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(str(item) for item in value)
    return str(value)


def detect_backend(markup: Union[str, bytes]) -> str:
    """
    Pick a backend for markup: "xml" after an XML declaration, else "html.parser".
    """
    head = markup.lstrip()[:5]
    if head in ("<?xml", b"<?xml"):
        return XML
    return HTML_PARSER


def parse_markup(markup: Union[str, bytes], backend: Optional[str] = None,
                 keep_whitespace: bool = False) -> Document:
    """
    Parse markup into a Document.

    Args:
        markup: Markup text or bytes
        backend: "xml", "html.parser" or "html5lib"; None detects it
        keep_whitespace: Whether whitespace-only text is kept

    Returns:
        The parsed Document
    """
    return TreeBuilder(backend, keep_whitespace).build(markup)
