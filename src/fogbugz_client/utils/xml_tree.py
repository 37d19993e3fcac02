"""Generic XML tree used by every FogBugz response extractor.

FogBugz's legacy API answers with loosely structured XML: the same field may
appear once or many times, values sometimes live in attributes and sometimes
in child elements, and text is often wrapped in CDATA with stray whitespace.
``parse_xml`` turns such a document into a uniform tree of ``XmlNode``
objects so the extractors never have to guess at the shape:

- attributes are kept apart from child elements, so an attribute and a child
  element sharing a name never collide;
- children are grouped by tag into lists, and a tag that occurs once is still
  a list of one;
- text is kept exactly as sent; trimming is left to the extractors.

``XmlNode.to_plain`` renders a node back into plain dicts, lists and strings
(attributes under ``$``, mixed text under ``_``) for diagnostics and for
passing unmodelled fields through to callers.
"""

import logging
from dataclasses import dataclass, field
from typing import Any
from xml.etree.ElementTree import Element

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import ParseError, fromstring

from ..exceptions import XmlParseError

logger = logging.getLogger("fogbugz-client.xml")

ATTRIBUTES_KEY = "$"
TEXT_KEY = "_"


@dataclass
class XmlNode:
    """A single XML element.

    Attributes:
        tag: The element name
        attributes: The element's attributes, in document order
        text: The element's own text, or None when it only holds children
        children: Child elements grouped by tag, each list in document order
    """

    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    text: str | None = None
    children: dict[str, list["XmlNode"]] = field(default_factory=dict)

    @property
    def is_text(self) -> bool:
        """True when the node is a bare text value (no attributes, no children)."""
        return not self.attributes and not self.children

    def has(self, tag: str) -> bool:
        return tag in self.children

    def children_of(self, tag: str) -> list["XmlNode"]:
        """Return every child with the given tag (an empty list when absent)."""
        return self.children.get(tag, [])

    def first(self, tag: str) -> "XmlNode | None":
        """Return the first child with the given tag, or None."""
        nodes = self.children.get(tag)
        return nodes[0] if nodes else None

    def text_of(self, tag: str) -> str | None:
        """Return the untrimmed text of the first child with the given tag."""
        node = self.first(tag)
        if node is None:
            return None
        return node.text if node.text is not None else ""

    def attribute(self, name: str, default: str | None = None) -> str | None:
        return self.attributes.get(name, default)

    def to_plain(self) -> Any:
        """Render the node as plain Python data.

        A bare text node becomes its string. Anything else becomes a dict
        holding ``$`` (attributes), ``_`` (text) when present, and one list
        per child tag.
        """
        if self.is_text:
            return self.text if self.text is not None else ""

        plain: dict[str, Any] = {}
        if self.attributes:
            plain[ATTRIBUTES_KEY] = dict(self.attributes)
        if self.text is not None:
            plain[TEXT_KEY] = self.text
        for tag, nodes in self.children.items():
            plain[tag] = [node.to_plain() for node in nodes]
        return plain


def _build_node(element: Element) -> XmlNode:
    node = XmlNode(tag=element.tag, attributes=dict(element.attrib))

    text_parts = [element.text or ""]
    for child in element:
        node.children.setdefault(child.tag, []).append(_build_node(child))
        text_parts.append(child.tail or "")

    text = "".join(text_parts)
    if not node.children:
        # Leaf elements keep their text exactly, including surrounding spaces
        node.text = text if text or not node.attributes else None
    elif text.strip():
        node.text = text

    return node


def parse_xml(xml: str | bytes) -> XmlNode:
    """
    Parse an XML document into an ``XmlNode`` tree.

    Args:
        xml: The raw response body

    Returns:
        The root node of the document

    Raises:
        XmlParseError: If the body is not well-formed XML or uses constructs
            the hardened parser refuses (entity expansion, external entities)
    """
    if xml is None or (isinstance(xml, str | bytes) and not xml.strip()):
        logger.error("Received an empty response body")
        raise XmlParseError()

    try:
        root = fromstring(xml)
    except (ParseError, DefusedXmlException) as e:
        logger.error(f"Could not parse XML response: {str(e)}")
        raise XmlParseError() from e

    return _build_node(root)
