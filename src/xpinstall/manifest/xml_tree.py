"""Minimal XML tree that keeps qualified names and namespace declarations.

The tree is built with namespace processing turned off, so an element such as
``<em:id>`` keeps its prefixed tag and ``xmlns:em="..."`` stays an ordinary
attribute. Callers resolve prefixes themselves (see ``namespaces``).
"""

import logging
import xml.sax
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union
from xml.sax.handler import ContentHandler

import defusedxml.sax
from defusedxml import DefusedXmlException

from ..errors import AddonFormatError

logger = logging.getLogger(__name__)


@dataclass
class XmlNode:
    """An element: tag, attributes, children grouped by tag, and text."""
    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: Dict[str, List["XmlNode"]] = field(default_factory=dict)
    text: str = ""

    def add_child(self, node: "XmlNode") -> None:
        self.children.setdefault(node.tag, []).append(node)

    def elements(self) -> List["XmlNode"]:
        """All child elements regardless of tag."""
        return [child for group in self.children.values() for child in group]

    def first(self, tag: str) -> Optional["XmlNode"]:
        """First child with the given tag, or None."""
        nodes = self.children.get(tag)
        return nodes[0] if nodes else None

    def child_text(self, tag: str) -> str:
        """Text of the first child with the given tag, or ''."""
        node = self.first(tag)
        if node is None:
            return ""
        return node.text


class _TreeBuilder(ContentHandler):
    """SAX handler assembling ``XmlNode`` objects."""

    def __init__(self) -> None:
        super().__init__()
        self.document = XmlNode(tag="")
        self._stack: List[XmlNode] = [self.document]

    def startElement(self, name, attrs):
        node = XmlNode(tag=name, attributes=dict(attrs.items()))
        self._stack[-1].add_child(node)
        self._stack.append(node)

    def endElement(self, name):
        self._stack.pop()

    def characters(self, content):
        self._stack[-1].text += content


def parse_xml(text: Union[str, bytes], source: Optional[str] = None) -> XmlNode:
    """Parse XML into a document node whose single child is the root element.

    Args:
        text: XML document, as text or raw bytes
        source: Path of the document, used in error messages

    Returns:
        Document node

    Raises:
        AddonFormatError: If the document is not well-formed or uses
            forbidden constructs (entity expansion, external references)
    """
    if isinstance(text, str):
        text = text.encode("utf-8")

    builder = _TreeBuilder()
    try:
        defusedxml.sax.parseString(text, builder)
    except xml.sax.SAXParseException as e:
        logger.debug(f"XML syntax error in {source}: {e}")
        raise AddonFormatError(f"Malformed manifest for add-on {source}: {e}", path=source) from e
    except DefusedXmlException as e:
        raise AddonFormatError(f"Refused to parse manifest for add-on {source}: {e}", path=source) from e

    return builder.document
