"""Parser for install.rdf manifests."""

import logging
from typing import Optional, Union

from ..errors import AddonFormatError
from .descriptor import AddonDescriptor
from .namespaces import resolve_namespace_prefix
from .xml_tree import XmlNode, parse_xml

logger = logging.getLogger(__name__)

EM_NAMESPACE = "http://www.mozilla.org/2004/em-rdf#"
RDF_NAMESPACE = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"


def parse_unpack_flag(text: Optional[str]) -> bool:
    """Interpret an ``em:unpack`` value.

    Only ``"true"`` (any letter case, surrounding whitespace ignored) means
    unpack; anything else, including a missing value, means keep packed.
    """
    if not text:
        return False
    return text.strip().lower() == "true"


def find_description(document: XmlNode, rdf: str, source: Optional[str] = None) -> XmlNode:
    """Return the first ``RDF/Description`` node."""
    root = document.first(rdf + "RDF")
    description = root.first(rdf + "Description") if root is not None else None
    if description is None:
        raise AddonFormatError(
            f"Could not find install manifest description for {source}", path=source
        )
    return description


def extract_descriptor(description: XmlNode, em: str, source: Optional[str] = None) -> AddonDescriptor:
    """Read the add-on fields from a description node."""
    addon_id = description.child_text(em + "id").strip()
    if not addon_id:
        raise AddonFormatError(f"Could not find add-on ID for {source}", path=source)

    return AddonDescriptor(
        id=addon_id,
        name=description.child_text(em + "name"),
        version=description.child_text(em + "version"),
        unpack=parse_unpack_flag(description.child_text(em + "unpack")),
    )


def parse_legacy_manifest(xml_text: Union[str, bytes], source: Optional[str] = None) -> AddonDescriptor:
    """Parse the contents of an install.rdf file.

    Args:
        xml_text: Manifest contents
        source: Path of the add-on, used in error messages

    Returns:
        Add-on descriptor

    Raises:
        AddonFormatError: If the XML is malformed or no add-on ID is present
    """
    document = parse_xml(xml_text, source)
    em = resolve_namespace_prefix(document, EM_NAMESPACE, source)
    rdf = resolve_namespace_prefix(document, RDF_NAMESPACE, source)
    logger.debug(f"Resolved install.rdf prefixes em={em!r} rdf={rdf!r} for {source}")

    description = find_description(document, rdf, source)
    return extract_descriptor(description, em, source)
