"""Namespace prefix lookup for manifests parsed without namespace processing."""

from typing import Optional

from ..errors import AddonFormatError
from .xml_tree import XmlNode


def resolve_namespace_prefix(document: XmlNode, namespace_uri: str, source: Optional[str] = None) -> str:
    """Find the prefix bound to ``namespace_uri`` on the root element.

    Returns ``"x:"`` for a declaration ``xmlns:x="<uri>"`` and ``""`` when the
    URI is the default namespace or is not declared at all.

    Raises:
        AddonFormatError: If the document does not have exactly one root element
    """
    roots = document.elements()
    if len(roots) != 1:
        raise AddonFormatError(f"Malformed manifest for add-on {source}", path=source)

    for name, value in roots[0].attributes.items():
        if value != namespace_uri:
            continue
        if ":" in name:
            return name.split(":")[1] + ":"
        return ""

    return ""
