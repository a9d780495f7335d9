"""Add-on manifest parsing."""

from .descriptor import AddonDescriptor, ManifestFormat
from .xml_tree import XmlNode, parse_xml
from .namespaces import resolve_namespace_prefix
from .legacy import EM_NAMESPACE, RDF_NAMESPACE, parse_legacy_manifest, parse_unpack_flag
from .modern import load_modern_manifest, parse_modern_manifest

__all__ = [
    "AddonDescriptor",
    "ManifestFormat",
    "XmlNode",
    "parse_xml",
    "resolve_namespace_prefix",
    "EM_NAMESPACE",
    "RDF_NAMESPACE",
    "parse_legacy_manifest",
    "parse_unpack_flag",
    "load_modern_manifest",
    "parse_modern_manifest",
]
