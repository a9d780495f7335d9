"""xpinstall - install Firefox add-ons from .xpi archives or directories.

Reads either manifest format (install.rdf or manifest.json) into an
``AddonDescriptor`` and places the add-on under its ID in a target
extensions directory.
"""

from .errors import AddonFormatError, ConfigurationError, InvalidSourceError, XPInstallError
from .installer import install
from .locator import LocatedSource, SourceKind, get_details, inspect_source, locate
from .manifest import (
    AddonDescriptor,
    ManifestFormat,
    parse_legacy_manifest,
    parse_modern_manifest,
    resolve_namespace_prefix,
)

__version__ = "0.1.0"

__all__ = [
    "install",
    "locate",
    "get_details",
    "inspect_source",
    "LocatedSource",
    "SourceKind",
    "AddonDescriptor",
    "ManifestFormat",
    "parse_legacy_manifest",
    "parse_modern_manifest",
    "resolve_namespace_prefix",
    "XPInstallError",
    "AddonFormatError",
    "InvalidSourceError",
    "ConfigurationError",
]
