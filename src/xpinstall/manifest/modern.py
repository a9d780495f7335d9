"""Parser for WebExtension manifest.json files."""

import json
import logging
from typing import Any, Mapping, Optional

from ..errors import AddonFormatError
from .descriptor import AddonDescriptor

logger = logging.getLogger(__name__)


def parse_modern_manifest(data: Mapping[str, Any], source: Optional[str] = None) -> AddonDescriptor:
    """Build a descriptor from a decoded manifest.json.

    WebExtensions are never unpacked.

    Raises:
        AddonFormatError: If ``applications.gecko.id`` is missing, empty or not a string
    """
    applications = data.get("applications")
    gecko = applications.get("gecko") if isinstance(applications, Mapping) else None
    addon_id = gecko.get("id") if isinstance(gecko, Mapping) else None
    if not addon_id or not isinstance(addon_id, str):
        raise AddonFormatError(f"Could not find add-on ID for {source}", path=source)

    return AddonDescriptor(
        id=addon_id,
        name=data.get("name"),
        version=data.get("version"),
        unpack=False,
    )


def load_modern_manifest(raw: bytes, source: Optional[str] = None) -> AddonDescriptor:
    """Decode manifest.json bytes and parse them."""
    try:
        data = json.loads(raw.decode("utf-8-sig"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.error(f"Failed to parse manifest.json for {source}: {e}")
        raise AddonFormatError(f"Malformed manifest for add-on {source}: {e}", path=source) from e

    if not isinstance(data, dict):
        raise AddonFormatError(
            f"Malformed manifest for add-on {source}: expected a JSON object", path=source
        )

    return parse_modern_manifest(data, source)
