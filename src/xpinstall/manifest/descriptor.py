"""Normalized add-on description shared by both manifest formats."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ManifestFormat(Enum):
    """Manifest formats an add-on may ship."""
    LEGACY = "install.rdf"
    MODERN = "manifest.json"

    @property
    def filename(self) -> str:
        return self.value


@dataclass(frozen=True)
class AddonDescriptor:
    """Details needed to install an add-on."""
    id: str
    name: Optional[str] = ""
    version: Optional[str] = ""
    unpack: bool = False

    def __str__(self) -> str:
        label = self.name or self.id
        if self.version:
            return f"{label} {self.version} ({self.id})"
        return f"{label} ({self.id})"
