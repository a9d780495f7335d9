"""Shared fixtures for add-on tests."""

import json
import zipfile
from pathlib import Path
from typing import Dict, Optional

import pytest


def make_install_rdf(
    addon_id: Optional[str] = "sample@example.com",
    name: str = "Sample Add-on",
    version: str = "1.0",
    unpack: Optional[str] = None,
    em_prefix: str = "em",
) -> str:
    """Build an install.rdf document using ``em_prefix`` for the metadata namespace."""
    p = f"{em_prefix}:" if em_prefix else ""
    em_decl = f'xmlns:{em_prefix}="http://www.mozilla.org/2004/em-rdf#"' if em_prefix else ""
    rdf_decl = 'xmlns="http://www.w3.org/1999/02/22-rdf-syntax-ns#"'
    if not em_prefix:
        # metadata namespace is the default; RDF gets a prefix
        rdf_decl = 'xmlns:RDF="http://www.w3.org/1999/02/22-rdf-syntax-ns#"'
        em_decl = 'xmlns="http://www.mozilla.org/2004/em-rdf#"'
    r = "RDF:" if not em_prefix else ""

    fields = []
    if addon_id is not None:
        fields.append(f"<{p}id>{addon_id}</{p}id>")
    fields.append(f"<{p}name>{name}</{p}name>")
    fields.append(f"<{p}version>{version}</{p}version>")
    if unpack is not None:
        fields.append(f"<{p}unpack>{unpack}</{p}unpack>")

    return (
        '<?xml version="1.0"?>\n'
        f"<{r}RDF {rdf_decl} {em_decl}>\n"
        f'  <{r}Description about="urn:mozilla:install-manifest">\n'
        + "\n".join(f"    {f}" for f in fields)
        + f"\n  </{r}Description>\n"
        f"</{r}RDF>\n"
    )


def make_manifest_json(addon_id: Optional[str] = "web@example.com", **extra) -> str:
    data = {"manifest_version": 2, "name": "Web Sample", "version": "2.1"}
    if addon_id is not None:
        data["applications"] = {"gecko": {"id": addon_id}}
    data.update(extra)
    return json.dumps(data)


def write_xpi(path: Path, entries: Dict[str, str]) -> Path:
    with zipfile.ZipFile(path, "w") as zf:
        for name, content in entries.items():
            zf.writestr(name, content)
    return path


@pytest.fixture
def install_dir(tmp_path):
    """Empty extensions directory."""
    target = tmp_path / "extensions"
    target.mkdir()
    return target


@pytest.fixture
def legacy_dir(tmp_path):
    """Unpacked add-on with an install.rdf."""
    addon = tmp_path / "legacy-addon"
    (addon / "chrome" / "content").mkdir(parents=True)
    (addon / "install.rdf").write_text(make_install_rdf())
    (addon / "chrome.manifest").write_text("content sample chrome/content/\n")
    (addon / "chrome" / "content" / "overlay.js").write_text("// overlay\n")
    return addon


@pytest.fixture
def webext_dir(tmp_path):
    """Unpacked WebExtension with a manifest.json."""
    addon = tmp_path / "webext-addon"
    addon.mkdir()
    (addon / "manifest.json").write_text(make_manifest_json())
    (addon / "background.js").write_text("console.log('hi');\n")
    return addon
