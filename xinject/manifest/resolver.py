"""
Manifest and package-root resolution for files of a project.

The manifest of a file is the nearest pubspec.yaml in one of its parent
directories, searched upward while the directories are project content.
Package roots are either the module's custom roots (an option holding a
';'-separated list of directories) or the `packages` directory next to
the manifest.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ..project import Module, Project
from .cache import ManifestCache

logger = logging.getLogger(__name__)

PUBSPEC_YAML = "pubspec.yaml"
PACKAGES_DIR = "packages"
CUSTOM_PACKAGE_ROOTS_OPTION = "dart.package.roots"
CUSTOM_PACKAGE_ROOTS_SEPARATOR = ";"


@dataclass(frozen=True)
class ManifestRoots:
    """Manifest of a file (None with custom roots) and its package roots."""
    manifest: Optional[Path]
    package_roots: List[Path] = field(default_factory=list)


def custom_package_roots(module: Module) -> Optional[str]:
    return module.get_option(CUSTOM_PACKAGE_ROOTS_OPTION)


def set_custom_package_roots(module: Module, value: Optional[str]) -> None:
    """Blank values clear the option."""
    if value is None or not value.strip():
        module.clear_option(CUSTOM_PACKAGE_ROOTS_OPTION)
    else:
        module.set_option(CUSTOM_PACKAGE_ROOTS_OPTION, value)


def _split_roots(value: str, base: Path) -> List[Path]:
    out: List[Path] = []
    for raw in value.split(CUSTOM_PACKAGE_ROOTS_SEPARATOR):
        raw = raw.strip()
        if not raw:
            continue
        p = Path(raw)
        if not p.is_absolute():
            p = base / p
        if p.is_dir():
            out.append(p.resolve())
        else:
            logger.debug("custom package root is not a directory: %s", p)
    return out


class ManifestResolver:
    """
    Resolves manifests for files of one project through a shared cache.
    """

    def __init__(self, project: Project, cache: Optional[ManifestCache] = None):
        self.project = project
        self.cache = cache or ManifestCache()

    def find_manifest(self, context_file: Path) -> Optional[Path]:
        """Nearest pubspec.yaml above context_file inside project content."""
        parent = context_file.resolve().parent
        while self.project.is_in_content(parent):
            candidate = parent / PUBSPEC_YAML
            if candidate.is_file():
                return candidate
            if parent.parent == parent:
                break
            parent = parent.parent
        return None

    def manifest_and_package_roots(self, context_file: Path) -> ManifestRoots:
        module = self.project.find_module_for_file(context_file)
        custom = custom_package_roots(module) if module is not None else None
        if custom is not None and custom.strip():
            return ManifestRoots(manifest=None, package_roots=_split_roots(custom, self.project.root))

        manifest = self.find_manifest(context_file)
        if manifest is None:
            return ManifestRoots(manifest=None)
        packages = manifest.parent / PACKAGES_DIR
        if not packages.is_dir():
            return ManifestRoots(manifest=manifest)
        return ManifestRoots(manifest=manifest, package_roots=[packages])

    def package_roots(self, context_file: Path) -> List[Path]:
        return self.manifest_and_package_roots(context_file).package_roots

    def manifest_name(self, manifest: Path) -> Optional[str]:
        """The `name` field of a manifest when it is a string."""
        info = self.cache.get(manifest)
        name = None if info is None else info.get("name")
        return name if isinstance(name, str) else None


__all__ = [
    "PUBSPEC_YAML",
    "PACKAGES_DIR",
    "CUSTOM_PACKAGE_ROOTS_OPTION",
    "CUSTOM_PACKAGE_ROOTS_SEPARATOR",
    "ManifestRoots",
    "ManifestResolver",
    "custom_package_roots",
    "set_custom_package_roots",
]
