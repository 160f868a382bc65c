"""
Package manifest (pubspec.yaml) lookup, parsing and caching.
"""

from .cache import DocumentBuffers, ManifestCache, file_stamp
from .loader import load_manifest_info
from .resolver import (
    CUSTOM_PACKAGE_ROOTS_OPTION,
    CUSTOM_PACKAGE_ROOTS_SEPARATOR,
    PUBSPEC_YAML,
    ManifestResolver,
    ManifestRoots,
    custom_package_roots,
    set_custom_package_roots,
)

__all__ = [
    "load_manifest_info",
    "ManifestCache",
    "DocumentBuffers",
    "file_stamp",
    "ManifestResolver",
    "ManifestRoots",
    "custom_package_roots",
    "set_custom_package_roots",
    "PUBSPEC_YAML",
    "CUSTOM_PACKAGE_ROOTS_OPTION",
    "CUSTOM_PACKAGE_ROOTS_SEPARATOR",
]
