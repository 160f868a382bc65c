"""
xinject: embedded template-expression injection for markup documents.

Public entry points:
    scan / scan_attribute_value      - region extraction over a text buffer
    ExpressionInjector / Injection   - per-document injections for a project
    ManifestResolver / ManifestCache - pubspec.yaml lookup and package roots
    Project                          - content roots, exclusions and modules
"""

from __future__ import annotations

from .injection import ExpressionInjector, Injection
from .manifest import ManifestCache, ManifestResolver
from .project import Project
from .scanner import scan, scan_attribute_value
from .types import DelimiterPair, Region

__all__ = [
    "scan",
    "scan_attribute_value",
    "DelimiterPair",
    "Region",
    "ExpressionInjector",
    "Injection",
    "ManifestCache",
    "ManifestResolver",
    "Project",
]
