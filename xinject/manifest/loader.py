"""
Parsing of pubspec.yaml contents.

Scalars are kept as strings: a manifest `version: 1.10` must not become
the float 1.1. Only plain null forms are resolved; quoted scalars such as
`"null"` or `''` stay strings. Any parse failure means "no data":
manifests are routinely invalid while being typed.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from ruamel.yaml import YAML
from ruamel.yaml.constructor import BaseConstructor

logger = logging.getLogger(__name__)

_NULLS = frozenset({"", "~", "null", "Null", "NULL"})


class _ManifestConstructor(BaseConstructor):
    """Base constructor that resolves null for plain scalars only."""

    def construct_scalar(self, node: Any) -> Any:
        value = super().construct_scalar(node)
        # plain scalars carry no style (None, or "" from the C parser)
        if not node.style and value in _NULLS:
            return None
        return value


def _yaml() -> YAML:
    # YAML instances are not thread-safe; one per call
    yaml = YAML(typ="base")
    yaml.Constructor = _ManifestConstructor
    return yaml


def load_manifest_info(text: str) -> Optional[Dict[str, Any]]:
    """
    Top-level mapping of a manifest, or None when the text is not valid
    YAML or its document is not a mapping.
    """
    try:
        raw = _yaml().load(text)
    except Exception as e:  # malformed yaml, e.g. because of typing in it
        logger.debug("manifest parse failed: %s", e)
        return None
    if not isinstance(raw, dict):
        return None
    return raw


__all__ = ["load_manifest_info"]
