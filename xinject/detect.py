"""
Detection of the expression framework in a project.

With `enabled: auto` the project is scanned once for a framework script
(angular.js, angular.min.js, angular-*.js bundles) or a package.json
declaring an angular dependency.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .project import Project

logger = logging.getLogger(__name__)

_SCRIPT_NAME = re.compile(r"^angular(?:[.\-][\w.\-]*)?\.js$", re.IGNORECASE)
_DEPENDENCY_KEYS = ("dependencies", "devDependencies", "peerDependencies")
_PACKAGE_NAMES = ("angular", "@angular/core")


def _declares_dependency(package_json: Path) -> bool:
    try:
        data = json.loads(package_json.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.debug("skipping unreadable %s: %s", package_json, e)
        return False
    if not isinstance(data, dict):
        return False
    for key in _DEPENDENCY_KEYS:
        deps = data.get(key)
        if isinstance(deps, dict) and any(name in deps for name in _PACKAGE_NAMES):
            return True
    return False


def detect_framework(project: Project) -> bool:
    """
    True when injection applies to the project.

    `enabled: true|false` in settings short-circuits the scan.
    """
    mode = project.settings.enabled
    if mode != "auto":
        return mode == "true"

    for path in project.iter_content_files():
        if _SCRIPT_NAME.match(path.name):
            logger.debug("framework script found: %s", path)
            return True
        if path.name == "package.json" and _declares_dependency(path):
            logger.debug("framework dependency declared in %s", path)
            return True
    return False


__all__ = ["detect_framework"]
