from __future__ import annotations

import logging
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..errors import ConfigError
from .model import Settings
from .paths import settings_path

logger = logging.getLogger(__name__)

_yaml = YAML(typ="safe")


def _read_yaml_map(path: Path) -> dict:
    """Reads a YAML file that must hold a mapping; a missing file is empty."""
    if not path.is_file():
        return {}
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except YAMLError as e:
        raise ConfigError(f"invalid YAML: {e}", path) from e
    if not isinstance(raw, dict):
        raise ConfigError("YAML must be a mapping", path)
    return raw


def load_settings(root: Path) -> Settings:
    """
    Load xinject-cfg/settings.yaml of the project at root.

    A missing file yields default settings.
    """
    path = settings_path(root)
    if not path.is_file():
        logger.debug("no settings at %s, using defaults", path)
        return Settings()
    try:
        return Settings.from_dict(_read_yaml_map(path))
    except ConfigError as e:
        if e.path is None:
            raise ConfigError(str(e), path) from e
        raise


__all__ = ["load_settings"]
