from __future__ import annotations

from pathlib import Path

# Single source of truth for configuration directory structure.
CFG_DIR = "xinject-cfg"
SETTINGS_FILE = "settings.yaml"


def cfg_root(root: Path) -> Path:
    """Absolute path to the xinject-cfg/ directory."""
    return (root / CFG_DIR).resolve()


def settings_path(root: Path) -> Path:
    """Path to the project settings file xinject-cfg/settings.yaml."""
    return cfg_root(root) / SETTINGS_FILE


def is_cfg_relpath(s: str) -> bool:
    """
    Quick check whether a relative POSIX path belongs to the xinject-cfg/ directory.
    Used when walking project content.
    """
    return s == CFG_DIR or s.startswith(CFG_DIR + "/")


__all__ = ["CFG_DIR", "SETTINGS_FILE", "cfg_root", "settings_path", "is_cfg_relpath"]
