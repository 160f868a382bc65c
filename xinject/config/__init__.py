"""
Project settings for xinject (xinject-cfg/settings.yaml).
"""

from __future__ import annotations

from .load import load_settings
from .model import DEFAULT_LANGUAGE, DelimiterCfg, ModuleCfg, Settings
from .paths import CFG_DIR, SETTINGS_FILE, cfg_root, settings_path

__all__ = [
    "load_settings",
    "Settings",
    "DelimiterCfg",
    "ModuleCfg",
    "DEFAULT_LANGUAGE",
    "CFG_DIR",
    "SETTINGS_FILE",
    "cfg_root",
    "settings_path",
]
