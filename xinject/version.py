from __future__ import annotations

from importlib import metadata


def tool_version() -> str:
    """
    Installed package version; "0.0.0" when running from sources.
    Kept free of package imports to avoid cycles.
    """
    try:
        return metadata.version("xinject")
    except metadata.PackageNotFoundError:
        return "0.0.0"


__all__ = ["tool_version"]
