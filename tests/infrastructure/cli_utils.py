"""
Utilities for working with the CLI in tests.
"""

import json
import os
import subprocess
import sys
from pathlib import Path


def run_cli(root: Path, *args: str) -> subprocess.CompletedProcess:
    """
    Runs xinject.cli with the given arguments in root.

    Args:
        root: Working directory for the command
        *args: Command line arguments

    Returns:
        CompletedProcess with captured output
    """
    env = os.environ.copy()
    # the package is importable from the checkout even when not installed
    repo_root = str(Path(__file__).resolve().parents[2])
    env["PYTHONPATH"] = os.pathsep.join(p for p in (repo_root, env.get("PYTHONPATH")) if p)
    return subprocess.run(
        [sys.executable, "-m", "xinject.cli", *args],
        cwd=root, env=env, capture_output=True, text=True, encoding="utf-8"
    )


def jload(s: str):
    """Parses JSON output of the CLI."""
    return json.loads(s)


__all__ = ["run_cli", "jload"]
