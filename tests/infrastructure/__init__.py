"""
Shared test infrastructure for xinject.

Modules:
- file_utils: creating files and directories
- cli_utils: running the CLI in a subprocess
"""

from .file_utils import write, write_text_file, write_settings
from .cli_utils import run_cli, jload

__all__ = [
    "write",
    "write_text_file",
    "write_settings",
    "run_cli",
    "jload",
]
