"""
Project model: content roots, exclusions and modules.

A project is a directory tree with optional xinject-cfg/settings.yaml.
Content is every path under the root that is not excluded by the
settings `exclude` patterns or the root .gitignore (git wildmatch
semantics via pathspec). Modules are named subtrees carrying options
such as custom package roots; options live in memory only.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Optional

import pathspec

from .config.load import load_settings
from .config.model import Settings
from .config.paths import is_cfg_relpath

logger = logging.getLogger(__name__)

# Directories never treated as project content
_ALWAYS_EXCLUDED = [".git/", ".hg/", ".svn/", ".idea/"]


@dataclass
class Module:
    """
    A named subtree of the project with string options.
    """
    name: str
    root: Path
    options: Dict[str, str] = field(default_factory=dict)

    def get_option(self, key: str) -> Optional[str]:
        return self.options.get(key)

    def set_option(self, key: str, value: str) -> None:
        self.options[key] = value

    def clear_option(self, key: str) -> None:
        self.options.pop(key, None)


def _read_ignore_lines(path: Path) -> List[str]:
    """Non-empty, non-comment lines of an ignore file."""
    try:
        content = path.read_text(encoding="utf-8", errors="ignore")
    except OSError as e:
        logger.warning("Failed to read %s: %s", path, e)
        return []
    out: List[str] = []
    for line in content.splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            out.append(line)
    return out


class Project:
    """
    Project rooted at a directory.

    Usage:
        project = Project.load(repo_root)
        if project.is_in_content(path):
            module = project.find_module_for_file(path)
    """

    def __init__(self, root: Path, settings: Optional[Settings] = None):
        self.root = root.resolve()
        self.settings = settings if settings is not None else Settings()

        patterns = list(_ALWAYS_EXCLUDED) + list(self.settings.exclude)
        gitignore = self.root / ".gitignore"
        if gitignore.is_file():
            patterns.extend(_read_ignore_lines(gitignore))
        self._exclude = pathspec.PathSpec.from_lines("gitwildmatch", patterns)

        self.root_module = Module(name=self.root.name or "root", root=self.root)
        self.modules: List[Module] = [
            Module(name=m.name, root=(self.root / m.root).resolve(), options=dict(m.options))
            for m in self.settings.modules.values()
        ]
        self._framework: Optional[bool] = None

    @classmethod
    def load(cls, root: Path) -> Project:
        """Project at root with its xinject-cfg/settings.yaml applied."""
        return cls(root, load_settings(root))

    # --------------------------- content --------------------------- #

    def _rel(self, path: Path) -> Optional[str]:
        try:
            return path.resolve().relative_to(self.root).as_posix()
        except ValueError:
            return None

    def is_excluded(self, rel_path: str, *, is_dir: bool = False) -> bool:
        if not rel_path or rel_path == ".":
            return False
        if is_cfg_relpath(rel_path):
            return True
        if self._exclude.match_file(rel_path):
            return True
        return is_dir and self._exclude.match_file(rel_path + "/")

    def is_in_content(self, path: Path) -> bool:
        """
        True when path lies under the project root and neither it nor any
        of its parent directories is excluded.
        """
        rel = self._rel(path)
        if rel is None:
            return False
        if rel == ".":
            return True
        parts = rel.split("/")
        for i in range(1, len(parts)):
            if self.is_excluded("/".join(parts[:i]), is_dir=True):
                return False
        return not self.is_excluded(rel, is_dir=path.is_dir())

    def iter_content_files(self) -> Iterator[Path]:
        """Content files under the root; excluded directories are pruned."""
        for dirpath, dirnames, filenames in os.walk(self.root):
            base = Path(dirpath)
            rel_dir = self._rel(base) or "."
            prefix = "" if rel_dir == "." else rel_dir + "/"
            dirnames[:] = sorted(
                d for d in dirnames if not self.is_excluded(prefix + d, is_dir=True)
            )
            for name in sorted(filenames):
                if not self.is_excluded(prefix + name):
                    yield base / name

    # --------------------------- modules --------------------------- #

    def find_module_for_file(self, path: Path) -> Optional[Module]:
        """
        Deepest module whose root contains path; the root module for other
        paths under the project root; None outside the project.
        """
        resolved = path.resolve()
        if self._rel(resolved) is None:
            return None
        best: Optional[Module] = None
        for module in self.modules:
            if resolved == module.root or module.root in resolved.parents:
                if best is None or len(module.root.parts) > len(best.root.parts):
                    best = module
        return best or self.root_module

    # --------------------------- framework --------------------------- #

    @property
    def has_framework(self) -> bool:
        """Whether expression injection applies to this project (memoised)."""
        if self._framework is None:
            from .detect import detect_framework
            self._framework = detect_framework(self)
        return self._framework


__all__ = ["Module", "Project"]
