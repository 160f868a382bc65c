"""
Manifest cache validated by modification stamps.

An entry is served only while its stored stamp equals the current stamp
of the source. On mismatch the entry is dropped before the manifest is
re-read, so a failed re-read never leaves stale data behind.

Stamps come from an injected source. The default source prefers unsaved
editor documents (DocumentBuffers) over the file on disk.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Hashable, Optional

from .loader import load_manifest_info

logger = logging.getLogger(__name__)

Stamp = Hashable
StampSource = Callable[[Path], Optional[Stamp]]
TextSource = Callable[[Path], str]
ManifestInfo = Dict[str, Any]


def file_stamp(path: Path) -> Optional[Stamp]:
    """On-disk stamp (mtime_ns, size); None when the file does not exist."""
    try:
        st = path.stat()
    except OSError:
        return None
    return ("fs", int(st.st_mtime_ns), int(st.st_size))


def read_file_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


@dataclass(frozen=True)
class _Document:
    text: str
    stamp: int


class DocumentBuffers:
    """
    In-memory documents that shadow files on disk (unsaved editor state).

    Every update of a document bumps its modification stamp.
    """

    def __init__(self) -> None:
        self._docs: Dict[Path, _Document] = {}
        self._counter = 0
        self._lock = threading.Lock()

    @staticmethod
    def _key(path: Path) -> Path:
        return path.resolve()

    def update(self, path: Path, text: str) -> int:
        with self._lock:
            self._counter += 1
            self._docs[self._key(path)] = _Document(text=text, stamp=self._counter)
            return self._counter

    def close(self, path: Path) -> None:
        with self._lock:
            self._docs.pop(self._key(path), None)

    def get(self, path: Path) -> Optional[str]:
        doc = self._docs.get(self._key(path))
        return None if doc is None else doc.text

    def stamp(self, path: Path) -> Optional[Stamp]:
        doc = self._docs.get(self._key(path))
        if doc is not None:
            return ("doc", doc.stamp)
        return file_stamp(path)

    def read_text(self, path: Path) -> str:
        doc = self._docs.get(self._key(path))
        if doc is not None:
            return doc.text
        return read_file_text(path)


@dataclass(frozen=True)
class _Entry:
    stamp: Stamp
    info: ManifestInfo


class ManifestCache:
    """
    Parsed manifests keyed by path.

    Usage:
        cache = ManifestCache()
        info = cache.get(Path("pubspec.yaml"))  # None when missing or malformed
    """

    def __init__(
        self,
        *,
        stamp_source: Optional[StampSource] = None,
        text_source: Optional[TextSource] = None,
        loader: Callable[[str], Optional[ManifestInfo]] = load_manifest_info,
        buffers: Optional[DocumentBuffers] = None,
    ):
        self.buffers = buffers or DocumentBuffers()
        self._stamp = stamp_source or self.buffers.stamp
        self._read = text_source or self.buffers.read_text
        self._load = loader
        self._entries: Dict[Path, _Entry] = {}
        self._lock = threading.Lock()

    @staticmethod
    def _key(path: Path) -> Path:
        return path.resolve()

    def get(self, path: Path) -> Optional[ManifestInfo]:
        """
        Parsed manifest at path, or None when it cannot be read or parsed.
        """
        key = self._key(path)
        with self._lock:
            current = self._stamp(path)
            entry = self._entries.get(key)
            if entry is not None and current is not None and entry.stamp == current:
                logger.debug("manifest cache hit: %s", key)
                return entry.info

            # stale or absent: discard before recomputing
            self._entries.pop(key, None)
            if current is None:
                return None
            try:
                text = self._read(path)
            except (OSError, UnicodeDecodeError) as e:
                logger.debug("manifest unreadable: %s: %s", key, e)
                return None

            info = self._load(text)
            if info is not None:
                self._entries[key] = _Entry(stamp=current, info=info)
            logger.debug("manifest cache miss: %s (parsed=%s)", key, info is not None)
            return info

    def invalidate(self, path: Path) -> None:
        with self._lock:
            self._entries.pop(self._key(path), None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, path: object) -> bool:
        return isinstance(path, Path) and self._key(path) in self._entries

    def __len__(self) -> int:
        return len(self._entries)


__all__ = [
    "Stamp",
    "StampSource",
    "TextSource",
    "ManifestInfo",
    "file_stamp",
    "read_file_text",
    "DocumentBuffers",
    "ManifestCache",
]
