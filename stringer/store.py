"""JSON persistence of composite actions and the directory-hash cache."""

from __future__ import annotations

import hashlib
import json
import os
import stat
from dataclasses import dataclass, field
from typing import Any

from stringer.types import CompositeAction


class StoreError(Exception):
    """Raised when actions cannot be saved or loaded."""


@dataclass
class CacheFile:
    """Cached actions together with the hash of the scanned directory."""

    hash: str = ""
    actions: list[CompositeAction] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation of the cache."""
        return {"hash": self.hash, "actions": [a.to_dict() for a in self.actions]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CacheFile:
        """Build a cache from its JSON representation."""
        if not isinstance(data, dict):
            raise TypeError("cache must be an object")
        digest = data.get("hash") or ""
        actions = data.get("actions") or []
        if not isinstance(digest, str) or not isinstance(actions, list):
            raise TypeError("cache has fields of the wrong type")
        return cls(hash=digest, actions=[CompositeAction.from_dict(a) for a in actions])


def _write_json(payload: Any, path) -> None:
    try:
        text = json.dumps(payload, indent="\t", ensure_ascii=False)
    except (TypeError, ValueError) as err:
        raise StoreError(f"failed to marshal actions: {err}") from err
    try:
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(text)
    except OSError as err:
        raise StoreError(f"failed to write JSON to file: {err}") from err


def _read_cache(path, read_label: str, parse_label: str) -> CacheFile:
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as err:
        raise StoreError(f"failed to read {read_label}: {err}") from err
    try:
        return CacheFile.from_dict(json.loads(text))
    except (ValueError, TypeError) as err:
        raise StoreError(f"failed to unmarshal {parse_label}: {err}") from err


def save_actions_with_hash(actions, root_dir, path) -> None:
    """Write ``actions`` to ``path`` with the current hash of ``root_dir``."""
    try:
        digest = hash_directory(root_dir)
    except OSError as err:
        raise StoreError(f"failed to hash directory: {err}") from err
    _write_json(CacheFile(hash=digest, actions=list(actions)).to_dict(), path)


def is_cache_valid(root_dir, cache_path) -> bool:
    """Tell whether the cache at ``cache_path`` matches ``root_dir`` as it is now."""
    cache = load_cache(cache_path)
    return hash_directory(root_dir) == cache.hash


def save_actions(actions, path) -> None:
    """Write ``actions`` to ``path`` as a tab-indented JSON array."""
    _write_json([a.to_dict() for a in actions], path)


def load_actions(path) -> CacheFile:
    """Read a cache-shaped JSON file."""
    return _read_cache(path, "file", "JSON")


def load_cache(path) -> CacheFile:
    """Read the internal action cache."""
    return _read_cache(path, "cache file", "cache file")


def _file_entries(path: str):
    info = os.lstat(path)
    if not stat.S_ISDIR(info.st_mode):
        yield f"{path}:{info.st_mtime_ns}"
        return
    for name in os.listdir(path):
        yield from _file_entries(os.path.join(path, name))


def hash_directory(root_dir) -> str:
    """Return a SHA-256 hex digest over the paths and modification times of all files."""
    digest = hashlib.sha256()
    for entry in sorted(_file_entries(os.fspath(root_dir))):
        digest.update(entry.encode("utf-8"))
    return digest.hexdigest()