"""File I/O for the per-project file lists.

The store is one JSON object mapping project keys to ordered lists of
path strings. Every `put` rewrites the whole file before returning.
"""

import json
import logging
import os
from typing import Dict, List, Optional

from .models import StoreCorruptError, StoreWriteError

logger = logging.getLogger(__name__)


def read_store(path: str) -> Dict[str, List[str]]:
    """Parse a store file, raising StoreCorruptError on anything unexpected."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except ValueError as e:
        raise StoreCorruptError(path, f"invalid JSON ({e})") from e
    except OSError as e:
        raise StoreCorruptError(path, str(e)) from e

    if not isinstance(data, dict):
        raise StoreCorruptError(path, "expected a JSON object at top level")
    for key, files in data.items():
        if not isinstance(files, list) or not all(isinstance(f, str) for f in files):
            raise StoreCorruptError(path, f"entry {key!r} is not a list of paths")
    return data


def write_store(path: str, data: Dict[str, List[str]]) -> None:
    """Rewrite the store file from in-memory state via a temp file + rename."""
    tmp = path + ".tmp"
    try:
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
            f.write("\n")
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except OSError as e:
        try:
            os.remove(tmp)
        except OSError:
            pass
        raise StoreWriteError(path, e.strerror or str(e)) from e


class ListStore:
    """Project key -> ordered list of unique paths, persisted on every put."""

    def __init__(self, path: str, data: Dict[str, List[str]]):
        self.path = path
        self._data = data

    @classmethod
    def open(cls, path: str, create: bool = True) -> "ListStore":
        """Load `path`, creating an empty store file if it is missing."""
        if os.path.exists(path):
            logger.debug("Loading store %s", path)
            return cls(path, read_store(path))
        store = cls(path, {})
        if create:
            logger.debug("Creating empty store %s", path)
            write_store(path, {})
        return store

    def exists(self, key: str) -> bool:
        return key in self._data

    def get(self, key: str) -> Optional[List[str]]:
        files = self._data.get(key)
        return list(files) if files is not None else None

    def put(self, key: str, files: List[str]) -> None:
        self._data[key] = list(files)
        write_store(self.path, self._data)
        logger.debug("Saved %d file(s) for %s", len(files), key)

    def keys(self) -> List[str]:
        return list(self._data)

    def delete_all(self) -> bool:
        """Remove the store file; True if there was one to remove."""
        self._data = {}
        return delete_store(self.path)


def delete_store(path: str) -> bool:
    """Delete the store file at `path`. Returns False if it does not exist."""
    if not os.path.exists(path):
        return False
    os.remove(path)
    logger.info("Deleted store %s", path)
    return True
