"""Javelin - per-project quick file list for your editor."""

__version__ = "0.1.0"

from .models import (
    JavelinError,
    EnvironmentLookupError,
    DataDirError,
    StoreCorruptError,
    StoreWriteError,
    project_key,
    resolve_project_key,
)
from .storage import ListStore, delete_store
from .core import ListController

__all__ = [
    "JavelinError",
    "EnvironmentLookupError",
    "DataDirError",
    "StoreCorruptError",
    "StoreWriteError",
    "project_key",
    "resolve_project_key",
    "ListStore",
    "delete_store",
    "ListController",
]
