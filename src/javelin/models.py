"""Constants, project identity and error types for Javelin."""

import os
from typing import Literal, Optional

import platformdirs

APP_NAME = "javelin"
DB_FILENAME = "javelin.db"
KEY_PREFIX = "project_"
KEY_FILLER = "_"

DEFAULT_EDITOR = "zed"
DEFAULT_FILE_VAR = "ZED_FILE"

ENV_DB = "JAVELIN_DB"
ENV_EDITOR = "JAVELIN_EDITOR"
ENV_FILE_VAR = "JAVELIN_FILE_VAR"

# Entries past this position have no numeric shortcut.
MAX_SHORTCUT = 9

Direction = Literal["up", "down"]


class JavelinError(Exception):
    """Base class for fatal Javelin errors."""


class EnvironmentLookupError(JavelinError):
    """The working directory or user data directory cannot be determined."""


class DataDirError(EnvironmentLookupError):
    pass


class StoreCorruptError(JavelinError):
    """An existing store file could not be parsed."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot read store {path}: {reason}")
        self.path = path


class StoreWriteError(JavelinError):
    """Writing the store to disk failed."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot write store {path}: {reason}")
        self.path = path


def data_dir() -> str:
    """Return ~/.local/share/javelin (or the per-OS equivalent)."""
    path = platformdirs.user_data_dir(APP_NAME, appauthor=False)
    if not path:
        raise DataDirError("Failed to determine data directory")
    return path


def default_store_path() -> str:
    """Store path from $JAVELIN_DB, falling back to the user data directory."""
    override = os.environ.get(ENV_DB)
    if override:
        return os.path.abspath(os.path.expanduser(override))
    return os.path.join(data_dir(), DB_FILENAME)


def default_editor() -> str:
    return os.environ.get(ENV_EDITOR) or DEFAULT_EDITOR


def default_file_var() -> str:
    return os.environ.get(ENV_FILE_VAR) or DEFAULT_FILE_VAR


def current_dir() -> str:
    """Absolute working directory, or EnvironmentLookupError if it is gone."""
    try:
        return os.getcwd()
    except OSError as e:
        raise EnvironmentLookupError("Failed to determine current directory") from e


def project_key(cwd: str) -> str:
    """Project key for a directory: separators replaced by '_', prefixed.

    Distinct paths that differ only in '/' vs '_' map to the same key.
    """
    key = cwd.replace("/", KEY_FILLER)
    if os.sep != "/":
        key = key.replace(os.sep, KEY_FILLER)
    return f"{KEY_PREFIX}{key}"


def resolve_project_key(cwd: Optional[str] = None) -> str:
    """Project key for `cwd`, defaulting to the process working directory."""
    return project_key(cwd if cwd is not None else current_dir())
