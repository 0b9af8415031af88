"""List model for one project: ordered unique paths plus a selection cursor."""

import os
from typing import List, Optional

from .models import MAX_SHORTCUT, Direction
from .storage import ListStore


class ListController:
    """In-memory file list for one project key, kept in sync with a ListStore.

    The cursor is None iff the list is empty, otherwise 0 <= cursor < len.
    Mutations write through to the store before returning; if the write
    fails the StoreWriteError propagates and the in-memory change stays.
    """

    def __init__(self, store: ListStore, key: str):
        self.store = store
        self.key = key
        self.files: List[str] = store.get(key) or []
        self.cursor: Optional[int] = 0 if self.files else None

    def __len__(self) -> int:
        return len(self.files)

    def save(self) -> None:
        self.store.put(self.key, self.files)

    def contains(self, path: str) -> bool:
        return path in self.files

    def selected_entry(self) -> Optional[str]:
        if self.cursor is None:
            return None
        return self.files[self.cursor]

    def resolve_entry(self, index: int) -> Optional[str]:
        """Entry at 0-based `index`, or None when out of range."""
        if 0 <= index < len(self.files):
            return self.files[index]
        return None

    def add_current(self, path: str) -> bool:
        """Append `path` unless already listed. Returns True if it was added."""
        if path in self.files:
            return False
        self.files.append(path)
        if len(self.files) == 1:
            self.cursor = 0
        self.save()
        return True

    def delete_selected(self) -> Optional[str]:
        """Remove the selected entry in place and return it."""
        if self.cursor is None or self.cursor >= len(self.files):
            return None
        removed = self.files.pop(self.cursor)
        if not self.files:
            self.cursor = None
        elif self.cursor >= len(self.files):
            self.cursor = len(self.files) - 1
        self.save()
        return removed

    def move_selected(self, direction: Direction) -> bool:
        """Swap the selected entry with its neighbour; the cursor follows it."""
        if self.cursor is None:
            return False
        i = self.cursor
        j = i - 1 if direction == "up" else i + 1
        if j < 0 or j >= len(self.files):
            return False
        self.files[i], self.files[j] = self.files[j], self.files[i]
        self.cursor = j
        self.save()
        return True

    def select_next(self) -> None:
        if not self.files:
            return
        if self.cursor is None or self.cursor >= len(self.files) - 1:
            self.cursor = 0
        else:
            self.cursor += 1

    def select_previous(self) -> None:
        if not self.files:
            return
        if self.cursor is None:
            self.cursor = 0
        elif self.cursor == 0:
            self.cursor = len(self.files) - 1
        else:
            self.cursor -= 1

    def select_index(self, index: int) -> bool:
        if 0 <= index < len(self.files):
            self.cursor = index
            return True
        return False


def display_path(path: str, cwd: Optional[str]) -> str:
    """Show `path` relative to `cwd` when it lives underneath it."""
    if not cwd:
        return path
    prefix = cwd.rstrip(os.sep) + os.sep
    if path.startswith(prefix) and len(path) > len(prefix):
        return path[len(prefix):]
    return path


def index_label(index: int) -> str:
    """1-based shortcut label for the first nine rows, blank after."""
    if index < MAX_SHORTCUT:
        return f"{index + 1} "
    return "  "


def project_name(cwd: Optional[str]) -> str:
    name = os.path.basename(cwd.rstrip(os.sep)) if cwd else ""
    return name or "Unknown"


def current_file_hint(
    files: List[str], current: Optional[str], cwd: Optional[str], file_var: str
) -> str:
    """Info line describing what 'a' would do."""
    if current is None:
        return f"No {file_var} environment variable set"
    shown = display_path(current, cwd)
    if current in files:
        return f"Current file: {shown} (already in list)"
    return f"Press 'a' to add: {shown}"
