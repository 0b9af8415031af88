"""Interactive session state machine, independent of the terminal library."""

from dataclasses import dataclass
from typing import Optional

from .core import ListController
from .editor import CurrentFileProvider
from .models import MAX_SHORTCUT, StoreWriteError

HELP_STATUS = "j/k move | J/K reorder | a add | d delete | Enter/1-9 open | q quit"


@dataclass(frozen=True)
class KeyEvent:
    """A decoded key press.

    `code` is a single character, or one of "esc", "enter", "resize", "other".
    """

    code: str
    shift: bool = False
    ctrl: bool = False
    kind: str = "press"  # "press" | "release" | "repeat"


class Session:
    """Running/Terminated loop state for one interactive invocation.

    The session never launches the editor itself: it records the chosen
    entry in `launch_target` and terminates, leaving the launch to the
    caller once the terminal has been restored.
    """

    def __init__(self, controller: ListController, current_file: CurrentFileProvider):
        self.controller = controller
        self.current_file = current_file
        self.running = True
        self.launch_target: Optional[str] = None
        self.message = HELP_STATUS

    def quit(self) -> None:
        self.running = False

    def open_entry(self, index: int) -> None:
        path = self.controller.resolve_entry(index)
        if path is None:
            return
        self.controller.select_index(index)
        self.launch_target = path
        self.quit()

    def add_current(self) -> None:
        path = self.current_file()
        if path is None:
            return
        if self.controller.add_current(path):
            self.message = f"Added: {path}"

    def delete_selected(self) -> None:
        removed = self.controller.delete_selected()
        if removed is not None:
            self.message = f"Deleted: {removed}"

    def handle(self, event: KeyEvent) -> None:
        """Apply one input event.

        A failed store write is shown in `message`; the in-memory change stays
        and the session keeps running.
        """
        if not self.running or event.kind != "press":
            return
        try:
            self.dispatch(event)
        except StoreWriteError as e:
            self.message = str(e)

    def dispatch(self, event: KeyEvent) -> None:
        code = event.code
        c = self.controller

        if code in ("esc", "q") or (event.ctrl and code in ("c", "C")):
            self.quit()
        elif code == "j":
            c.select_next()
        elif code == "k":
            c.select_previous()
        elif code == "a":
            self.add_current()
        elif code == "d":
            self.delete_selected()
        elif event.shift and code == "J":
            c.move_selected("down")
        elif event.shift and code == "K":
            c.move_selected("up")
        elif code == "enter":
            if c.cursor is not None:
                self.open_entry(c.cursor)
        elif len(code) == 1 and code.isdigit():
            n = int(code)
            if 1 <= n <= min(len(c), MAX_SHORTCUT):
                self.open_entry(n - 1)
