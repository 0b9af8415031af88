"""Javelin curses-based terminal user interface."""

import curses
from typing import Optional

from .core import current_file_hint, display_path, index_label, project_name
from .session import KeyEvent, Session

ESC = 27
CTRL_C = 3


def decode_key(ch: int) -> KeyEvent:
    """Translate a curses getch() value into a KeyEvent."""
    if ch == ESC:
        return KeyEvent("esc")
    if ch == CTRL_C:
        return KeyEvent("c", ctrl=True)
    if ch in (10, 13, curses.KEY_ENTER):
        return KeyEvent("enter")
    if ch == curses.KEY_RESIZE:
        return KeyEvent("resize")
    if 32 <= ch < 127:
        c = chr(ch)
        return KeyEvent(c, shift=c.isupper())
    return KeyEvent("other")


class TUI:
    """Curses view over a Session: file list, info line, status line."""

    def __init__(self, stdscr, session: Session, cwd: Optional[str], file_var: str):
        self.stdscr = stdscr
        self.session = session
        self.cwd = cwd
        self.file_var = file_var
        self.scroll = 0
        curses.curs_set(0)
        # Raw mode so Ctrl-C arrives as a key instead of SIGINT.
        curses.raw()
        curses.set_escdelay(25)
        self.stdscr.keypad(True)
        self.height, self.width = self.stdscr.getmaxyx()

        self.has_colors = curses.has_colors()
        if self.has_colors:
            curses.start_color()
            try:
                curses.use_default_colors()
            except curses.error:
                pass
            curses.init_pair(1, curses.COLOR_YELLOW, -1)
            curses.init_pair(2, curses.COLOR_CYAN, -1)
            self.COL_LABEL = curses.color_pair(1)
            self.COL_INFO = curses.color_pair(2)
        else:
            self.COL_LABEL = curses.A_BOLD
            self.COL_INFO = curses.A_DIM

    def draw(self):
        """Render header, file list, current-file info and status line."""
        self.stdscr.erase()
        self.height, self.width = self.stdscr.getmaxyx()
        controller = self.session.controller

        header = f"Javelin - {project_name(self.cwd)} - Files (Shift+J/K to reorder)"
        self.stdscr.addnstr(0, 0, header, self.width - 1, curses.A_BOLD)

        top = 2
        body_h = self.height - top - 4
        if body_h < 1:
            self.stdscr.refresh()
            return

        cursor = controller.cursor
        if cursor is not None:
            if cursor < self.scroll:
                self.scroll = cursor
            elif cursor >= self.scroll + body_h:
                self.scroll = cursor - body_h + 1
        else:
            self.scroll = 0

        if not controller.files:
            self.stdscr.addnstr(top, 0, "No files yet. Press 'a' to add the current file.",
                                self.width - 1, curses.A_DIM)

        for i in range(self.scroll, min(self.scroll + body_h, len(controller.files))):
            y = top + (i - self.scroll)
            selected = i == cursor
            marker = ">> " if selected else "   "
            label = index_label(i)
            text = display_path(controller.files[i], self.cwd)
            avail = max(0, self.width - 1 - len(marker) - len(label))
            if len(text) > avail:
                text = "..." + text[-max(avail - 3, 0):] if avail > 3 else text[:avail]
            attrs = curses.A_REVERSE | curses.A_BOLD if selected else curses.A_NORMAL
            self.stdscr.addnstr(y, 0, marker, self.width - 1, attrs)
            self.stdscr.addnstr(y, len(marker), label, max(self.width - 1 - len(marker), 0),
                                self.COL_LABEL | attrs)
            self.stdscr.addnstr(y, len(marker) + len(label), text, avail, attrs)

        info = current_file_hint(
            controller.files, self.session.current_file(), self.cwd, self.file_var
        )
        self.stdscr.hline(self.height - 3, 0, curses.ACS_HLINE, self.width)
        self.stdscr.addnstr(self.height - 2, 0, info, self.width - 1, self.COL_INFO)
        self.stdscr.addnstr(self.height - 1, 0, self.session.message, self.width - 1, curses.A_DIM)

        self.stdscr.refresh()

    def run(self):
        """Main event loop."""
        while self.session.running:
            self.draw()
            event = decode_key(self.stdscr.getch())
            self.session.handle(event)


def start_curses(session: Session, cwd: Optional[str], file_var: str):
    """Initialize curses and run the TUI until the session terminates."""

    def _main(stdscr):
        tui = TUI(stdscr, session, cwd, file_var)
        tui.run()

    curses.wrapper(_main)


def main(session: Session, cwd: Optional[str], file_var: str) -> Optional[str]:
    """TUI entry point. Returns the entry chosen for launching, if any."""
    start_curses(session, cwd, file_var)
    return session.launch_target

