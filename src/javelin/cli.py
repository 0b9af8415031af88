"""Javelin command-line interface."""

import argparse
import logging
import os
import sys
from typing import List, Optional

from . import __version__
from .core import ListController
from .editor import env_current_file, launch
from .models import (
    MAX_SHORTCUT,
    JavelinError,
    current_dir,
    default_editor,
    default_file_var,
    default_store_path,
    resolve_project_key,
)
from .session import Session
from .storage import ListStore, delete_store

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
LOG_FILENAME = "javelin.log"


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Configure the root logger: WARNING (DEBUG with -v) to stderr or a file."""
    level = logging.DEBUG if verbose else logging.WARNING
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if log_file:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)


def report_error(exc: BaseException) -> None:
    """Print an error and its cause chain to stderr."""
    print(f"javelin: error: {exc}", file=sys.stderr)
    cause = exc.__cause__
    while cause is not None:
        print(f"  caused by: {cause}", file=sys.stderr)
        cause = cause.__cause__


def store_path(args: argparse.Namespace) -> str:
    return args.db if args.db else default_store_path()


def log_file_for(args: argparse.Namespace) -> Optional[str]:
    """Log file to use; interactive debug logging goes next to the store.

    curses owns the terminal during the session, so records must not hit stderr.
    """
    if args.log_file or args.cmd is not None or not args.verbose:
        return args.log_file
    return os.path.join(os.path.dirname(os.path.abspath(store_path(args))), LOG_FILENAME)


def open_in_editor(path: str, editor: str) -> int:
    try:
        launch(path, editor)
    except OSError as e:
        logger.debug("Launch of %s failed", editor, exc_info=True)
        print(f"Could not launch {editor}: {e}", file=sys.stderr)
        return 1
    return 0


def cmd_clean(args: argparse.Namespace) -> int:
    """Delete the whole store file."""
    if delete_store(store_path(args)):
        print("Database deleted successfully")
    else:
        print("Database does not exist")
    return 0


def read_project_files(args: argparse.Namespace) -> Optional[List[str]]:
    """Read-only lookup of this project's list; prints why when there is none."""
    path = store_path(args)
    key = resolve_project_key()
    if not os.path.exists(path):
        print("No files saved yet", file=sys.stderr)
        return None
    files = ListStore.open(path, create=False).get(key)
    if files is None:
        print("No files saved for this project", file=sys.stderr)
        return None
    return files


def cmd_open(args: argparse.Namespace) -> int:
    """Open the file at args.index (0-based) without touching the store."""
    files = read_project_files(args)
    if files is None:
        return 0
    index = args.index
    if index >= len(files):
        print(
            f"File {index + 1} not found (only {len(files)} files saved)",
            file=sys.stderr,
        )
        return 0
    return open_in_editor(files[index], args.editor)


def cmd_list(args: argparse.Namespace) -> int:
    files = read_project_files(args)
    if files is None:
        return 0
    if not files:
        print("(no files saved for this project)")
        return 0
    for i, f in enumerate(files, start=1):
        print(f"{i:>3}. {f}")
    return 0


def cmd_path(args: argparse.Namespace) -> int:
    print(os.path.abspath(store_path(args)))
    return 0


def cmd_interactive(args: argparse.Namespace) -> int:
    """Run the curses session, then launch whatever entry it picked."""
    from .tui import main as tui_main

    cwd = current_dir()
    key = resolve_project_key(cwd)
    store = ListStore.open(store_path(args))
    controller = ListController(store, key)
    session = Session(controller, env_current_file(args.file_var))

    target = tui_main(session, cwd, args.file_var)
    if target is None:
        return 0
    return open_in_editor(target, args.editor)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    p = argparse.ArgumentParser(
        prog="javelin", description="Per-project quick file list for your editor."
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument(
        "--db",
        default=None,
        help="Path to the store file (default: $JAVELIN_DB or the user data directory)",
    )
    p.add_argument(
        "--editor",
        default=default_editor(),
        help="Editor command used to open files (default: $JAVELIN_EDITOR or zed)",
    )
    p.add_argument(
        "--file-var",
        default=default_file_var(),
        help="Environment variable holding the editor's current file (default: ZED_FILE)",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    p.add_argument("--log-file", default=None, help="Write log records to this file")
    sub = p.add_subparsers(dest="cmd")

    s_clean = sub.add_parser("clean", help="Delete the entire database")
    s_clean.set_defaults(func=cmd_clean)

    for n in range(1, MAX_SHORTCUT + 1):
        s_open = sub.add_parser(str(n), help=f"Open file {n} from the list")
        s_open.set_defaults(func=cmd_open, index=n - 1)

    s_list = sub.add_parser("list", help="Show this project's saved files")
    s_list.set_defaults(func=cmd_list)

    s_path = sub.add_parser("path", help="Show the absolute path to the database")
    s_path.set_defaults(func=cmd_path)

    return p


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Launches the TUI if no subcommand given."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(args.verbose, log_file_for(args))
        if args.cmd is None:
            return cmd_interactive(args)
        return args.func(args)
    except (JavelinError, OSError) as e:
        report_error(e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
