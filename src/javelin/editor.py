"""Editor integration: the current-file signal and the launcher."""

import logging
import os
import shlex
import subprocess
from typing import Callable, Mapping, Optional

logger = logging.getLogger(__name__)

CurrentFileProvider = Callable[[], Optional[str]]


def env_current_file(
    var: str, environ: Optional[Mapping[str, str]] = None
) -> CurrentFileProvider:
    """Provider reading the editor's current file from an environment variable."""
    env = os.environ if environ is None else environ

    def provider() -> Optional[str]:
        value = env.get(var)
        return value if value else None

    return provider


def launch(path: str, editor: str) -> int:
    """Run `editor path`, wait for it and return its exit status.

    OSError propagates when the editor cannot be started.
    """
    argv = shlex.split(editor) + [path]
    logger.debug("Launching %s", argv)
    return subprocess.run(argv).returncode
