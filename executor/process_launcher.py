"""Fire-and-forget process launching."""

from __future__ import annotations

import logging
import subprocess

from executor.command_builder import LaunchCommand
from protocol.errors import SpawnFailure

logger = logging.getLogger("psh.process_launcher")


def launch_detached(command: LaunchCommand) -> subprocess.Popen:
    """Start command in its own session and return without waiting.

    Only a failure to create the process is reported; whatever the child
    does afterwards is not observed.
    """
    try:
        proc = subprocess.Popen(
            list(command.argv),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
            close_fds=True,
        )
    except OSError as exc:
        raise SpawnFailure(f"process fork failed for command: {command.shell_line()}") from exc
    logger.info("Launched pid=%s: %s", proc.pid, command.shell_line())
    return proc

