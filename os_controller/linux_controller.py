"""Linux window-manager backend driven by wmctrl."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from executor.command_executor import run_command
from os_controller.base_controller import BaseController

DEFAULT_LIST_COMMAND = ("wmctrl", "-l")
DEFAULT_ACTIVATE_COMMAND = ("wmctrl", "-i", "-a")


class LinuxController(BaseController):
    """EWMH window access through the wmctrl command line tool."""

    def __init__(
        self,
        list_command: Sequence[str] = DEFAULT_LIST_COMMAND,
        activate_command: Sequence[str] = DEFAULT_ACTIVATE_COMMAND,
        runner: Callable[[Sequence[str]], tuple[int, str, str]] = run_command,
    ) -> None:
        self.list_command = tuple(list_command)
        self.activate_command = tuple(activate_command)
        self.runner = runner
        self.logger = logging.getLogger("psh.linux_controller")

    def list_windows(self) -> list[str] | None:
        code, stdout, stderr = self.runner(self.list_command)
        if code:
            self.logger.warning("Window listing failed (exit %s): %s", code, stderr.strip())
            return None
        return stdout.splitlines()

    def activate_window(self, window_id: str) -> bool:
        code, _, stderr = self.runner([*self.activate_command, window_id])
        if code:
            self.logger.warning("Activation of window %s failed (exit %s): %s", window_id, code, stderr.strip())
            return False
        return True
