"""Best-effort window activation."""

from __future__ import annotations

import logging

from os_controller.base_controller import BaseController
from os_controller.window_manager import Window

logger = logging.getLogger("psh.window_activator")


class WindowActivator:
    """Raises a window through the backend; never fails the caller."""

    def __init__(self, controller: BaseController) -> None:
        self.controller = controller

    def activate(self, window: Window) -> None:
        if self.controller.activate_window(window.id):
            logger.info("Activated window %s (%s)", window.id, window.title)
