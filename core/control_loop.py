"""Open workflow: resolve → snapshot → launch → wait → snapshot → match → activate.

The editor is started as a detached process that never reports when its
window is ready. Fixed settle waits stand in for that signal, so a window
that shows up late is simply not activated.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum

from core.open_strategies import DirectOpen, OpenStrategy, WarmRootThenOpen
from core.project_root import PROJECT_MARKER, find_marker_upward, is_project_root
from executor.command_builder import DEFAULT_EDITOR, LaunchCommand
from os_controller.window_activator import WindowActivator
from os_controller.window_manager import Window, WindowRegistry
from protocol.open_args import OpenArgs, resolve_open_args

logger = logging.getLogger("psh.orchestrator")


class OpenState(str, Enum):
    START = "start"
    ARGS_RESOLVED = "args_resolved"
    ROOT_CHECK = "root_check"
    LAUNCHING = "launching"
    WAITING = "waiting"
    MATCHING = "matching"
    ACTIVATED = "activated"
    DONE = "done"


@dataclass
class OpenOutcome:
    """What one open request did."""

    args: OpenArgs | None = None
    strategy: str = ""
    launched: list[LaunchCommand] = field(default_factory=list)
    window: Window | None = None
    states: list[OpenState] = field(default_factory=lambda: [OpenState.START])

    @property
    def state(self) -> OpenState:
        return self.states[-1]


class OpenOrchestrator:
    """Drives the editor to a file while reusing its existing window."""

    def __init__(
        self,
        registry: WindowRegistry,
        activator: WindowActivator,
        launch: Callable[[LaunchCommand], object],
        editor: Sequence[str] = DEFAULT_EDITOR,
        marker: str = PROJECT_MARKER,
        settle_interval: float = 2.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.registry = registry
        self.activator = activator
        self.launch = launch
        self.editor = tuple(editor)
        self.marker = marker
        self.settle_interval = settle_interval
        self.sleep = sleep

    def select_strategy(self, file: str) -> OpenStrategy:
        """Direct open unless the file sits below a marked project root."""
        if is_project_root(file, self.marker):
            return DirectOpen()
        root = find_marker_upward(self.marker, file)
        if root is None:
            return DirectOpen()
        return WarmRootThenOpen(root)

    def open(self, parameters: Mapping[str, str]) -> OpenOutcome:
        outcome = OpenOutcome()
        outcome.args = args = resolve_open_args(parameters)
        self._advance(outcome, OpenState.ARGS_RESOLVED)

        before = self.registry.snapshot()

        self._advance(outcome, OpenState.ROOT_CHECK)
        strategy = self.select_strategy(args.file)
        outcome.strategy = strategy.name
        logger.info("Opening %s with %s", args.file, strategy.name)

        outcome.launched = strategy.run(
            args,
            launch=lambda command: self._launch(outcome, command),
            settle=lambda: self._settle(outcome),
            editor=self.editor,
        )

        after = self.registry.snapshot()

        self._advance(outcome, OpenState.MATCHING)
        outcome.window = self.registry.select_window(args.file, before, after)
        if outcome.window is None:
            logger.info("No window matched %s; leaving focus to the editor", args.file)
            self._advance(outcome, OpenState.DONE)
            return outcome

        self.activator.activate(outcome.window)
        self._advance(outcome, OpenState.ACTIVATED)
        return outcome

    def _launch(self, outcome: OpenOutcome, command: LaunchCommand) -> None:
        if outcome.state is not OpenState.LAUNCHING:
            self._advance(outcome, OpenState.LAUNCHING)
        self.launch(command)

    def _settle(self, outcome: OpenOutcome) -> None:
        self._advance(outcome, OpenState.WAITING)
        self.sleep(self.settle_interval)

    @staticmethod
    def _advance(outcome: OpenOutcome, state: OpenState) -> None:
        logger.debug("%s -> %s", outcome.state.value, state.value)
        outcome.states.append(state)
