"""Launch sequences for opening a file in the editor."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from pathlib import Path

from executor.command_builder import DEFAULT_EDITOR, LaunchCommand, build_open_command
from protocol.open_args import OpenArgs


class OpenStrategy(ABC):
    """Ordered launches with settle waits in between."""

    name = "base"

    @abstractmethod
    def run(
        self,
        args: OpenArgs,
        launch: Callable[[LaunchCommand], object],
        settle: Callable[[], None],
        editor: Sequence[str] = DEFAULT_EDITOR,
    ) -> list[LaunchCommand]:
        """Issue the launches and return them in order."""


class DirectOpen(OpenStrategy):
    """Open the file once and give the editor time to show it."""

    name = "direct-open"

    def run(
        self,
        args: OpenArgs,
        launch: Callable[[LaunchCommand], object],
        settle: Callable[[], None],
        editor: Sequence[str] = DEFAULT_EDITOR,
    ) -> list[LaunchCommand]:
        command = build_open_command(args, editor)
        launch(command)
        settle()
        return [command]


class WarmRootThenOpen(OpenStrategy):
    """Open the project root first, then the file inside it.

    The editor reuses the root's window for the second launch, so no wait
    follows it.
    """

    name = "warm-root-then-open"

    def __init__(self, root: str | Path) -> None:
        self.root = str(root)

    def run(
        self,
        args: OpenArgs,
        launch: Callable[[LaunchCommand], object],
        settle: Callable[[], None],
        editor: Sequence[str] = DEFAULT_EDITOR,
    ) -> list[LaunchCommand]:
        root_command = build_open_command(OpenArgs(file=self.root), editor)
        launch(root_command)
        settle()
        file_command = build_open_command(args, editor)
        launch(file_command)
        return [root_command, file_command]
