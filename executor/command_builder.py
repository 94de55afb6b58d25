"""Editor command lines for the ``open`` action."""

from __future__ import annotations

import shlex
from collections.abc import Sequence
from dataclasses import dataclass

from protocol.open_args import OpenArgs

DEFAULT_EDITOR = ("/usr/bin/env", "phpstorm")


@dataclass(frozen=True)
class LaunchCommand:
    """Argument vector of a process to start with its output discarded."""

    argv: tuple[str, ...]

    def shell_line(self) -> str:
        """Quoted shell rendering, including the output redirections."""
        return f"{shlex.join(self.argv)} 1>/dev/null 2>/dev/null"


def build_open_command(args: OpenArgs, editor: Sequence[str] = DEFAULT_EDITOR) -> LaunchCommand:
    """Return ``<editor> [--line L [--column C]] <file>``."""
    argv = list(editor)
    if args.line != "":
        argv += ["--line", args.line]
        if args.column != "":
            argv += ["--column", args.column]
    argv.append(args.file)
    return LaunchCommand(argv=tuple(argv))
