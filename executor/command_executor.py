"""Command execution wrapper."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from pathlib import Path


def run_command(command: Sequence[str], cwd: Path | None = None) -> tuple[int, str, str]:
    """Run command and return (exit_code, stdout, stderr).

    A command that cannot be started is reported as exit code 127. Output
    that is not valid UTF-8 is decoded with replacement characters.
    """
    try:
        proc = subprocess.run(
            list(command), cwd=cwd, capture_output=True, encoding="utf-8", errors="replace"
        )
    except OSError as exc:
        return 127, "", str(exc)
    return proc.returncode, proc.stdout, proc.stderr
