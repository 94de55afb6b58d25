"""Arguments of the ``open`` action."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from protocol.errors import MissingParameter


@dataclass(frozen=True)
class OpenArgs:
    """File to open plus optional free-form line and column."""

    file: str
    line: str = ""
    column: str = ""


def resolve_open_args(parameters: Mapping[str, str]) -> OpenArgs:
    """Build OpenArgs from query parameters.

    ``url`` wins over ``file``. A ``line`` such as ``10:5`` carries the
    column when ``column`` itself is not given.
    """
    file = parameters.get("url") or parameters.get("file") or ""
    line = str(parameters.get("line", "")).strip(":")
    column = str(parameters.get("column", ""))
    if column == "" and ":" in line:
        line, column = line.split(":", 1)

    if file == "":
        raise MissingParameter("file")
    return OpenArgs(file=str(file), line=line, column=column)
