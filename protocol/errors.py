"""Handler error kinds and their process exit codes."""

from __future__ import annotations


class HandlerError(Exception):
    """Base class for failures surfaced to the protocol dispatcher."""

    exit_code = 1


class ProtocolMismatch(HandlerError):
    """URI scheme is not the handled protocol."""

    exit_code = 2


class UnsupportedAction(HandlerError):
    """URI host names an action the handler does not know."""

    exit_code = 3


class MissingParameter(HandlerError):
    """A required query parameter is absent or empty."""

    exit_code = 4

    def __init__(self, name: str) -> None:
        super().__init__(f"required parameter is missing: {name}")
        self.name = name


class SpawnFailure(HandlerError, RuntimeError):
    """The editor process could not be started."""

    exit_code = 5


class InvalidBoundary(HandlerError, ValueError):
    """Boundary directory does not contain the search start directory."""
