"""Scheme and action gate for parsed requests."""

from __future__ import annotations

from collections.abc import Iterable

from protocol.errors import ProtocolMismatch, UnsupportedAction
from protocol.request_parser import ParsedRequest


class RequestValidator:
    """Checks a request against the handled protocol and action names."""

    def __init__(self, protocol: str, actions: Iterable[str]) -> None:
        self.protocol = protocol
        self.actions = tuple(dict.fromkeys(actions))

    def validate(self, request: ParsedRequest) -> None:
        if request.scheme != self.protocol:
            raise ProtocolMismatch(
                f"not supported protocol; expected: {self.protocol}; actual: {request.scheme};"
            )
        if request.action not in self.actions:
            raise UnsupportedAction(
                "not supported action; expected is one of: "
                f"{', '.join(self.actions)}; actual: {request.action};"
            )
