"""Dispatch of protocol URIs to action handlers."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from protocol.request_parser import ParsedRequest, parse_request
from protocol.request_validator import RequestValidator

logger = logging.getLogger("psh.handler")

ActionHandler = Callable[[ParsedRequest], Any]


class ProtocolHandler:
    """Parses a URI, validates it and runs the matching action."""

    def __init__(self, validator: RequestValidator, actions: Mapping[str, ActionHandler]) -> None:
        self.validator = validator
        self.actions = dict(actions)

    def handle(self, uri: str) -> Any:
        request = parse_request(uri)
        logger.debug("Parsed %r into %s", uri, request)
        self.validator.validate(request)
        return self.actions[request.action](request)
