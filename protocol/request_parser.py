"""Decode protocol URIs into structured requests."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from urllib.parse import parse_qsl, urlsplit


@dataclass(frozen=True)
class ParsedRequest:
    """Scheme, action (URI host) and flat query parameters."""

    scheme: str = ""
    action: str = ""
    parameters: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))


def parse_request(uri: str) -> ParsedRequest:
    """Parse a URI; missing or malformed components become empty strings."""
    try:
        parts = urlsplit(uri)
        host = parts.hostname or ""
    except ValueError:
        # Unbalanced IPv6 brackets and similar; validation rejects the result.
        return ParsedRequest()
    parameters: dict[str, str] = {}
    # Repeated keys: last one wins.
    for key, value in parse_qsl(parts.query, keep_blank_values=True):
        parameters[key] = value
    return ParsedRequest(
        scheme=parts.scheme,
        action=host,
        parameters=MappingProxyType(parameters),
    )
