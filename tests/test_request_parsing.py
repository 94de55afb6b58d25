"""Tests for URI parsing, validation and open argument resolution."""

from __future__ import annotations

import pytest

from protocol.errors import MissingParameter, ProtocolMismatch, UnsupportedAction
from protocol.open_args import OpenArgs, resolve_open_args
from protocol.request_parser import parse_request
from protocol.request_validator import RequestValidator


def test_parse_request_splits_scheme_action_and_query() -> None:
    request = parse_request("phpstorm://open?url=/a/b.txt&line=10")

    assert request.scheme == "phpstorm"
    assert request.action == "open"
    assert dict(request.parameters) == {"url": "/a/b.txt", "line": "10"}


def test_parse_request_defaults_missing_components() -> None:
    request = parse_request("not a uri")

    assert request.scheme == ""
    assert request.action == ""
    assert dict(request.parameters) == {}


def test_parse_request_last_repeated_key_wins() -> None:
    request = parse_request("phpstorm://open?file=/first&file=/second")
    assert request.parameters["file"] == "/second"


def test_parse_request_decodes_escapes() -> None:
    request = parse_request("phpstorm://open?file=%2Fhome%2Fme%2Fmy%20file.php")
    assert request.parameters["file"] == "/home/me/my file.php"


def test_parsed_request_parameters_are_read_only() -> None:
    request = parse_request("phpstorm://open?file=/a")
    with pytest.raises(TypeError):
        request.parameters["file"] = "/b"  # type: ignore[index]


def test_validator_rejects_other_protocol() -> None:
    validator = RequestValidator(protocol="phpstorm", actions=["open"])
    with pytest.raises(ProtocolMismatch) as excinfo:
        validator.validate(parse_request("vscode://open?file=/a"))
    assert excinfo.value.exit_code == 2
    assert "actual: vscode" in str(excinfo.value)


def test_validator_rejects_unknown_action() -> None:
    validator = RequestValidator(protocol="phpstorm", actions=["open"])
    with pytest.raises(UnsupportedAction) as excinfo:
        validator.validate(parse_request("phpstorm://diff?file=/a"))
    assert excinfo.value.exit_code == 3
    assert "expected is one of: open" in str(excinfo.value)


def test_validator_accepts_supported_request() -> None:
    validator = RequestValidator(protocol="phpstorm", actions=["open"])
    assert validator.validate(parse_request("phpstorm://open?file=/a")) is None


def test_resolve_splits_combined_line_and_column() -> None:
    request = parse_request("phpstorm://open?url=/a/b.txt&line=10:5")
    assert resolve_open_args(request.parameters) == OpenArgs(file="/a/b.txt", line="10", column="5")


def test_resolve_strips_leading_colon_from_line() -> None:
    request = parse_request("phpstorm://open?file=/a/b.txt&line=:20")
    assert resolve_open_args(request.parameters) == OpenArgs(file="/a/b.txt", line="20", column="")


def test_resolve_keeps_explicit_column() -> None:
    args = resolve_open_args({"file": "/a", "line": "3:4", "column": "9"})
    assert (args.line, args.column) == ("3:4", "9")


def test_resolve_prefers_url_over_file() -> None:
    assert resolve_open_args({"url": "/from-url", "file": "/from-file"}).file == "/from-url"
    assert resolve_open_args({"url": "", "file": "/from-file"}).file == "/from-file"


def test_resolve_requires_file() -> None:
    with pytest.raises(MissingParameter) as excinfo:
        resolve_open_args({"line": "1"})
    assert excinfo.value.exit_code == 4
    assert str(excinfo.value) == "required parameter is missing: file"
