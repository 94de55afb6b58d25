"""Typer command handlers."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path

import typer

from core.orchestrator import Orchestrator, RuntimeBundle
from protocol.errors import HandlerError

logger = logging.getLogger("psh.cli")


def _runtime(config_path: Path | None = None) -> RuntimeBundle:
    return Orchestrator(user_config=config_path).build()


def handle(uri: str, config_path: Path | None = None) -> None:
    """Run the protocol handler; failures map to distinct exit codes."""
    try:
        bundle = _runtime(config_path)
        bundle.handler.handle(uri)
    except HandlerError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=exc.exit_code) from exc
    except Exception as exc:
        logger.exception("Unexpected failure handling %s", uri)
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


def config_show(config_path: Path | None = None) -> None:
    """Show effective runtime config."""
    bundle = _runtime(config_path)
    typer.echo(json.dumps(bundle.config.model_dump(), indent=2))


def windows_list(config_path: Path | None = None) -> None:
    """Print the current window snapshot."""
    bundle = _runtime(config_path)
    snapshot = bundle.registry.snapshot()
    typer.echo(json.dumps([asdict(window) for window in snapshot.values()], indent=2))
