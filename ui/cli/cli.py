"""CLI entrypoint for phpstorm-url-handler."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer

from ui.cli import commands

app = typer.Typer(help="Open phpstorm:// links in the editor, reusing its windows")
config_app = typer.Typer(help="Configuration commands")
windows_app = typer.Typer(help="Window diagnostics")


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
    config: Path | None = typer.Option(None, "--config", help="User configuration YAML file"),
) -> None:
    """Protocol handler for editor links."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    ctx.obj = {"config_path": config}


@app.command("handle")
def handle_cmd(
    ctx: typer.Context,
    uri: str = typer.Argument(..., help="Protocol URI, e.g. phpstorm://open?file=/a/b.php&line=3"),
) -> None:
    """Handle one protocol URI."""
    commands.handle(uri=uri, config_path=ctx.obj["config_path"])


@config_app.command("show")
def config_show_cmd(ctx: typer.Context) -> None:
    """Show effective configuration."""
    commands.config_show(config_path=ctx.obj["config_path"])


@windows_app.command("list")
def windows_list_cmd(ctx: typer.Context) -> None:
    """List the windows the handler can see."""
    commands.windows_list(config_path=ctx.obj["config_path"])


app.add_typer(config_app, name="config")
app.add_typer(windows_app, name="windows")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
