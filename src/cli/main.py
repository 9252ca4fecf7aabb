"""Capsule command line (Typer).

`capsule create [NAME]` creates an application on the Capsule server and, when
run inside a git working copy, adds a `capsule` remote pointing at the new
application's repository.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO

import typer
from pydantic import ValidationError

from adapters.http_client import build_capsule_api
from core import __version__
from core.config import DEFAULT_REMOTE_NAME, AppSettings
from core.errors import CliError
from core.interfaces.capsule_api import CapsuleApi
from core.logging_setup import configure_logging
from core.services.create_application import handle

app = typer.Typer(
    name="capsule",
    help="CLI to interact with Capsule",
    no_args_is_help=True,
    add_completion=False,
)


@dataclass(frozen=True)
class CreateCommand:
    """Parsed `create` subcommand."""

    name: str | None = None


def execute_command(
    command: CreateCommand,
    api: CapsuleApi,
    writer: TextIO,
    *,
    directory: str | Path = ".",
    remote_name: str = DEFAULT_REMOTE_NAME,
) -> None:
    """Run `command` and write its report to `writer`.

    Errors are reported inline after the progress prefix; nothing is raised.
    """

    writer.write("Creating application... ")
    try:
        response = handle(directory, command.name, api, remote_name=remote_name)
    except CliError as exc:
        writer.write(f"{exc.message}\n")
        return

    writer.write(f"done, {response.name}\n")
    writer.write(f"url: {response.url}\n")
    writer.write(f"git: {response.git_repo}\n")


def _load_settings() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"capsule {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase log verbosity (-v INFO, -vv DEBUG).",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    ctx.obj = {"verbose": verbose}


@app.command()
def create(
    ctx: typer.Context,
    name: Optional[str] = typer.Argument(None, help="application name"),
) -> None:
    """create application"""

    settings = _load_settings()
    configure_logging((ctx.obj or {}).get("verbose", 0), base_level=settings.log_level)
    api = build_capsule_api(settings)
    execute_command(
        CreateCommand(name=name),
        api,
        sys.stdout,
        directory=Path.cwd(),
        remote_name=settings.remote_name,
    )


def run() -> None:
    app(prog_name="capsule")


if __name__ == "__main__":
    run()
