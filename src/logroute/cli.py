"""logroute CLI -- typer-based command interface.

Commands:
    logroute options                 Show resolved routing options
    logroute send MESSAGE            Route one message through console + external sinks
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import typer
import yaml

from logroute import output
from logroute.options import LoggingOptions
from logroute.records import Severity
from logroute.router import LogRouter

app = typer.Typer(
    name="logroute",
    help="Inspect routing options and push test messages through the dispatch chain.",
    no_args_is_help=True,
)


def handle_error(msg: str) -> None:
    """Print an error message and exit."""
    typer.echo(f"Error: {msg}", err=True)
    raise typer.Exit(1)


@app.command("options")
def show_options(
    config: Path = typer.Option(None, "--config", "-c", help="YAML options file."),
) -> None:
    """Print the options resolved from the YAML file and LOGROUTE_* env vars."""
    opts = LoggingOptions.load(config)
    typer.echo(yaml.safe_dump(opts.to_dict(), sort_keys=False).rstrip())


@app.command("send")
def send(
    message: str = typer.Argument(..., help="Message text."),
    name: str = typer.Option("logroute.cli", "--name", "-n", help="Logger name."),
    severity: str = typer.Option("info", "--severity", "-s", help="Level name or number."),
    config: Path = typer.Option(None, "--config", "-c", help="YAML options file."),
) -> None:
    """Configure a router, log MESSAGE once, then shut it down.

    No transport is available from the command line, so the registry sink
    is always disabled here.
    """
    try:
        level = Severity.parse(severity)
    except ValueError as err:
        handle_error(str(err))

    opts = replace(LoggingOptions.load(config), registry_enabled=False)
    router = LogRouter()
    status = router.configure(opts)
    if not status.ok:
        router.shutdown()
        handle_error(f"configure failed: {status.value}")

    output.log(level, name, message)

    status = router.shutdown()
    if not status.ok:
        handle_error(f"shutdown failed: {status.value}")


def main() -> None:
    """Entry point for the logroute CLI."""
    app()
