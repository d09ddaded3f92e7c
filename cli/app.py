from __future__ import annotations

import logging
from typing import NoReturn, Optional

import typer

from cli.render import render_payload, render_reading
from errors import RelayError
from logging_config import configure_logging
from services.relay import RelayService, build_relay
from settings import load_settings

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Relay a SwitchBot MeterPro CO2 reading to a line-protocol metrics endpoint.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _fail(exc: RelayError) -> NoReturn:
    logger.error("%s", exc, extra={"stage": exc.stage})
    raise typer.Exit(code=1)


def _open_relay(ctx: typer.Context) -> RelayService:
    try:
        settings = load_settings()
    except RelayError as exc:
        _fail(exc)
    relay = build_relay(settings)
    ctx.call_on_close(relay.close)
    return relay


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Log level name (defaults to LOG_LEVEL env or INFO).",
    ),
) -> None:
    """Entry point for the CLI."""
    try:
        configure_logging(log_level)
    except ValueError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command("collect")
def collect_command(
    ctx: typer.Context,
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Fetch and print the metrics without pushing them.",
    ),
) -> None:
    """Fetch the current reading, print the metrics and push them once."""
    relay = _open_relay(ctx)
    try:
        relay.run(dry_run=dry_run, on_payload=render_payload)
    except RelayError as exc:
        _fail(exc)
    if dry_run:
        return
    logger.info("Metrics sent successfully", extra={"device_id": relay.device_id})


@app.command("status")
def status_command(ctx: typer.Context) -> None:
    """Show the current reading without pushing anything."""
    relay = _open_relay(ctx)
    try:
        reading = relay.fetch()
    except RelayError as exc:
        _fail(exc)
    render_reading(reading, relay.device_id)
