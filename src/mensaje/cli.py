"""
Mensaje CLI

Command-line interface for the mensaje action service.

Commands:
  serve      - Run the HTTP endpoint
  metadata   - Print validated action metadata
  timestamp  - Show the timestamp a message would be stored with
  encode     - Print the unsigned storeMessage transaction for a message
"""

from __future__ import annotations

import json
import sys
from dataclasses import replace
from typing import Optional

import click

from . import __version__
from .action import base_url_from_headers, build_descriptor, build_execution_response
from .config import configure_logging, get_settings
from .errors import MensajeError
from .spec.schemas import SchemaValidationError
from .spec.models import create_metadata
from .timestamp import compute_offset, compute_timestamp, unix_now


def _echo_json(payload: dict) -> None:
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


# ============ Main CLI Group ============


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="mensaje")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Mensaje — store a message on-chain with a derived timestamp."""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# ============ Server ============


@cli.command()
@click.option("--host", default=None, help="Bind address (default: MENSAJE_HOST or 0.0.0.0)")
@click.option("--port", default=None, type=int, help="Port (default: MENSAJE_PORT or 3000)")
@click.option("--reload", is_flag=True, help="Reload on code changes")
def serve(host: Optional[str], port: Optional[int], reload: bool) -> None:
    """Run the action endpoint with uvicorn."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)

    uvicorn.run(
        "mensaje.api.server:app",
        host=host or settings.bind_host,
        port=port or settings.port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


# ============ Offline builders ============


@cli.command()
@click.option("--base-url", default=None, help="Base URL clients reach the service at")
@click.option("--chain", "chain_key", default=None, help="Source chain key (default: MENSAJE_CHAIN)")
def metadata(base_url: Optional[str], chain_key: Optional[str]) -> None:
    """Print validated action metadata as JSON."""
    settings = get_settings()
    base_url = base_url or base_url_from_headers(None, None, settings.default_host)

    try:
        validated = create_metadata(
            build_descriptor(base_url, chain_key=chain_key or settings.chain_key)
        )
    except SchemaValidationError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        for error in exc.errors:
            click.echo(f"  - {error}")
        sys.exit(1)

    _echo_json(validated)


@cli.command()
@click.argument("message")
@click.option("--now", default=None, type=int, help="Base Unix time (default: current time)")
def timestamp(message: str, now: Optional[int]) -> None:
    """Show the offset and timestamp MESSAGE would be stored with."""
    base = unix_now() if now is None else now
    click.echo(f"  Base:      {base}")
    click.echo(f"  Offset:    {compute_offset(message)}")
    click.echo(f"  Timestamp: {compute_timestamp(message, now=base)}")


@cli.command()
@click.argument("message")
@click.option("--contract", default=None, help="Target contract address (default: MENSAJE_CONTRACT_ADDRESS)")
@click.option("--chain", "chain_key", default=None, help="Chain key (default: MENSAJE_CHAIN)")
@click.option("--now", default=None, type=int, help="Base Unix time (default: current time)")
def encode(
    message: str,
    contract: Optional[str],
    chain_key: Optional[str],
    now: Optional[int],
) -> None:
    """Print the execution response for MESSAGE."""
    settings = get_settings()
    if contract:
        settings = replace(settings, contract_address=contract)
    if chain_key:
        settings = replace(settings, chain_key=chain_key)

    try:
        response = build_execution_response(message, settings, now=now)
    except (MensajeError, ValueError) as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)

    _echo_json(response.to_dict())


if __name__ == "__main__":
    cli()
