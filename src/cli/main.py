"""CLI de blockstack-d2 (Typer + Rich).

Cada comando mapea 1:1 a una operación de `BlockstackClient`; la CLI solo
parsea argumentos, muestra el payload y traduce errores a exit codes.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.blockstack_client import BlockstackClient
from adapters.json_exporter import export_result_json
from cli import doctor
from cli.ui_components import build_error_panel, build_result_panel, print_banner
from core.config import AppSettings
from core.domain.results import RegistryResult

app = typer.Typer(no_args_is_help=True, help="Client for the Blockstack/Onename registry API.")
app.add_typer(doctor.app, name="doctor")

_console = Console()

Operation = Callable[[BlockstackClient], Awaitable[RegistryResult]]


@dataclass
class CliOptions:
    output: Path | None = None
    banner: bool = True


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def build_client(settings: AppSettings) -> BlockstackClient:
    return BlockstackClient.from_settings(settings)


async def _run_operation(operation: Operation) -> RegistryResult:
    async with build_client(AppSettings()) as client:
        return await operation(client)


def _execute(ctx: typer.Context, operation: Operation) -> None:
    options: CliOptions = ctx.obj or CliOptions()
    if options.banner:
        print_banner(_console)

    result = asyncio.run(_run_operation(operation))
    if not result.ok:
        _console.print(build_error_panel(result))
        raise typer.Exit(code=1)

    _console.print(build_result_panel(result))
    if options.output is not None:
        path = export_result_json(result=result, output_path=options.output)
        _console.print(f"[green]Saved response to:[/green] {path}")


def _parse_profile(raw: str | None) -> dict[str, Any] | None:
    if raw is None:
        return None
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"profile must be valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise typer.BadParameter("profile must be a JSON object")
    return data


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging (requests, status codes)."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the response payload to a JSON file."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Do not print the banner."),
) -> None:
    _configure_logging(verbose)
    ctx.obj = CliOptions(output=output, banner=not no_banner)


@app.command()
def lookup(
    ctx: typer.Context,
    users: list[str] = typer.Argument(..., help="Username(s) to look up."),
) -> None:
    """Look up the profile data of one or more users."""

    _execute(ctx, lambda client: client.lookup(users))


@app.command()
def search(
    ctx: typer.Context,
    query: str = typer.Argument(..., help="Text or prefixed query (twitter:, github:, domain:)."),
) -> None:
    """Search usernames, full names and verified accounts."""

    _execute(ctx, lambda client: client.search(query))


@app.command()
def register(
    ctx: typer.Context,
    username: str = typer.Argument(...),
    recipient_address: str = typer.Argument(..., help="Bitcoin address of the new owner."),
    profile: Optional[str] = typer.Option(None, "--profile", help="Profile data as a JSON object."),
) -> None:
    """Register a username."""

    profile_data = _parse_profile(profile)
    _execute(ctx, lambda client: client.register_user(username, recipient_address, profile_data))


@app.command()
def update(
    ctx: typer.Context,
    username: str = typer.Argument(...),
    profile: str = typer.Option(..., "--profile", help="Profile data as a JSON object."),
    owner_pubkey: str = typer.Option(..., "--owner-pubkey", help="Public key of the current owner."),
) -> None:
    """Update the profile bound to a username."""

    profile_data = _parse_profile(profile) or {}
    _execute(ctx, lambda client: client.update_user(username, profile_data, owner_pubkey))


@app.command()
def transfer(
    ctx: typer.Context,
    username: str = typer.Argument(...),
    transfer_address: str = typer.Argument(..., help="Bitcoin address of the new owner."),
    owner_pubkey: str = typer.Option(..., "--owner-pubkey", help="Public key of the current owner."),
) -> None:
    """Transfer a username to another address."""

    _execute(ctx, lambda client: client.transfer_user(username, transfer_address, owner_pubkey))


@app.command(name="all-users")
def all_users(ctx: typer.Context) -> None:
    """Registration stats and the list of usernames in the namespace."""

    _execute(ctx, lambda client: client.all_users())


@app.command()
def broadcast(
    ctx: typer.Context,
    signed_hex: str = typer.Argument(..., help="Signed transaction in hex format."),
) -> None:
    """Broadcast a signed transaction."""

    _execute(ctx, lambda client: client.broadcast_transaction(signed_hex))


@app.command()
def unspents(ctx: typer.Context, address: str = typer.Argument(...)) -> None:
    """Unspent outputs of an address."""

    _execute(ctx, lambda client: client.unspent_outputs(address))


@app.command()
def names(ctx: typer.Context, address: str = typer.Argument(...)) -> None:
    """Names owned by an address."""

    _execute(ctx, lambda client: client.names_owned(address))


@app.command()
def dkim(ctx: typer.Context, domain: str = typer.Argument(...)) -> None:
    """DKIM public key of a domain."""

    _execute(ctx, lambda client: client.dkim_public_key(domain))


def run() -> None:
    app()
