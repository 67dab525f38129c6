"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from adapters.request_builder import authorization_value
from core.config import AppSettings, write_user_env_vars
from core.domain.errors import MissingCredentialsError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        return False, str(exc) or exc.__class__.__name__


def _check_credentials(settings: AppSettings) -> tuple[bool, str]:
    try:
        authorization_value(settings.credentials())
    except MissingCredentialsError as exc:
        return False, str(exc)
    return True, "Basic authorization header derived"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="BLOCKSTACK-D2 Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    ok_creds, detail_creds = _check_credentials(settings)
    table.add_row("Credentials", "OK" if ok_creds else "FAIL", detail_creds)
    table.add_row("API base_url", "OK", settings.api_base_url)

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_http(settings.api_base_url, settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_creds:
        _console.print(
            "\n[yellow]Note:[/yellow] run `blockstack-d2 doctor setup-credentials` "
            "or set BLOCKSTACK_D2_APP_ID / BLOCKSTACK_D2_APP_SECRET."
        )


@app.command(name="setup-credentials")
def setup_credentials() -> None:
    """Interactive credentials setup (stores config in the user config .env)."""

    settings = AppSettings()

    app_id = typer.prompt("App id").strip()
    app_secret = typer.prompt("App secret", hide_input=True, confirmation_prompt=False).strip()
    base_url = typer.prompt("API base URL", default=settings.api_base_url, show_default=True).strip()

    if not app_id or not app_secret:
        raise typer.BadParameter("app id and app secret are required")

    env_path = write_user_env_vars(
        {
            "BLOCKSTACK_D2_APP_ID": app_id,
            "BLOCKSTACK_D2_APP_SECRET": app_secret,
            "BLOCKSTACK_D2_API_BASE_URL": base_url,
        }
    )

    _console.print(f"[green]Saved credentials to:[/green] {env_path}")
