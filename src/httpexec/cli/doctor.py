"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from httpexec.core.config import ClientSettings, write_user_env_vars
from httpexec.core.domain.headers import InvalidHeaderValue, validate_header_value
from httpexec.core.errors import ClientError
from httpexec.core.interfaces.client import execute
from httpexec.core.logging_setup import configure_logging
from httpexec.core.services.composition import build_client
from httpexec.core.services.requests import build_request

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(settings: ClientSettings) -> tuple[bool, str]:
    chain, terminal = build_client(settings)
    try:
        response = await execute(chain, build_request(chain, "GET", ""))
        return True, f"HTTP {response.status_code}"
    except ClientError as exc:
        return False, str(exc)
    finally:
        await terminal.aclose()


def _check_token(settings: ClientSettings) -> tuple[str, str]:
    if settings.token is None:
        return "OPTIONAL", "No token set -> requests are sent unauthenticated"
    try:
        validate_header_value(f"Bearer {settings.token.get_secret_value()}")
    except InvalidHeaderValue as exc:
        return "FAIL", str(exc)
    return "OK", "Bearer auth enabled"


@app.command()
def run(
    skip_http: bool = typer.Option(False, "--skip-http", help="Do not contact the base URL."),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = ClientSettings()
    configure_logging(settings.log_level, json=settings.log_json)

    table = Table(title="httpexec Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Base URL", "OK", settings.base_url)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row(
        "Redirects",
        "WARN" if settings.follow_redirects else "OK",
        "followed by transport (3xx never reach validation)" if settings.follow_redirects else "not followed",
    )

    token_status, token_detail = _check_token(settings)
    table.add_row("Token", token_status, token_detail)

    if not skip_http:
        ok_http, detail_http = asyncio.run(_check_http(settings))
        table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    base_url = typer.prompt("Base URL", default=ClientSettings().base_url, show_default=True).strip()
    token = typer.prompt("Bearer token (empty for none)", default="", hide_input=True, show_default=False).strip()

    if not base_url:
        raise typer.BadParameter("base_url is required")

    values = {"HTTPEXEC_BASE_URL": base_url}
    if token:
        try:
            validate_header_value(f"Bearer {token}")
        except InvalidHeaderValue as exc:
            raise typer.BadParameter(str(exc)) from exc
        values["HTTPEXEC_TOKEN"] = token

    env_path = write_user_env_vars(values)

    _console.print(f"[green]Saved config to:[/green] {env_path}")
