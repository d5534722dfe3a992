"""CLI principal.

Por qué Typer:
- Comandos tipados con ayuda autogenerada.
- La lógica vive en el Core; aquí solo se parsean argumentos y se presenta.
"""

from __future__ import annotations

import asyncio

import typer
from pydantic import SecretStr
from rich.console import Console

from httpexec.cli import doctor
from httpexec.cli.ui_components import (
    build_body_panel,
    build_error_panel,
    build_exchange_table,
    print_banner,
)
from httpexec.core.config import ClientSettings
from httpexec.core.domain.models import HttpRequest, HttpResponse
from httpexec.core.errors import ClientError
from httpexec.core.interfaces.client import execute
from httpexec.core.logging_setup import configure_logging
from httpexec.core.services.composition import build_client
from httpexec.core.services.requests import build_request

app = typer.Typer(no_args_is_help=True, help="Execute HTTP requests with status validation.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _parse_headers(raw: list[str]) -> dict[str, str]:
    headers: dict[str, str] = {}
    for item in raw:
        if ":" not in item:
            raise typer.BadParameter(f"header must be 'Name: value', got {item!r}")
        key, value = item.split(":", 1)
        headers[key.strip()] = value.strip()
    return headers


async def _send(
    settings: ClientSettings,
    method: str,
    path: str,
    headers: dict[str, str],
    data: str,
) -> tuple[HttpRequest, HttpResponse]:
    chain, terminal = build_client(settings)
    try:
        request = build_request(chain, method, path, headers=headers, body=data)
        response = await execute(chain, request)
        return request, response
    finally:
        await terminal.aclose()


@app.command()
def send(
    method: str = typer.Argument(..., help="HTTP method (GET, POST, ...)."),
    path: str = typer.Argument(..., help="Path relative to the base URL, or an absolute URL."),
    data: str = typer.Option("", "--data", "-d", help="Request body (UTF-8 text)."),
    header: list[str] = typer.Option([], "--header", "-H", help="Extra header 'Name: value'."),
    base_url: str | None = typer.Option(None, "--base-url", help="Override the configured base URL."),
    token: str | None = typer.Option(None, "--token", help="Bearer token (overrides config)."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Do not print the banner."),
) -> None:
    """Send one request through the configured client chain."""

    settings = ClientSettings()
    configure_logging(settings.log_level, json=settings.log_json)

    updates: dict[str, object] = {}
    if base_url:
        updates["base_url"] = base_url
    if token:
        updates["token"] = SecretStr(token)
    if updates:
        settings = settings.model_copy(update=updates)

    if not quiet:
        print_banner(_console)

    try:
        request, response = asyncio.run(
            _send(settings, method, path, _parse_headers(header), data)
        )
    except ClientError as exc:
        _console.print(build_error_panel(exc))
        raise typer.Exit(code=1) from exc

    _console.print(build_exchange_table(request, response))
    _console.print(build_body_panel(response))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
