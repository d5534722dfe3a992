"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Centraliza la redacción de headers sensibles antes de mostrar nada.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from httpexec.core.domain.headers import redact_headers
from httpexec.core.domain.models import HttpRequest, HttpResponse, decode_body
from httpexec.core.errors import ClientError, ServerResponseError


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("httpexec", style="bold cyan")
    subtitle = Text("Request • Validación • Decoradores", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_exchange_table(request: HttpRequest, response: HttpResponse) -> Table:
    """Tabla con el intercambio; los headers sensibles nunca se muestran."""

    table = Table(title=Text(f"{request.method} {request.url}"))
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    table.add_row("Status", Text(str(response.status_code)))
    for key, value in redact_headers(request.headers).items():
        table.add_row(Text(f"> {key}"), Text(value))
    for key, value in response.headers.items():
        table.add_row(Text(f"< {key}"), Text(value))
    return table


def build_body_panel(response: HttpResponse) -> Panel:
    text = decode_body(response.content)
    if text is None:
        body = Text(f"<{len(response.content)} bytes, not UTF-8>", style="dim")
    else:
        body = Text(text or "<empty>")
    return Panel(body, title="Body", border_style="green")


def build_error_panel(error: ClientError) -> Panel:
    """Panel para presentar un `ClientError`."""

    body = Text()
    if isinstance(error, ServerResponseError):
        body.append(f"Status: {error.code}\n", style="bold")
        body.append(error.content if error.content is not None else "<no text body>")
    else:
        body.append(str(error))
    return Panel(body, title=Text(type(error).__name__, style="bold red"), border_style="red")
