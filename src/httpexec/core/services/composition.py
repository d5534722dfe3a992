"""Composición de la cadena de clientes a partir de la configuración.

Por qué aquí:
- La CLI (u otro entrypoint) no necesita saber qué decoradores existen;
  pide un `Client` y lo usa con `execute`.
- Cada decorador posee exactamente un cliente interno creado antes que él.
"""

from __future__ import annotations

import httpx

from httpexec.adapters.bearer_auth import BearerTokenAuthClient
from httpexec.adapters.http_client import HttpxClient
from httpexec.core.config import ClientSettings
from httpexec.core.interfaces.client import Client


def build_client(
    settings: ClientSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> tuple[Client, HttpxClient]:
    """Devuelve `(cadena, transporte)`.

    El transporte terminal se devuelve aparte para que el llamador lo cierre
    (`aclose`) cuando termine; la cadena es lo que se pasa a `execute`.
    """

    settings = settings or ClientSettings()
    terminal = HttpxClient(settings.base_url, settings=settings, transport=transport)

    chain: Client = terminal
    if settings.token is not None:
        chain = BearerTokenAuthClient(chain, settings.token)
    return chain, terminal
