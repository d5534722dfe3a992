"""Contrato de cliente ejecutable.

Por qué Protocol + función libre:
- `Client` define la superficie mínima (`send`, `base`) que implementan
  transportes y decoradores, sin herencia rígida.
- `execute` es comportamiento compartido que no se sobreescribe: recibe
  cualquier `Client` y le añade eventos estructurados y validación de status.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import httpx
import structlog

from httpexec.core.domain.models import (
    HttpRequest,
    HttpResponse,
    decode_body,
    is_error_status,
    is_success,
)
from httpexec.core.errors import ClientError, ServerResponseError

logger = structlog.get_logger(__name__)


@runtime_checkable
class Client(Protocol):
    """Contrato mínimo de un cliente HTTP (transporte o decorador).

    Reglas de diseño:
    - `send` es asíncrono y consolida todos sus fallos en `ClientError`.
    - `base` es un accesor puro y estable durante la vida de la instancia.
    - Las implementaciones se comparten entre llamadas concurrentes: `send`
      no muta estado de la instancia.
    """

    async def send(self, request: HttpRequest) -> HttpResponse:
        """Realiza un único intercambio request/response."""

        ...

    def base(self) -> str:
        """URL base configurada (raíz de los endpoints)."""

        ...


def _request_body_len(request: HttpRequest) -> int | None:
    try:
        return len(request.content)
    except httpx.RequestNotRead:
        # Body en streaming: no lo consumimos solo para medirlo.
        return None


async def execute(client: Client, request: HttpRequest) -> HttpResponse:
    """Envía `request` con `client` y valida el status de la respuesta.

    Devuelve la respuesta sin modificar si su status está en [200, 208];
    si no, lanza `ServerResponseError`. Los fallos de `send` se propagan tal
    cual, sin reintentos.
    """

    log = logger.bind(uri=str(request.url), method=request.method)
    log.debug("sending_request", body_len=_request_body_len(request))

    try:
        response = await client.send(request)
    except ClientError as exc:
        log.warning("request_failed", error=type(exc).__name__)
        raise

    status = response.status_code
    content = response.content
    log.debug(
        "response_received",
        status=status,
        response_len=len(content),
        is_error=is_error_status(status),
    )

    if not is_success(status):
        error = ServerResponseError(code=status, content=decode_body(content))
        log.warning("request_failed", error=type(error).__name__, status=status)
        raise error

    return response
