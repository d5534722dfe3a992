"""Transporte terminal sobre httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y política de redirecciones.
- Consolida todas las excepciones de httpx en `GenericError`, como exige el
  contrato `Client`.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from httpexec.core.config import ClientSettings
from httpexec.core.domain.models import HttpRequest, HttpResponse
from httpexec.core.errors import GenericError


def build_async_client(
    settings: ClientSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todas las instancias se comporten igual.
    - Por defecto NO sigue redirecciones: un 3xx debe llegar a `execute` para
      clasificarse como fallo.
    """

    settings = settings or ClientSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=settings.follow_redirects,
        headers=headers,
        transport=transport,
    )


class HttpxClient:
    """Implementación terminal de `Client` usando `httpx.AsyncClient`."""

    def __init__(
        self,
        base_url: str,
        *,
        client: httpx.AsyncClient | None = None,
        settings: ClientSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url
        self._owns_client = client is None
        self._client = client or build_async_client(settings, transport=transport)

    def base(self) -> str:
        return self._base_url

    async def send(self, request: HttpRequest) -> HttpResponse:
        try:
            # stream=False: el body queda leído antes de devolver.
            return await self._client.send(self._with_defaults(request))
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise GenericError(exc) from exc

    def _with_defaults(self, request: HttpRequest) -> HttpRequest:
        # `AsyncClient.send` no mezcla los headers por defecto del cliente.
        # Se envía una copia: la request del llamador no cambia y sus
        # headers tienen prioridad.
        headers = httpx.Headers(request.headers)
        for key, value in self._client.headers.items():
            headers.setdefault(key, value)
        return httpx.Request(
            request.method,
            request.url,
            headers=headers,
            stream=request.stream,
            extensions=request.extensions,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpxClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"HttpxClient(base_url={self._base_url!r})"
