"""Decorador de autenticación Bearer.

Por qué un decorador:
- Añade `Authorization: Bearer <token>` a cada request sin importar qué
  transporte la envía al final.
- Cumple el mismo contrato `Client`, así que puede envolver a otro decorador
  o al transporte terminal (cadena lineal, sin ciclos).
"""

from __future__ import annotations

from pydantic import SecretStr

from httpexec.core.domain.headers import InvalidHeaderValue, validate_header_value
from httpexec.core.domain.models import HttpRequest, HttpResponse
from httpexec.core.errors import GenericError
from httpexec.core.interfaces.client import Client


class BearerTokenAuthClient:
    """Envuelve otro `Client` y añade un header de autorización Bearer."""

    def __init__(self, client: Client, token: str | SecretStr) -> None:
        self._client = client
        if isinstance(token, SecretStr):
            token = token.get_secret_value()
        self._token = SecretStr(str(token))

    def base(self) -> str:
        return self._client.base()

    async def send(self, request: HttpRequest) -> HttpResponse:
        bearer = f"Bearer {self._token.get_secret_value()}"
        try:
            value = validate_header_value(bearer)
        except InvalidHeaderValue as exc:
            raise GenericError(exc) from exc

        # Asignación por item: sobreescribe, nunca duplica. httpx oculta
        # `authorization` en el repr de Headers.
        request.headers["Authorization"] = value
        return await self._client.send(request)

    def __repr__(self) -> str:
        return f"BearerTokenAuthClient(client={self._client!r}, token={self._token!r})"
