"""Modelos del dominio: request/response de un intercambio HTTP.

Por qué httpx y no modelos propios:
- `httpx.Request`/`httpx.Response` ya son valores opacos con URI, método,
  headers multi-map y body en bytes; duplicarlos solo añadiría conversiones.
- El Core los trata como datos: no abre sockets ni conoce el transporte.
"""

from __future__ import annotations

import httpx

HttpRequest = httpx.Request
HttpResponse = httpx.Response

# Rango cerrado [200, 208]: todo lo demás (incluidas redirecciones) es fallo.
HTTP_SUCCESS_CODES = range(200, 209)


def is_success(status: int) -> bool:
    """Indica si el status cae en el rango de éxito fijo [200, 208]."""

    return status in HTTP_SUCCESS_CODES


def is_error_status(status: int) -> bool:
    """Flag informativo: 4xx o 5xx según la clasificación HTTP estándar.

    No coincide con `is_success` para códigos como 209 o 301; es solo para
    observabilidad.
    """

    return 400 <= status <= 599


def decode_body(content: bytes) -> str | None:
    """Decodifica el body como UTF-8 estricto; `None` si no es texto válido."""

    try:
        return content.decode("utf-8")
    except UnicodeDecodeError:
        return None
