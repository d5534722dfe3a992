"""Construcción de requests a partir de la URL base de un cliente.

Productor mínimo de requests: junta `client.base()` con una ruta relativa.
No es un framework de endpoints.
"""

from __future__ import annotations

from typing import Mapping

import httpx

from httpexec.core.domain.models import HttpRequest
from httpexec.core.interfaces.client import Client


def join_url(base: str, path: str) -> str:
    """Une base y ruta; una URL absoluta en `path` se respeta tal cual."""

    if httpx.URL(path).is_absolute_url:
        return path
    if not path:
        return base
    return f"{base.rstrip('/')}/{path.lstrip('/')}"


def build_request(
    client: Client,
    method: str,
    path: str,
    *,
    headers: Mapping[str, str] | None = None,
    body: bytes | str = b"",
    query: Mapping[str, str] | None = None,
) -> HttpRequest:
    content = body.encode("utf-8") if isinstance(body, str) else body
    return httpx.Request(
        method.upper(),
        join_url(client.base(), path),
        headers=dict(headers or {}),
        content=content,
        params=dict(query) if query else None,
    )
