"""Adaptadores (implementaciones concretas de `Client`).

Por qué un paquete:
- Agrupa el transporte terminal (httpx) y los decoradores (auth).
- Cada módulo implementa `httpexec.core.interfaces.client.Client`.
"""

from httpexec.adapters.bearer_auth import BearerTokenAuthClient
from httpexec.adapters.http_client import HttpxClient, build_async_client

__all__ = [
    "BearerTokenAuthClient",
    "HttpxClient",
    "build_async_client",
]
