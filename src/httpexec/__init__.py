"""httpexec: ejecución de requests HTTP con validación de status y decoradores.

API pública:
- `Client`: contrato (`send`, `base`) que implementan transportes y decoradores.
- `execute`: ejecución compartida con eventos estructurados y validación [200, 208].
- `HttpxClient`: transporte terminal sobre httpx.
- `BearerTokenAuthClient`: decorador que inyecta `Authorization: Bearer <token>`.
"""

from httpexec.adapters.bearer_auth import BearerTokenAuthClient
from httpexec.adapters.http_client import HttpxClient
from httpexec.core.domain.models import HTTP_SUCCESS_CODES
from httpexec.core.errors import ClientError, GenericError, ServerResponseError
from httpexec.core.interfaces.client import Client, execute

__version__ = "0.1.0"

__all__ = [
    "BearerTokenAuthClient",
    "Client",
    "ClientError",
    "GenericError",
    "HTTP_SUCCESS_CODES",
    "HttpxClient",
    "ServerResponseError",
    "execute",
]
