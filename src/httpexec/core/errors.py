"""Taxonomía de errores del cliente.

Por qué solo dos tipos:
- El llamador necesita distinguir "el servidor rechazó la petición" (con
  código y quizá texto) de "algo más falló" (con una causa opaca).
- Cualquier otro fallo se consolida en `GenericError`.
"""

from __future__ import annotations


class ClientError(Exception):
    """Base de todos los fallos de ejecución."""


class ServerResponseError(ClientError):
    """El servidor respondió con un status fuera de [200, 208]."""

    def __init__(self, code: int, content: str | None = None) -> None:
        self.code = code
        self.content = content
        super().__init__(code, content)

    def __str__(self) -> str:
        if self.content:
            return f"Server returned error {self.code}: {self.content}"
        return f"Server returned error {self.code}"

    def __repr__(self) -> str:
        return f"ServerResponseError(code={self.code!r}, content={self.content!r})"


class GenericError(ClientError):
    """Cualquier otro fallo (transporte, headers, etc.) con su causa original."""

    def __init__(self, source: BaseException) -> None:
        self.source = source
        super().__init__(source)

    def __str__(self) -> str:
        return f"Client error: {self.source}"

    def __repr__(self) -> str:
        return f"GenericError(source={self.source!r})"
