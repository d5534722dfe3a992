"""Validación y redacción de valores de header."""

from __future__ import annotations

from typing import Mapping

SENSITIVE_HEADERS = frozenset({"authorization", "proxy-authorization"})
REDACTED = "<redacted>"


class InvalidHeaderValue(ValueError):
    """El texto no puede usarse como valor de header HTTP."""


def validate_header_value(value: str) -> str:
    """Devuelve `value` si es un valor de header legal.

    Solo se aceptan ASCII visible (0x20-0x7E) y tabulador horizontal; bytes
    de control, DEL o caracteres no ASCII se rechazan.
    """

    for position, char in enumerate(value):
        code = ord(char)
        # Sin bytes >= 0x80: httpx codifica los valores de header como ASCII.
        if code == 0x09 or 0x20 <= code <= 0x7E:
            continue
        raise InvalidHeaderValue(
            f"invalid header value: forbidden character 0x{code:02x} at position {position}"
        )
    return value


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Copia de headers apta para mostrar: los sensibles quedan ocultos."""

    out: dict[str, str] = {}
    for key, value in headers.items():
        out[key] = REDACTED if key.lower() in SENSITIVE_HEADERS else value
    return out
