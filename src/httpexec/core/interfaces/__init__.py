"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el Core depende de abstracciones.
"""

from httpexec.core.interfaces.client import Client, execute

__all__ = ["Client", "execute"]
