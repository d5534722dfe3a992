"""Core: contrato de cliente, dominio, errores y configuración.

Por qué separado de `adapters`:
- El Core depende solo de abstracciones; los transportes concretos viven fuera.
"""
