"""Modelos y entidades del dominio.

Por qué:
- Aquí viven los valores de un intercambio (request/response) y las reglas
  puras sobre ellos (rango de éxito, legalidad de headers).
- El dominio no conoce transportes, CLI ni configuración.
"""
