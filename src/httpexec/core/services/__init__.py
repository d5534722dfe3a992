"""Servicios del Core: construcción de requests y composición de clientes."""
