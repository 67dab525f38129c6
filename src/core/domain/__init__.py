"""Modelos y entidades del dominio.

Por qué:
- Aquí viven credenciales, endpoints, requests/resultados y errores.
- El dominio no conoce httpx ni la CLI: solo conceptos del registry.
"""
