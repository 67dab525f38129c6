"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan los callers del cliente.
- Permite invertir dependencias: el Core depende de abstracciones.
"""
