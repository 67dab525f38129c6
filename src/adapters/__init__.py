"""Adaptadores de I/O: httpx, construcción de requests y exportación."""
