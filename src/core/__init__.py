"""Core: configuración y dominio del cliente (sin I/O)."""
