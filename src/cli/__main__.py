"""`python -m cli` (con `src/` en el path o el paquete instalado)."""

from cli.main import run

if __name__ == "__main__":
    run()
