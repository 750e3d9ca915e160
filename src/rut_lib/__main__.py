"""Script de ejecución.

Permite ejecutar la CLI con `python -m rut_lib` además del script `rut`.
"""

from __future__ import annotations

from rut_lib.cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
