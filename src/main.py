"""Script de ejecución.

Permite `python src/main.py ...` además del script `endzeit` instalado.
"""

from __future__ import annotations

import sys

# Las barras del gauge usan caracteres Unicode; cp1252 en Windows no los codifica.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
