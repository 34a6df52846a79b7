"""Ejecuta la CLI `bgg` con `python src/main.py ...`."""

from __future__ import annotations

import sys

# Nombres de juegos traen acentos y símbolos; en consolas Windows (cp1252)
# Rich fallaría al imprimirlos.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run

if __name__ == "__main__":
    run()
