"""Lanzador de la CLI `bgg` desde un checkout sin instalar.

Uso:
- `python -m main hot`
- `python -m main collection <username> --wishlist`

Añade `src/` al path (los paquetes `cli`, `core` y `adapters` viven ahí) y
delega en `cli.main.run`. Con `pip install -e .` basta el script `bgg`.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
