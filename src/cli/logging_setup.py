"""Configuración de logging para la CLI.

La librería solo crea loggers por módulo (`logging.getLogger(__name__)`);
quien la usa decide handlers y nivel. Aquí: Rich en stderr.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

DEFAULT_LOG_FORMAT = "%(name)s: %(message)s"


def setup_logging(*, verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format=DEFAULT_LOG_FORMAT,
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
        force=True,
    )
    # httpx loguea cada request en INFO; solo lo queremos en modo verbose.
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)
