"""Contrato del temporizador usado entre reintentos.

Por qué Protocol:
- El backoff no debe llamar al reloj real directamente; en tests se sustituye
  por un sleep que solo registra las esperas.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Sleeper(Protocol):
    """Cualquier callable async compatible con `asyncio.sleep`."""

    async def __call__(self, delay: float, /) -> None:
        ...
