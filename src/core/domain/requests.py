"""Descriptores de request y respuestas crudas.

Por qué valores inmutables:
- Un reintento es una operación de red nueva; el descriptor se vuelve a
  emitir tal cual, nunca se modifica entre intentos.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class RequestDescriptor(BaseModel):
    """GET re-emitible: endpoint relativo a la base URL + query ordenada."""

    model_config = ConfigDict(frozen=True)

    endpoint: str = Field(
        ...,
        min_length=1,
        description="Path del endpoint relativo a la base URL (p.ej. 'collection').",
    )
    query: tuple[tuple[str, str], ...] = Field(
        default=(),
        description="Parámetros de query en orden de emisión.",
    )


class RawResponse(BaseModel):
    """Resultado sin tipar de un intento exitoso."""

    model_config = ConfigDict(frozen=True)

    status_code: int = Field(..., description="Status tal cual lo envió el servidor (sin acotar).")
    text: str = Field(default="", description="Body completo ya leído.")
    url: str = Field(..., description="URL final del request.")
