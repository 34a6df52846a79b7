"""Decodificación de respuestas con prioridad explícita.

Orden:
1. El tipo pedido por el llamador (único camino de éxito).
2. El sobre de error del API (`<errors>`), que llega con status 200 en casos
   como un username inexistente.
3. Si nada encaja, el error del paso 1; el del paso 2 nunca se reporta.

El resultado es una unión etiquetada en vez de excepciones encadenadas, para
que la prioridad quede visible y testeable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from adapters.xml_codec import XmlDecodeError, decode_as
from core.domain.models import ApiXmlErrors
from core.errors import ApiError, UnexpectedResponseError

T = TypeVar("T")


@dataclass(frozen=True)
class Decoded(Generic[T]):
    value: T

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class ApiFailure:
    """El body es un sobre de error del API."""

    errors: ApiXmlErrors

    def unwrap(self):
        raise ApiError(self.errors.messages())


@dataclass(frozen=True)
class UnexpectedFailure:
    """El body no encaja con nada conocido; `error` es el fallo del tipo pedido."""

    error: XmlDecodeError

    def unwrap(self):
        raise UnexpectedResponseError(self.error) from self.error


DecodeOutcome = Union[Decoded[T], ApiFailure, UnexpectedFailure]


def decode_response(body: str, target: type[T]) -> DecodeOutcome[T]:
    try:
        return Decoded(decode_as(body, target))
    except XmlDecodeError as exc:
        target_error = exc

    try:
        envelope = decode_as(body, ApiXmlErrors)
    except XmlDecodeError:
        return UnexpectedFailure(target_error)
    return ApiFailure(envelope)
