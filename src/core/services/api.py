"""Cliente compuesto del XML API2 de BoardGameGeek.

Por qué un servicio:
- Encadena transporte (reintentos 202) y decodificación en un único punto de
  entrada, `execute`, que los endpoints reutilizan.
- Cada llamada lógica es independiente: no hay estado compartido entre
  llamadas concurrentes más allá del `httpx.AsyncClient`.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from typing import TypeVar

import httpx

from adapters.endpoints import CollectionApi, HotListApi, SearchApi
from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import Collection, CollectionBrief
from core.domain.requests import RequestDescriptor
from core.interfaces.timer import Sleeper
from core.services.response_decoder import decode_response
from core.services.transport_executor import TransportExecutor

T = TypeVar("T")


class BoardGameGeekApi:
    """API for making requests to https://boardgamegeek.com/xmlapi2.

    Usable as an async context manager; a client passed in by the caller is
    borrowed and left open on close.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        sleep: Sleeper = asyncio.sleep,
    ) -> None:
        self._settings = settings or AppSettings()
        self._owns_client = client is None
        self._client = client or build_async_client(self._settings)
        self._executor = TransportExecutor(
            self._client,
            self._settings.normalized_base_url(),
            sleep=sleep,
        )

    @property
    def base_url(self) -> str:
        return self._settings.normalized_base_url()

    async def __aenter__(self) -> BoardGameGeekApi:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    @staticmethod
    def build(endpoint: str, query: Iterable[tuple[str, str]] = ()) -> RequestDescriptor:
        return RequestDescriptor(endpoint=endpoint, query=tuple((str(k), str(v)) for k, v in query))

    async def execute(self, descriptor: RequestDescriptor, target: type[T]) -> T:
        """Ejecuta una llamada lógica y devuelve `target` decodificado.

        Raises:
            HttpError, MaxRetryError, InvalidRequestError: fallos de transporte.
            ApiError: el API devolvió su sobre de error.
            UnexpectedResponseError: el body no encaja con `target` ni con el sobre.
        """

        raw = await self._executor.send(descriptor)
        return decode_response(raw.text, target).unwrap()

    def collection(self) -> CollectionApi[Collection]:
        """Colección completa de un usuario."""

        return CollectionApi(self, Collection)

    def collection_brief(self) -> CollectionApi[CollectionBrief]:
        """Colección resumida (`brief=1`): menos datos, respuesta más rápida."""

        return CollectionApi(self, CollectionBrief)

    def hot_list(self) -> HotListApi:
        return HotListApi(self)

    def search(self) -> SearchApi:
        return SearchApi(self)
