"""Ejecutor de transporte con reintentos ante 202.

El API de BGG responde `202 Accepted` cuando encola el trabajo (p.ej. una
colección grande) y los datos aún no están listos. Este módulo re-emite el
mismo request con backoff exponencial acotado y clasifica el resto de fallos.
"""

from __future__ import annotations

import asyncio
import logging

import httpx

from core.domain.requests import RawResponse, RequestDescriptor
from core.errors import HttpError, InvalidRequestError, MaxRetryError
from core.interfaces.timer import Sleeper

logger = logging.getLogger(__name__)


class TransportExecutor:
    """Convierte un `RequestDescriptor` en una `RawResponse` o un error terminal."""

    # 5 intentos en total: espera 200, 400, 800 y 1600 ms entre ellos.
    MAX_RETRIES = 4
    INITIAL_BACKOFF_MS = 200

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str,
        *,
        sleep: Sleeper = asyncio.sleep,
    ) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._sleep = sleep

    def build_request(self, descriptor: RequestDescriptor) -> httpx.Request:
        """Construye un request nuevo; se llama una vez por intento."""

        url = f"{self._base_url}/{descriptor.endpoint.lstrip('/')}"
        try:
            return self._client.build_request("GET", url, params=list(descriptor.query))
        except httpx.InvalidURL as exc:
            raise InvalidRequestError(f"cannot build request for {url!r}: {exc}") from exc

    @classmethod
    def backoff_seconds(cls, retries: int) -> float:
        return cls.INITIAL_BACKOFF_MS * (2**retries) / 1000

    async def send(self, descriptor: RequestDescriptor) -> RawResponse:
        """Envía el request, reintentando mientras el API responda 202.

        Raises:
            HttpError: fallo de red o status 4xx/5xx (sin reintento).
            MaxRetryError: el 202 persistió tras `MAX_RETRIES` reintentos.
            InvalidRequestError: el descriptor no produce una URL válida.
        """

        retries = 0
        while True:
            request = self.build_request(descriptor)
            try:
                response = await self._client.send(request)
            except httpx.RequestError as exc:
                raise HttpError(f"request to {request.url} failed: {exc}", url=str(request.url)) from exc

            if response.status_code == httpx.codes.ACCEPTED:
                if retries >= self.MAX_RETRIES:
                    raise MaxRetryError(retries)
                delay = self.backoff_seconds(retries)
                retries += 1
                logger.debug("%s accepted but not ready, retry %d in %.1fs", request.url, retries, delay)
                await self._sleep(delay)
                continue

            # 4xx/5xx son terminales; cualquier otro status es éxito.
            if response.is_error:
                message = f"HTTP {response.status_code} from {request.url}"
                cause = httpx.HTTPStatusError(message, request=request, response=response)
                raise HttpError(message, status_code=response.status_code, url=str(request.url)) from cause

            return RawResponse(
                status_code=response.status_code,
                text=response.text,
                url=str(response.url),
            )
