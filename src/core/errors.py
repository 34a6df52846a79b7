"""Errores del cliente.

Cada fallo de una llamada lógica termina en exactamente una de estas
excepciones, así que el llamador puede distinguirlas con `except`.
"""

from __future__ import annotations


class BoardGameGeekError(Exception):
    """Base class for all client errors."""


class HttpError(BoardGameGeekError):
    """Transport failure or a 4xx/5xx status.

    `status_code` is `None` when no response was received at all.
    """

    def __init__(self, message: str, *, status_code: int | None = None, url: str | None = None) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(message)


class MaxRetryError(BoardGameGeekError):
    """The API kept answering 202 (accepted) after every permitted retry."""

    def __init__(self, retries: int) -> None:
        self.retries = retries
        super().__init__(f"data still not ready after {retries} retries")


class UnexpectedResponseError(BoardGameGeekError):
    """Body matched neither the expected type nor the API error envelope."""

    def __init__(self, original: Exception) -> None:
        self.original = original
        super().__init__(f"unexpected response from API: {original}")


class ApiError(BoardGameGeekError):
    """The API answered successfully but reported an error in the body."""

    def __init__(self, messages: list[str]) -> None:
        self.messages = messages
        detail = "; ".join(messages) if messages else "unknown error"
        super().__init__(f"API returned an error: {detail}")


class InvalidRequestError(BoardGameGeekError):
    """A request descriptor could not be turned into an HTTP request."""
