"""Endpoint `search`: búsqueda de ítems por nombre."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from core.domain.models import SearchResults, ThingType

if TYPE_CHECKING:
    from core.services.api import BoardGameGeekApi


class SearchQuery(BaseModel):
    query: str = Field(..., min_length=1)
    types: list[ThingType] = Field(default_factory=lambda: [ThingType.BOARD_GAME])
    exact: bool = False

    def to_params(self) -> list[tuple[str, str]]:
        params: list[tuple[str, str]] = [("query", self.query)]
        if self.types:
            params.append(("type", ",".join(t.value for t in self.types)))
        if self.exact:
            params.append(("exact", "1"))
        return params


class SearchApi:
    endpoint = "search"

    def __init__(self, api: BoardGameGeekApi) -> None:
        self._api = api

    async def get(self, query: SearchQuery) -> SearchResults:
        descriptor = self._api.build(self.endpoint, query.to_params())
        return await self._api.execute(descriptor, SearchResults)

    async def search(self, query: str, types: Sequence[ThingType] = (ThingType.BOARD_GAME,)) -> SearchResults:
        return await self.get(SearchQuery(query=query, types=list(types)))

    async def search_exact(self, query: str, types: Sequence[ThingType] = (ThingType.BOARD_GAME,)) -> SearchResults:
        """Solo resultados cuyo nombre coincide exactamente con `query`."""

        return await self.get(SearchQuery(query=query, types=list(types), exact=True))
