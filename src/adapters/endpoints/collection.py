"""Endpoint `collection`: juegos de la colección de un usuario.

El API suele responder 202 la primera vez que se pide una colección; los
reintentos los maneja el ejecutor de transporte.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from pydantic import BaseModel, Field

from core.domain.models import Collection, CollectionBrief, ThingType

if TYPE_CHECKING:
    from core.services.api import BoardGameGeekApi

C = TypeVar("C", Collection, CollectionBrief)


class CollectionQuery(BaseModel):
    """Filtros opcionales de `collection`; `None` = no enviar el parámetro."""

    item_type: ThingType | None = Field(default=None, description="subtype")
    exclude_item_type: ThingType | None = Field(default=None, description="excludesubtype")
    include_stats: bool | None = Field(default=None, description="stats")
    own: bool | None = None
    wishlist: bool | None = None
    want_to_play: bool | None = None
    want_to_buy: bool | None = None
    preordered: bool | None = None
    previously_owned: bool | None = None
    for_trade: bool | None = None
    rated: bool | None = None
    played: bool | None = None
    min_plays: int | None = Field(default=None, ge=0)
    max_plays: int | None = Field(default=None, ge=0)

    def to_params(self, username: str, *, brief: bool = False) -> list[tuple[str, str]]:
        params: list[tuple[str, str]] = [("username", username)]
        if brief:
            params.append(("brief", "1"))
        if self.item_type is not None:
            params.append(("subtype", self.item_type.value))
        if self.exclude_item_type is not None:
            params.append(("excludesubtype", self.exclude_item_type.value))

        flags = (
            ("stats", self.include_stats),
            ("own", self.own),
            ("wishlist", self.wishlist),
            ("wanttoplay", self.want_to_play),
            ("wanttobuy", self.want_to_buy),
            ("preordered", self.preordered),
            ("prevowned", self.previously_owned),
            ("trade", self.for_trade),
            ("rated", self.rated),
            ("played", self.played),
        )
        for key, value in flags:
            if value is not None:
                params.append((key, "1" if value else "0"))

        if self.min_plays is not None:
            params.append(("minplays", str(self.min_plays)))
        if self.max_plays is not None:
            params.append(("maxplays", str(self.max_plays)))
        return params


class CollectionApi(Generic[C]):
    """Consultas de colección; `target` decide si se pide en modo brief."""

    endpoint = "collection"

    def __init__(self, api: BoardGameGeekApi, target: type[C]) -> None:
        self._api = api
        self._target = target

    async def get(self, username: str, query: CollectionQuery | None = None) -> C:
        query = query or CollectionQuery()
        brief = self._target is CollectionBrief
        descriptor = self._api.build(self.endpoint, query.to_params(username, brief=brief))
        return await self._api.execute(descriptor, self._target)

    async def get_owned(self, username: str) -> C:
        return await self.get(username, CollectionQuery(own=True))

    async def get_wishlist(self, username: str) -> C:
        return await self.get(username, CollectionQuery(wishlist=True))
