"""Endpoint `hot`: los ítems más populares del momento."""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.domain.models import HotList, HotListType

if TYPE_CHECKING:
    from core.services.api import BoardGameGeekApi


class HotListApi:
    endpoint = "hot"

    def __init__(self, api: BoardGameGeekApi) -> None:
        self._api = api

    async def get(self, list_type: HotListType = HotListType.BOARD_GAME) -> HotList:
        descriptor = self._api.build(self.endpoint, [("type", list_type.value)])
        return await self._api.execute(descriptor, HotList)
