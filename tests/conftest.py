from __future__ import annotations

from typing import Callable

import httpx
import pytest

from core.config import AppSettings
from core.services.api import BoardGameGeekApi

BASE_URL = "http://bgg.test/xmlapi2"

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingSleep:
    """Fake `asyncio.sleep`: records each delay and returns immediately."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


class MockServer:
    """Wraps a handler and keeps every request it received."""

    def __init__(self, handler: Handler) -> None:
        self._handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


def sequence(*responses: httpx.Response) -> Handler:
    """Handler that answers with `responses` in order, repeating the last one."""

    queue = list(responses)

    def _handler(request: httpx.Request) -> httpx.Response:
        if len(queue) > 1:
            return queue.pop(0)
        return queue[0]

    return _handler


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(base_url=BASE_URL)


@pytest.fixture
def fake_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def make_api(settings: AppSettings, fake_sleep: RecordingSleep):
    """Factory: `make_api(handler) -> (api, server)` backed by a mock transport."""

    def _make(handler: Handler) -> tuple[BoardGameGeekApi, MockServer]:
        server = MockServer(handler)
        api = BoardGameGeekApi(settings, client=server.client(), sleep=fake_sleep)
        return api, server

    return _make


COLLECTION_XML = """<?xml version="1.0" encoding="utf-8" standalone="yes"?>
<items totalitems="2" termsofuse="https://boardgamegeek.com/xmlapi/termsofuse" pubdate="Sat, 17 Oct 2026 10:00:00 +0000">
  <item objecttype="thing" objectid="13" subtype="boardgame" collid="1001">
    <name sortindex="1">Catan</name>
    <yearpublished>1995</yearpublished>
    <image>https://cf.geekdo-images.com/catan.jpg</image>
    <thumbnail>https://cf.geekdo-images.com/catan_t.jpg</thumbnail>
    <status own="1" prevowned="0" fortrade="0" want="0" wanttoplay="1" wanttobuy="0" wishlist="0" preordered="0" lastmodified="2026-01-02 10:11:12"/>
    <numplays>12</numplays>
  </item>
  <item objecttype="thing" objectid="822" subtype="boardgame" collid="1002">
    <name sortindex="1">Carcassonne</name>
    <yearpublished>2000</yearpublished>
    <status own="1" prevowned="0" fortrade="1" want="0" wanttoplay="0" wanttobuy="0" wishlist="0" preordered="0" lastmodified="2026-02-03 10:11:12"/>
    <numplays>0</numplays>
  </item>
</items>
"""

COLLECTION_BRIEF_XML = """<items totalitems="1">
  <item objecttype="thing" objectid="13" subtype="boardgame" collid="1001">
    <name sortindex="1">Catan</name>
    <status own="0" prevowned="0" fortrade="0" want="0" wanttoplay="0" wanttobuy="0" wishlist="1" wishlistpriority="2" preordered="0" lastmodified="2026-01-02 10:11:12"/>
  </item>
</items>
"""

ERRORS_XML = """<?xml version="1.0" encoding="utf-8" standalone="yes"?>
<errors>
  <error>
    <message>Invalid username specified</message>
  </error>
</errors>
"""

HOT_XML = """<items termsofuse="https://boardgamegeek.com/xmlapi/termsofuse">
  <item id="342942" rank="2">
    <thumbnail value="https://cf.geekdo-images.com/ark_t.jpg"/>
    <name value="Ark Nova"/>
    <yearpublished value="2021"/>
  </item>
  <item id="224517" rank="1">
    <thumbnail value="https://cf.geekdo-images.com/brass_t.jpg"/>
    <name value="Brass: Birmingham"/>
    <yearpublished value="2018"/>
  </item>
</items>
"""

SEARCH_XML = """<items total="2" termsofuse="https://boardgamegeek.com/xmlapi/termsofuse">
  <item type="boardgame" id="13">
    <name type="primary" value="Catan"/>
    <yearpublished value="1995"/>
  </item>
  <item type="boardgameexpansion" id="926">
    <name type="primary" value="Catan: Cities &amp; Knights"/>
    <yearpublished value="1998"/>
  </item>
</items>
"""
