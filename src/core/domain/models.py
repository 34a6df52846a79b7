"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Un documento que no encaja con el modelo falla la validación; eso es lo que
  permite distinguir datos esperados de un sobre de error del API.

Nota:
- Estos modelos describen *qué* devuelve el API, no *cómo* se obtiene.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field, field_validator, model_validator

from core.domain.xml_model import XmlModel, unwrap_text, unwrap_value


class ThingType(str, Enum):
    """Tipos de "thing" que acepta el API en colección y búsqueda."""

    BOARD_GAME = "boardgame"
    BOARD_GAME_EXPANSION = "boardgameexpansion"
    BOARD_GAME_ACCESSORY = "boardgameaccessory"
    RPG_ITEM = "rpgitem"
    VIDEO_GAME = "videogame"


class HotListType(str, Enum):
    """Tipos que acepta el endpoint `hot` (distintos de los de `ThingType`)."""

    BOARD_GAME = "boardgame"
    RPG = "rpg"
    VIDEO_GAME = "videogame"
    BOARD_GAME_PERSON = "boardgameperson"
    RPG_PERSON = "rpgperson"
    BOARD_GAME_COMPANY = "boardgamecompany"
    RPG_COMPANY = "rpgcompany"
    VIDEO_GAME_COMPANY = "videogamecompany"


# --- Sobre de error -------------------------------------------------------


class ApiXmlError(XmlModel):
    message: str = Field(..., min_length=1)


class ApiXmlErrors(XmlModel):
    """`<errors><error><message>Invalid username specified</message></error></errors>`.

    El API lo devuelve con status 200 en vez de los datos pedidos.
    """

    xml_tag = "errors"

    errors: list[ApiXmlError] = Field(
        ...,
        alias="error",
        min_length=1,
        description="Errores reportados por el API.",
    )

    def messages(self) -> list[str]:
        return [e.message for e in self.errors]


# --- Colección --------------------------------------------------------------


class CollectionStatus(XmlModel):
    own: bool = False
    previously_owned: bool = Field(default=False, alias="prevowned")
    for_trade: bool = Field(default=False, alias="fortrade")
    want_in_trade: bool = Field(default=False, alias="want")
    want_to_play: bool = Field(default=False, alias="wanttoplay")
    want_to_buy: bool = Field(default=False, alias="wanttobuy")
    wishlist: bool = False
    wishlist_priority: int | None = Field(default=None, alias="wishlistpriority")
    preordered: bool = False
    last_modified: str | None = Field(default=None, alias="lastmodified")


class CollectionStats(XmlModel):
    """Bloque `<stats>` (solo con `stats=1`)."""

    min_players: int | None = Field(default=None, alias="minplayers")
    max_players: int | None = Field(default=None, alias="maxplayers")
    min_playtime: int | None = Field(default=None, alias="minplaytime")
    max_playtime: int | None = Field(default=None, alias="maxplaytime")
    playing_time: int | None = Field(default=None, alias="playingtime")
    num_owned: int | None = Field(default=None, alias="numowned")
    user_rating: float | None = Field(default=None, alias="rating")
    average_rating: float | None = Field(default=None, alias="average")

    @model_validator(mode="before")
    @classmethod
    def _lift_average(cls, data: Any) -> Any:
        # `<average>` vive dentro de `<rating>`.
        if isinstance(data, dict):
            rating = data.get("rating")
            if isinstance(rating, dict) and "average" in rating and "average" not in data:
                return {**data, "average": rating["average"]}
        return data

    @field_validator("user_rating", mode="before")
    @classmethod
    def _rating_value(cls, value: object) -> object:
        value = unwrap_value(value)
        return None if value in (None, "", "N/A") else value

    @field_validator("average_rating", mode="before")
    @classmethod
    def _average_value(cls, value: object) -> object:
        return unwrap_value(value)


class CollectionItemBrief(XmlModel):
    id: int = Field(..., alias="objectid")
    collection_id: int | None = Field(default=None, alias="collid")
    item_type: str = Field(default="boardgame", alias="subtype")
    name: str = Field(..., min_length=1)
    status: CollectionStatus = Field(default_factory=CollectionStatus)

    @field_validator("name", mode="before")
    @classmethod
    def _name_text(cls, value: object) -> object:
        return unwrap_text(value)


class CollectionItem(CollectionItemBrief):
    year_published: int | None = Field(default=None, alias="yearpublished")
    image: str | None = None
    thumbnail: str | None = None
    number_of_plays: int = Field(default=0, alias="numplays")
    comment: str | None = None
    stats: CollectionStats | None = None


class CollectionBrief(XmlModel):
    """Colección con `brief=1`: solo nombre y estado de cada juego."""

    xml_tag = "items"

    total_items: int = Field(default=0, alias="totalitems")
    items: list[CollectionItemBrief] = Field(default_factory=list, alias="item")


class Collection(XmlModel):
    """Colección completa de un usuario."""

    xml_tag = "items"

    total_items: int = Field(default=0, alias="totalitems")
    items: list[CollectionItem] = Field(default_factory=list, alias="item")


# --- Hot list -----------------------------------------------------------------


class HotItem(XmlModel):
    id: int
    rank: int
    name: str
    year_published: int | None = Field(default=None, alias="yearpublished")
    thumbnail: str | None = None

    @field_validator("name", "year_published", "thumbnail", mode="before")
    @classmethod
    def _value_attr(cls, value: object) -> object:
        return unwrap_value(value)


class HotList(XmlModel):
    xml_tag = "items"

    items: list[HotItem] = Field(default_factory=list, alias="item")


# --- Búsqueda ----------------------------------------------------------------


class SearchItem(XmlModel):
    id: int
    item_type: ThingType = Field(..., alias="type")
    name: str
    year_published: int | None = Field(default=None, alias="yearpublished")

    @field_validator("name", "year_published", mode="before")
    @classmethod
    def _value_attr(cls, value: object) -> object:
        # Con varios nombres (primary + alternates) nos quedamos con el primero.
        if isinstance(value, list):
            value = value[0] if value else None
        return unwrap_value(value)


class SearchResults(XmlModel):
    xml_tag = "items"

    total: int = 0
    items: list[SearchItem] = Field(default_factory=list, alias="item")
