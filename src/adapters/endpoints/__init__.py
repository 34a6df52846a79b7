"""Endpoints del API (colección, hot list, búsqueda).

Por qué un paquete:
- Cada módulo agrupa el builder de query y la API de un recurso.
- Todos delegan en `BoardGameGeekApi.execute`, que concentra reintentos y
  decodificación.
"""

from adapters.endpoints.collection import CollectionApi, CollectionQuery
from adapters.endpoints.hot_list import HotListApi
from adapters.endpoints.search import SearchApi, SearchQuery

__all__ = [
	"CollectionApi",
	"CollectionQuery",
	"HotListApi",
	"SearchApi",
	"SearchQuery",
]
