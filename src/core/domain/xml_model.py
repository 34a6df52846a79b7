"""Base de modelos respaldados por XML.

El codec (`adapters.xml_codec`) convierte cada elemento en datos planos:
atributos y tags hijos como claves, texto bajo `text`. XML no distingue entre
"un hijo" y "lista de un hijo", así que esta base normaliza eso antes de que
Pydantic valide.
"""

from __future__ import annotations

from typing import Any, ClassVar, get_origin

from pydantic import BaseModel, model_validator
from pydantic.config import ConfigDict


def unwrap_value(value: Any) -> Any:
    """`<name value="Catan"/>` -> "Catan"."""

    if isinstance(value, dict):
        return value.get("value")
    return value


def unwrap_text(value: Any) -> Any:
    """`<name sortindex="1">Catan</name>` -> "Catan"."""

    if isinstance(value, dict):
        return value.get("text")
    return value


class XmlModel(BaseModel):
    """Modelo validable desde la salida de `element_to_data`.

    `xml_tag` fija el tag raíz esperado cuando el modelo es el documento
    completo; `None` acepta cualquier raíz.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    xml_tag: ClassVar[str | None] = None

    @model_validator(mode="before")
    @classmethod
    def _normalize_xml_data(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"text": data} if data else {}
        if not isinstance(data, dict):
            return data

        out = dict(data)
        for name, field in cls.model_fields.items():
            key = field.alias or name
            if key in out and get_origin(field.annotation) is list and not isinstance(out[key], list):
                out[key] = [out[key]]
        return out
